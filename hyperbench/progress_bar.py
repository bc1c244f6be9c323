"""Progress bar shown while benchmarks run."""

from __future__ import annotations

import sys

from tqdm import tqdm

from .options import OutputStyleOption

_BAR_FORMAT = " {desc:<30} {bar} ETA {remaining} "


def get_progress_bar(length: int, msg: str, option: OutputStyleOption) -> tqdm:
    """Return a pre-configured progress bar; it is hidden for basic and color styles."""
    hidden = option in (OutputStyleOption.BASIC, OutputStyleOption.COLOR)
    return tqdm(
        total=length,
        desc=msg,
        disable=hidden,
        bar_format=_BAR_FORMAT,
        file=sys.stderr,
        leave=False,
        dynamic_ncols=True,
        mininterval=0.08,
    )