"""Exit code extraction and the randomized environment offset."""

from __future__ import annotations

import os
import random
from typing import Optional

_POSIX = os.name == "posix"

_MAX_OFFSET = 4096


def extract_exit_code(returncode: Optional[int]) -> Optional[int]:
    """Turn a process return code into an exit code.

    On POSIX systems a process killed by a signal is reported as 128 plus the
    signal number, as shells do.
    """
    if returncode is None:
        return None
    if _POSIX and returncode < 0:
        return 128 - returncode
    return returncode


def random_environment_offset() -> str:
    """Return a string of random length below 4096, used to shift the environment size."""
    return "X" * random.randrange(_MAX_OFFSET)