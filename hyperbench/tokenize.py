"""Splitting of comma-separated parameter lists with backslash escapes."""

from __future__ import annotations

from typing import List


def tokenize(values: str) -> List[str]:
    """Split on commas; "\\," yields a comma and "\\\\" a backslash."""
    tokens: List[str] = []
    buf: List[str] = []
    chars = iter(values)
    for c in chars:
        if c == "\\":
            nxt = next(chars, None)
            if nxt in (",", "\\"):
                buf.append(nxt)
            elif nxt is None:
                buf.append("\\")
            else:
                buf.append("\\" + nxt)
        elif c == ",":
            tokens.append("".join(buf))
            buf = []
        else:
            buf.append(c)
    tokens.append("".join(buf))
    return tokens