"""Pretty-printing of raw input chunks for debugging terminal sequences."""

from __future__ import annotations

import sys
from typing import TextIO

_RED_BOLD = "\x1b[1;31m"
_YELLOW = "\x1b[33m"
_WHITE = "\x1b[37m"
_GREEN = "\x1b[32m"
_RESET = "\x1b[0m"


def format_sequence(seq: str, comment: str = "") -> str:
    """Render ``seq`` with control characters shown as ``(code)``.

    Codes below 32 and DEL are numbered; everything else is printed as is.
    """
    out = f"{_RED_BOLD}DEBUG: "
    if comment:
        out += f"({comment})"
    for ch in seq:
        code = ord(ch)
        if code < 32 or code == 127:
            out += f"{_YELLOW}({_WHITE}{code}{_YELLOW}){_RESET}"
        else:
            out += f"{_GREEN}{ch}{_RESET}"
    return out


def print_sequence(seq: str, comment: str = "", stream: TextIO | None = None) -> None:
    # Raw mode disables output post-processing, so end the line with \r\n.
    stream = stream or sys.stderr
    stream.write(format_sequence(seq, comment) + "\r\n")
    stream.flush()
