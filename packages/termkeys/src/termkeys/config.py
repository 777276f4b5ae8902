"""Options and environment lookups for termkeys."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

# Environment variable that turns on raw chunk printing
ENV_DEBUG = "TERMKEYS_DEBUG"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class TermkeysOptions:
    """Options for Termkeys."""
    resume: bool = True  # Start reading as soon as the stream is attached
    encoding: str = "utf-8"
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TermkeysOptions:
        """Build options with ``debug`` taken from ``TERMKEYS_DEBUG``."""
        env = os.environ if environ is None else environ
        return cls(debug=env.get(ENV_DEBUG, "").strip().lower() in _TRUTHY)


def guess_terminal(environ: Mapping[str, str] | None = None) -> str:
    """Best guess of the terminal emulator we are running in.

    Returns e.g. ``"konsole"``, ``"jetbrains-jediterm"``, ``"xterm"``,
    ``"linux"`` (system console) or ``"unknown"``.
    """
    env = os.environ if environ is None else environ
    if "KONSOLE_VERSION" in env:
        return "konsole"
    if "TERMINAL_EMULATOR" in env:
        return env["TERMINAL_EMULATOR"].lower()
    if "TERM" in env:
        term = env["TERM"].lower()
        return "xterm" if term.startswith("xterm") else term
    return "unknown"
