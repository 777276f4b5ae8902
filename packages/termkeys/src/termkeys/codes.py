"""
Static tables shared by the decoder.

Key codes mirror the legacy browser virtual-key numbering so events can be
handled the same way as DOM keyboard events.
"""

from __future__ import annotations

ESC = "\x1b"
CSI = f"{ESC}["
SS3 = f"{ESC}O"

DEL = 127

# ASCII 0-31. Index 3 reports as SIGINT and index 10 repeats EOT, matching
# what the terminals we target deliver in raw mode.
CONTROL_CODE_NAMES: tuple[str, ...] = (
    "NUL", "SOH", "STX", "SIGINT", "EOT", "ENQ", "ACK", "BEL", "Backspace",
    "Tab", "EOT", "VT", "FF", "Enter", "SO", "SI", "DLE", "DC1", "DC2", "DC3",
    "DC4", "NAK", "SYN", "ETB", "CAN", "EM", "SUB", "Escape", "FS", "GS", "RS", "US",
)

# Terminator -> (key, key_code) for CSI cursor/editing keys
CSI_CURSOR_KEYS: dict[str, tuple[str, int]] = {
    "A": ("ArrowUp", 38),
    "B": ("ArrowDown", 40),
    "C": ("ArrowRight", 39),
    "D": ("ArrowLeft", 37),
    "E": ("Enter", 13),
    "G": ("Enter", 13),
    "F": ("End", 35),
    "H": ("Home", 36),
}

# Linux console: ESC [ [ A .. ESC [ [ E
LINUX_FUNCTION_KEYS: dict[str, tuple[str, int]] = {
    "A": ("F1", 112),
    "B": ("F2", 113),
    "C": ("F3", 114),
    "D": ("F4", 115),
    "E": ("F5", 116),
}

# ESC O P .. ESC O S
SS3_FUNCTION_KEYS: dict[str, tuple[str, int]] = {
    "P": ("F1", 112),
    "Q": ("F2", 113),
    "R": ("F3", 114),
    "S": ("F4", 115),
}

# Selector -> (key, key_code) for ESC [ n ~
TILDE_KEYS: dict[int, tuple[str, int]] = {
    1: ("Home", 36),
    2: ("Insert", 45),
    3: ("Delete", 127),
    4: ("End", 35),
    5: ("PageUp", 33),
    6: ("PageDown", 34),
}

F5 = ("F5", 116)
INSERT = TILDE_KEYS[2]
FIRST_VT_FUNCTION_KEY = 17
LAST_VT_FUNCTION_KEY = 34
