"""
termkeys: key press events from raw terminal input

Decodes control characters, CSI and SS3 escape sequences read from an
interactive terminal into normalized key events.
"""

from termkeys.config import TermkeysOptions, guess_terminal
from termkeys.debug import format_sequence, print_sequence
from termkeys.decoder import KeyDecoder, Modifiers, decode_keys, parse_modifier
from termkeys.events import KEY_EVENT, KeyEvent
from termkeys.listeners import KeyListener, ListenerRegistry
from termkeys.terminal import Termkeys

__all__ = [
    "KEY_EVENT",
    "KeyEvent",
    "KeyDecoder",
    "Modifiers",
    "decode_keys",
    "parse_modifier",
    "KeyListener",
    "ListenerRegistry",
    "Termkeys",
    "TermkeysOptions",
    "guess_terminal",
    "format_sequence",
    "print_sequence",
]
