"""
Decoder for raw terminal key sequences.

Each chunk handed to the decoder is expected to hold one logical key
sequence: terminals write an escape sequence in a single flush, so the
decoder keeps no state between chunks. A sequence split across two reads is
not reassembled.

Handled families:
- single characters: control codes (ASCII 0-31), DEL, printable text
- CSI (``ESC [``): cursor keys, editing keys, F1-F20, xterm modifier parameter
- SS3 (``ESC O``): F1-F4 with an optional modifier qualifier, keypad Enter

Sequences that cannot be classified are dropped. The ones that look like a
key we should know about are reported on the ``termkeys.decoder`` logger.
"""

from __future__ import annotations

import logging
from time import time
from typing import Callable, Iterator, NamedTuple

from termkeys.codes import (
    CONTROL_CODE_NAMES,
    CSI,
    CSI_CURSOR_KEYS,
    DEL,
    ESC,
    F5,
    FIRST_VT_FUNCTION_KEY,
    INSERT,
    LAST_VT_FUNCTION_KEY,
    LINUX_FUNCTION_KEYS,
    SS3,
    SS3_FUNCTION_KEYS,
    TILDE_KEYS,
)
from termkeys.events import KeyEvent

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class Modifiers(NamedTuple):
    ctrl: bool = False
    alt: bool = False
    shift: bool = False


NO_MODIFIERS = Modifiers()


class _Key(NamedTuple):
    key: str
    key_code: int | None = None
    ctrl_key: bool = False
    alt_key: bool = False
    shift_key: bool = False


def _now_ms() -> int:
    return int(time() * 1000)


def _with_modifiers(key: tuple[str, int], mods: Modifiers) -> _Key:
    name, code = key
    return _Key(name, code, ctrl_key=mods.ctrl, alt_key=mods.alt, shift_key=mods.shift)


def is_upper_case(ch: str) -> bool:
    """True for an uppercase letter in Basic Latin or Latin-1/Extended-A/B."""
    return ("A" <= ch <= "Z" or "\u0080" <= ch <= "\u024f") and ch.isupper()


def parse_modifier(param: str) -> Modifiers:
    """Map the xterm modifier parameter (``CSI 1 ; m X``) to modifier flags.

    Only 2-7 carry modifiers; any other value means none.
    """
    return Modifiers(
        ctrl=param in ("5", "6", "7"),
        alt=param in ("3", "4", "7"),
        shift=param in ("2", "4", "6"),
    )


def _selector(text: str) -> int:
    return int(text) if text.isascii() and text.isdigit() else 0


def function_key(selector: int) -> tuple[str, int]:
    """Resolve ``CSI n ~`` with n in 17..34 to F6..F20.

    VT220 numbering skips 22, 27 and 30; the decrements are cumulative and
    must run in this order.
    """
    if selector > 29:
        selector -= 1
    if selector > 26:
        selector -= 1
    if selector > 21:
        selector -= 1
    return f"F{selector - 11}", 100 + selector


def _vt_function_key(selector: int) -> tuple[str, int] | None:
    if selector == 15:
        return F5
    if FIRST_VT_FUNCTION_KEY <= selector <= LAST_VT_FUNCTION_KEY:
        return function_key(selector)
    return None


def _classify_char(ch: str) -> _Key:
    code = ord(ch)
    if code < 32:
        return _Key(CONTROL_CODE_NAMES[code], code)
    if code == DEL:
        return _Key("Backspace", 8)
    return _Key(ch, code, shift_key=is_upper_case(ch))


def _classify_csi_short(
    seq: str, terminator: str, selector: int, parts: list[str], mods: Modifiers
) -> _Key | None:
    # ESC [ X and ESC [ n ; m X
    if terminator in CSI_CURSOR_KEYS:
        return _with_modifiers(CSI_CURSOR_KEYS[terminator], mods)
    if terminator == "P":
        return _Key("VK_PAUSE")
    if terminator == "Z":
        return _Key("Tab", 9, shift_key=True)
    if terminator == "~":
        if selector == 2:
            if len(parts) == 2 and parts[1] in ("2", "3", "5"):
                return _with_modifiers(INSERT, mods)
            return None
        if selector in (5, 6):
            return _with_modifiers(TILDE_KEYS[selector], mods)
        key = _vt_function_key(selector)
        if key is not None:
            return _with_modifiers(key, mods)
        logger.error(
            "Unhandled CSI sequence %r: terminator %r, selector %d",
            seq, terminator, selector,
        )
        return None
    logger.error("Unhandled CSI terminator %r in %r", terminator, seq)
    return None


def _classify_csi(seq: str) -> _Key | None:
    terminator = seq[-1]
    body = seq[2:-1]
    parts = body.split(";")

    if len(parts) == 1:
        selector = _selector(parts[0])
        mods = NO_MODIFIERS
    elif len(parts) == 2:
        selector = _selector(parts[0])
        mods = parse_modifier(parts[1])
    else:
        logger.error("Unhandled CSI parameters %r in %r", parts, seq)
        return None

    if not body or len(body) == 3:
        return _classify_csi_short(seq, terminator, selector, parts, mods)

    # Linux console F1-F5: ESC [ [ A .. ESC [ [ E
    if body == "[":
        if terminator in LINUX_FUNCTION_KEYS:
            return _Key(*LINUX_FUNCTION_KEYS[terminator])
        logger.error("Unhandled CSI terminator %r in %r", terminator, seq)
        return None

    if terminator == "~":
        key = _vt_function_key(selector) or TILDE_KEYS.get(selector)
        if key is not None:
            return _with_modifiers(key, mods)
        logger.error(
            "Unhandled CSI sequence %r: terminator %r, selector %d",
            seq, terminator, selector,
        )
    return None


def _classify_escape(seq: str) -> _Key | None:
    rest = seq[1:]
    # Keypad Enter in application mode
    if rest == "OM":
        return _Key("Enter", 13, shift_key=True)
    if rest == "\t":
        return _Key("Tab", 9, shift_key=True)

    # ESC O P .. ESC O S, optionally ESC O q P with a modifier qualifier
    if seq.startswith(SS3) and len(seq) in (3, 4):
        terminator = seq[-1]
        if terminator not in SS3_FUNCTION_KEYS:
            return None
        qualifier = seq[2] if len(seq) == 4 else ""
        name, code = SS3_FUNCTION_KEYS[terminator]
        return _Key(
            name,
            code,
            ctrl_key=qualifier == "5",
            alt_key=qualifier == "3",
            shift_key=qualifier == "2",
        )
    return None


def classify(seq: str) -> _Key | None:
    """Classify one raw chunk; ``None`` when it is not a key we know."""
    if len(seq) == 1:
        return _classify_char(seq)
    if seq.startswith(CSI):
        return _classify_csi(seq)
    if seq.startswith(ESC):
        return _classify_escape(seq)
    return None


class KeyDecoder:
    """Turns raw terminal chunks into :class:`KeyEvent` values.

    Stateless apart from the clock used to stamp events; decoding the same
    chunk twice gives the same keys.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or _now_ms

    def decode(self, chunk: str) -> Iterator[KeyEvent]:
        key = classify(chunk)
        if key is not None:
            yield KeyEvent(**key._asdict(), timestamp=self._clock())


def decode_keys(chunk: str, clock: Clock | None = None) -> list[KeyEvent]:
    """Decode a chunk and collect the events."""
    return list(KeyDecoder(clock).decode(chunk))
