"""
Shared pytest fixtures for termkeys tests.
"""

from __future__ import annotations

import os
import sys
from typing import Generator
from unittest.mock import MagicMock

import pytest

from termkeys.decoder import KeyDecoder


FIXED_TIMESTAMP = 1_700_000_000_000


# =============================================================================
# Decoder Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock() -> MagicMock:
    """Clock that always reports the same instant."""
    return MagicMock(return_value=FIXED_TIMESTAMP)


@pytest.fixture
def decoder(fixed_clock) -> KeyDecoder:
    """Decoder stamping events with FIXED_TIMESTAMP."""
    return KeyDecoder(clock=fixed_clock)


# =============================================================================
# Callback Mock Fixtures
# =============================================================================


@pytest.fixture
def key_callback() -> MagicMock:
    """Provide a mock callback for key events."""
    return MagicMock()


@pytest.fixture
def other_callback() -> MagicMock:
    """Provide a second mock callback for key events."""
    return MagicMock()


# =============================================================================
# Pseudo-terminal Fixtures
# =============================================================================


@pytest.fixture
def pty_pair() -> Generator[tuple[int, object], None, None]:
    """Provide (master_fd, slave_stream) of a fresh pseudo-terminal."""
    if sys.platform == "win32":
        pytest.skip("pseudo-terminals are POSIX only")
    pty = pytest.importorskip("pty")

    master, slave = pty.openpty()
    stream = os.fdopen(slave, "rb", buffering=0)
    yield master, stream
    stream.close()
    os.close(master)


# =============================================================================
# Key Sequence Test Data Fixtures
# =============================================================================


@pytest.fixture(params=[
    ("\x1b[A", "ArrowUp", 38),
    ("\x1b[B", "ArrowDown", 40),
    ("\x1b[C", "ArrowRight", 39),
    ("\x1b[D", "ArrowLeft", 37),
    ("\x1b[E", "Enter", 13),
    ("\x1b[G", "Enter", 13),
    ("\x1b[F", "End", 35),
    ("\x1b[H", "Home", 36),
])
def csi_cursor_sequences(request) -> tuple[str, str, int]:
    """Provide (sequence, key, key_code) for bare CSI cursor keys."""
    return request.param


@pytest.fixture(params=[
    ("\x1b[1~", "Home", 36),
    ("\x1b[2~", "Insert", 45),
    ("\x1b[3~", "Delete", 127),
    ("\x1b[4~", "End", 35),
    ("\x1b[5~", "PageUp", 33),
    ("\x1b[6~", "PageDown", 34),
])
def csi_editing_sequences(request) -> tuple[str, str, int]:
    """Provide (sequence, key, key_code) for CSI n ~ editing keys."""
    return request.param


@pytest.fixture(params=[
    ("\x1bOP", "F1", 112),
    ("\x1bOQ", "F2", 113),
    ("\x1bOR", "F3", 114),
    ("\x1bOS", "F4", 115),
    ("\x1b[[A", "F1", 112),
    ("\x1b[[B", "F2", 113),
    ("\x1b[[C", "F3", 114),
    ("\x1b[[D", "F4", 115),
    ("\x1b[[E", "F5", 116),
    ("\x1b[15~", "F5", 116),
    ("\x1b[17~", "F6", 117),
    ("\x1b[18~", "F7", 118),
    ("\x1b[19~", "F8", 119),
    ("\x1b[20~", "F9", 120),
    ("\x1b[21~", "F10", 121),
    ("\x1b[23~", "F11", 122),
    ("\x1b[24~", "F12", 123),
    ("\x1b[25~", "F13", 124),
    ("\x1b[26~", "F14", 125),
    ("\x1b[28~", "F15", 126),
    ("\x1b[29~", "F16", 127),
    ("\x1b[31~", "F17", 128),
    ("\x1b[32~", "F18", 129),
    ("\x1b[33~", "F19", 130),
    ("\x1b[34~", "F20", 131),
])
def function_key_sequences(request) -> tuple[str, str, int]:
    """Provide (sequence, key, key_code) for function keys."""
    return request.param
