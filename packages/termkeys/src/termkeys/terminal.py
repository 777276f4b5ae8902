"""
Attach the key decoder to an interactive input stream.

Termkeys switches the stream's terminal to raw mode, watches its file
descriptor on the asyncio event loop and turns every read into key events
for the registered listeners.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
import os
import sys
from typing import Any

from termkeys.config import TermkeysOptions
from termkeys.debug import print_sequence
from termkeys.decoder import KeyDecoder
from termkeys.listeners import KeyListener, ListenerRegistry

logger = logging.getLogger(__name__)

_READ_SIZE = 1024


def _tty_fileno(stream: Any) -> int | None:
    """File descriptor of ``stream`` if it is an interactive terminal."""
    if stream is None:
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


class Termkeys:
    """
    Key event source for an interactive stream such as ``sys.stdin``.

    Usage:
        keys = Termkeys()
        keys.on("key", lambda event: print(event.key))
        if not keys.attach():
            raise RuntimeError("Need an interactive stream")
        ...
        keys.detach()

    ``attach`` must be called with a running event loop (or an explicit
    ``loop``). Hosts that read input themselves can skip ``attach`` and
    pass chunks to :meth:`feed`.
    """

    def __init__(
        self,
        options: TermkeysOptions | None = None,
        decoder: KeyDecoder | None = None,
    ) -> None:
        self._options = options or TermkeysOptions()
        self._decoder = decoder or KeyDecoder()
        self._listeners = ListenerRegistry()
        self._stream: Any = None
        self._fd: int | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._text_decoder: codecs.IncrementalDecoder | None = None
        self._old_term_settings: Any = None
        self._reading = False

        self.debug = self._options.debug

    @property
    def stream(self) -> Any:
        return self._stream

    @property
    def attached(self) -> bool:
        return self._stream is not None

    @property
    def reading(self) -> bool:
        return self._reading

    # -------------------------------------------------------------------------
    # Stream lifecycle
    # -------------------------------------------------------------------------

    def attach(
        self,
        stdin: Any = None,
        encoding: str | None = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> bool:
        """
        Start decoding keys from ``stdin`` (default ``sys.stdin``).

        Returns False, without touching the stream, when already attached,
        when the stream is not an interactive terminal, when there is no
        event loop to read on or when raw mode cannot be entered. Any other
        error from the loop restores the terminal before it propagates.
        """
        if self._stream is not None:
            logger.debug("attach() skipped: already attached to %r", self._stream)
            return False

        stream = sys.stdin if stdin is None else stdin
        fd = _tty_fileno(stream)
        if fd is None:
            logger.debug("attach() skipped: %r is not an interactive stream", stream)
            return False

        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.debug("attach() skipped: no running event loop")
                return False

        decoder_factory = codecs.getincrementaldecoder(encoding or self._options.encoding)

        self._stream = stream
        self._fd = fd
        self._loop = loop
        self._text_decoder = decoder_factory(errors="replace")
        if not self._enable_raw_mode():
            self.detach()
            return False

        if self._options.resume:
            try:
                self.resume()
            except NotImplementedError:
                logger.debug("attach() failed: event loop cannot watch file descriptors")
                self.detach()
                return False
            except BaseException:
                self.detach()
                raise
        return True

    def detach(self) -> None:
        """Stop reading and restore the terminal. The instance can be reused."""
        if self._stream is None:
            return

        self.pause()
        self._disable_raw_mode()

        self._stream = None
        self._fd = None
        self._loop = None
        self._text_decoder = None

    def resume(self) -> None:
        """Start (or restart) reading from the attached stream."""
        if self._stream is None or self._reading:
            return
        assert self._loop is not None and self._fd is not None
        self._loop.add_reader(self._fd, self._on_readable)
        self._reading = True

    def pause(self) -> None:
        """Stop reading without leaving raw mode."""
        if not self._reading:
            return
        assert self._loop is not None and self._fd is not None
        self._loop.remove_reader(self._fd)
        self._reading = False

    def _enable_raw_mode(self) -> bool:
        if sys.platform == "win32":
            return True

        import termios
        import tty

        try:
            self._old_term_settings = termios.tcgetattr(self._fd)
            tty.setraw(self._fd)
        except (termios.error, OSError):
            logger.debug("attach() failed: could not switch fd %s to raw mode", self._fd, exc_info=True)
            return False
        return True

    def _disable_raw_mode(self) -> None:
        if sys.platform == "win32":
            return

        import termios

        if self._old_term_settings is not None:
            try:
                termios.tcsetattr(
                    self._fd,
                    termios.TCSADRAIN,
                    self._old_term_settings,
                )
            except (termios.error, OSError):
                logger.debug("Could not restore fd %s", self._fd, exc_info=True)
            self._old_term_settings = None

    def _on_readable(self) -> None:
        assert self._fd is not None and self._text_decoder is not None
        try:
            data = os.read(self._fd, _READ_SIZE)
        except (BlockingIOError, InterruptedError):
            return
        except OSError:
            logger.exception("Reading from %r failed", self._stream)
            self.pause()
            return

        if not data:
            # EOF
            self.pause()
            return

        chunk = self._text_decoder.decode(data)
        if chunk:
            self.feed(chunk)

    # -------------------------------------------------------------------------
    # Decoding and delivery
    # -------------------------------------------------------------------------

    def feed(self, chunk: str) -> None:
        """Decode one chunk of input and deliver its key events."""
        if self.debug:
            print_sequence(chunk)

        for key_event in self._decoder.decode(chunk):
            self._listeners.emit(key_event)

    def on(self, event: str, callback: KeyListener) -> None:
        self._listeners.on(event, callback)

    def once(self, event: str, callback: KeyListener) -> None:
        self._listeners.once(event, callback)

    def off(self, event: str, callback: KeyListener) -> None:
        self._listeners.off(event, callback)
