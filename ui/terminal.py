# ui/terminal.py
from __future__ import annotations
import logging
import os
import select
import sys
import termios
import tty
from typing import List, Optional

from rich.console import Console

from app.errors import TerminalError
from core.events import Key, decode_keys

READ_CHUNK = 64


class RawTerminal:
    """Raw keyboard mode for the life of a with-block.

    The saved mode is put back and the cursor shown on every way out of the
    block. read_keys() is meant to be called from the input worker only.
    """

    def __init__(self, fd: Optional[int] = None, console: Optional[Console] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.console = console or Console()
        self._saved = None

    @property
    def active(self) -> bool:
        return self._saved is not None

    def enable(self):
        try:
            self._saved = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
            # keep output post-processing so rich's line feeds return the carriage
            mode = termios.tcgetattr(self.fd)
            mode[1] |= termios.OPOST | termios.ONLCR
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, mode)
        except (termios.error, OSError) as e:
            self._saved = None
            raise TerminalError(f"cannot enable raw mode: {e}") from e
        self.console.show_cursor(False)
        logging.debug("Raw mode enabled on fd %d", self.fd)

    def restore(self):
        saved, self._saved = self._saved, None
        try:
            if saved is not None:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, saved)
                logging.debug("Terminal mode restored on fd %d", self.fd)
        except (termios.error, OSError) as e:
            raise TerminalError(f"cannot restore terminal mode: {e}") from e
        finally:
            self.console.show_cursor(True)

    def __enter__(self) -> "RawTerminal":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def read_keys(self, timeout: float) -> List[Key]:
        try:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
            if not ready:
                return []
            data = os.read(self.fd, READ_CHUNK)
        except OSError as e:
            raise TerminalError(f"cannot read from terminal: {e}") from e
        if not data:
            raise TerminalError("terminal input closed")
        return decode_keys(data)
