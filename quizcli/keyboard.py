"""Unbuffered, non-echoing single-key input from a terminal."""

from __future__ import annotations

import os
import sys
import termios

_IFLAG, _OFLAG, _CFLAG, _LFLAG, _ISPEED, _OSPEED, _CC = range(7)


class Keyboard:
    """Puts a terminal into raw-ish mode and reads one key at a time."""

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._initial: list | None = None
        self._settings: list | None = None
        self._pending: str | None = None

    def init(self) -> None:
        """Turn off line buffering, echo and signal keys."""
        self._initial = termios.tcgetattr(self.fd)
        settings = list(self._initial)
        settings[_CC] = list(self._initial[_CC])
        settings[_LFLAG] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        settings[_CC][termios.VMIN] = 1
        settings[_CC][termios.VTIME] = 0
        self._settings = settings
        termios.tcsetattr(self.fd, termios.TCSANOW, settings)

    def destroy(self) -> None:
        """Restore the terminal settings saved by :meth:`init`."""
        if self._initial is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._initial)
            self._initial = None
            self._settings = None

    def __enter__(self) -> "Keyboard":
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def _set_vmin(self, vmin: int) -> None:
        assert self._settings is not None
        self._settings[_CC][termios.VMIN] = vmin
        termios.tcsetattr(self.fd, termios.TCSANOW, self._settings)

    def keyhit(self) -> bool:
        """Return True if a key is waiting, without blocking."""
        if self._pending is not None:
            return True
        if self._settings is None:
            raise RuntimeError("keyboard is not initialised")
        self._set_vmin(0)
        try:
            data = os.read(self.fd, 1)
        finally:
            self._set_vmin(1)
        if data:
            self._pending = data.decode("latin-1")
            return True
        return False

    def readch(self) -> str:
        """Return the next key, blocking until one is available."""
        if self._pending is not None:
            ch, self._pending = self._pending, None
            return ch
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("no more input")
        return data.decode("latin-1")