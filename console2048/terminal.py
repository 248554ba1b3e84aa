"""Raw-mode terminal handle.

Canonical mode and echo are switched off while a game runs and restored on
every exit path, including Ctrl-C. Non-tty streams are left untouched.
"""

import sys
from typing import Optional, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - windows
    termios = None

from console2048.render import HIDE_CURSOR_AND_CLEAR, SHOW_CURSOR_AND_RESET


class RawTerminal:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._saved = None
        self.active = False

    def acquire(self) -> "RawTerminal":
        if self.active:
            return self
        if termios is not None and self.stdin.isatty():
            fd = self.stdin.fileno()
            self._saved = termios.tcgetattr(fd)
            raw = termios.tcgetattr(fd)
            raw[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(fd, termios.TCSANOW, raw)
        self.stdout.write(HIDE_CURSOR_AND_CLEAR)
        self.stdout.flush()
        self.active = True
        return self

    def release(self) -> None:
        """Restore the terminal. Safe to call more than once."""
        if not self.active:
            return
        self.active = False
        if self._saved is not None:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSANOW, self._saved)
            self._saved = None
        self.stdout.write(SHOW_CURSOR_AND_RESET)
        self.stdout.flush()

    def __enter__(self) -> "RawTerminal":
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
