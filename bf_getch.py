import os
import sys

import termios
import tty

EOT = 4  # Ctrl-D


class TerminalInput:
    """
    Reads single bytes from stdin for the ',' instruction.

    On a terminal the line discipline is switched to cbreak (no canonical
    buffering, no echo) for exactly one byte and restored afterwards. The
    byte is then echoed to `echo` so the interpreter decides what is shown.
    Pipes and files are read as they are, without echo.
    Returns None on end of input (Ctrl-D or an empty read).
    """

    def __init__(self, stdin=None, echo=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.echo = echo
        self.pending = b""

    def is_terminal(self):
        try:
            return os.isatty(self.stdin.fileno())
        except (AttributeError, ValueError, OSError):
            return False

    def read_byte(self):
        if not self.is_terminal():
            return self._read_stream()

        ch = self._read_raw()
        if ch is None or ch == EOT:
            return None

        if self.echo is not None:
            self.echo.write(bytes([ch]))
            self.echo.flush()
        return ch

    def _read_raw(self):
        fd = self.stdin.fileno()
        old_attr = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            data = os.read(fd, 1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_attr)
        return data[0] if data else None

    def _read_stream(self):
        # read through the same layer the prompt reads lines from, so bytes
        # after a program line are not skipped by a text read-ahead
        if not self.pending:
            data = self.stdin.read(1)
            if not data:
                return None
            if isinstance(data, str):
                data = data.encode()
            self.pending = data
        ch = self.pending[0]
        self.pending = self.pending[1:]
        if ch == EOT:
            return None
        return ch
