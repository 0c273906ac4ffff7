"""Single-key terminal input and screen output for the game."""

from __future__ import annotations

import sys
from typing import TextIO

_CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


def _read_terminal_key() -> str:
    """Read one key press from standard input without waiting for Enter."""
    stream = sys.stdin
    if not stream.isatty():
        key = stream.read(1)
        if not key:
            raise EOFError("no more input")
        return key
    if sys.platform == "win32":
        import msvcrt

        key = msvcrt.getwch()
    else:
        import termios
        import tty

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = stream.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if key == "\x03":
        raise KeyboardInterrupt
    if key in ("", "\x04", "\x1a"):
        raise EOFError("input closed")
    return key


class Console:
    """Reads single keys and writes lines to a screen.

    With no streams given, keys come from the terminal and text goes to
    standard output.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        ansi: bool | None = None,
    ) -> None:
        self._input = stdin
        self._output = stdout if stdout is not None else sys.stdout
        if ansi is None:
            isatty = getattr(self._output, "isatty", None)
            ansi = bool(isatty and isatty())
        self.ansi = ansi

    def read_key(self) -> str:
        """Return the next key pressed; raise EOFError when input runs out."""
        if self._input is None:
            return _read_terminal_key()
        key = self._input.read(1)
        if not key:
            raise EOFError("no more input")
        return key

    def clear(self) -> None:
        """Clear the screen when the output is a terminal."""
        if self.ansi:
            self._output.write(_CLEAR_SEQUENCE)
            self._output.flush()

    def write(self, text: str) -> None:
        """Write text followed by a line break."""
        self._output.write(text + "\n")
        self._output.flush()