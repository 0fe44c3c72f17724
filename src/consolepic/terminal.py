from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

from consolepic.palette import ConsoleColor, ansi_codes

DEFAULT_TERMINAL_SIZE = (80, 24)

ESC = "\033["


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return DEFAULT_TERMINAL_SIZE
    size = os.get_terminal_size()
    return (size.columns, size.lines)


class Terminal(Protocol):
    def size(self) -> tuple[int, int]:
        """Current (columns, rows)."""
        ...

    def set_colour(self, colour: ConsoleColor) -> None:
        """Set both foreground and background to ``colour``."""
        ...

    def move_cursor(self, x: int, y: int) -> None: ...

    def write_glyph(self, char: str) -> None: ...

    def flush(self) -> None: ...

    def reset(self) -> None:
        """Restore default colours."""
        ...


class AnsiTerminal:
    """Terminal that writes ANSI escape sequences to a text stream."""

    def __init__(self, stream: TextIO | None = None, size: tuple[int, int] | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self._size = size

    def size(self) -> tuple[int, int]:
        return self._size if self._size is not None else get_terminal_size()

    def set_colour(self, colour: ConsoleColor) -> None:
        fg, bg = ansi_codes(colour)
        self.stream.write(f"{ESC}{fg};{bg}m")

    def move_cursor(self, x: int, y: int) -> None:
        # ANSI positions are 1-based, row first
        self.stream.write(f"{ESC}{y + 1};{x + 1}H")

    def write_glyph(self, char: str) -> None:
        self.stream.write(char)

    def clear(self) -> None:
        self.stream.write(f"{ESC}2J{ESC}H")

    def flush(self) -> None:
        self.stream.flush()

    def reset(self) -> None:
        self.stream.write(f"{ESC}0m")
        self.stream.flush()
