"""Drawing surfaces the grid is rendered onto."""

from abc import ABC, abstractmethod
from typing import TextIO

ESC = "\033["


class Canvas(ABC):
    """Abstract write-only drawing surface.

    The grid only ever moves the cursor and writes text; it never reads back
    what is on the surface. Colors are passed as semantic codes and encoding
    them is left to the implementation.
    """

    @abstractmethod
    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` and row ``y``."""

    @abstractmethod
    def write(self, text: str, color: int | None = None) -> None:
        """Write text at the cursor position.

        Args:
            text: Text to write, without any escape sequences
            color: ANSI foreground color code, or None for the current color

        """


class TerminalCanvas(Canvas):
    """Canvas backed by an ANSI terminal stream.

    Coordinates are passed through as one-based terminal positions, so the
    cell at ``(4, 3)`` starts on row 3, column 4.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def move_to(self, x: int, y: int) -> None:
        self.stream.write(f"{ESC}{y};{x}H")

    def write(self, text: str, color: int | None = None) -> None:
        if color is None:
            self.stream.write(text)
        else:
            self.stream.write(f"{ESC}{color}m{text}{ESC}0m")
        self.stream.flush()

    def clear(self) -> None:
        """Erase the screen and hide the cursor."""
        self.stream.write(f"{ESC}2J{ESC}?25l")
        self.stream.flush()

    def restore(self) -> None:
        """Show the cursor again."""
        self.stream.write(f"{ESC}?25h")
        self.stream.flush()
