"""Tests for canvas implementations."""

import io

from browser_grid.canvas import TerminalCanvas
from browser_grid.testing.canvas import RecordingCanvas, Write


def test_terminal_move_to_passes_coordinates_through() -> None:
    """Cursor moves use the coordinates as ANSI row and column."""
    stream = io.StringIO()

    TerminalCanvas(stream).move_to(4, 3)

    assert stream.getvalue() == "\033[3;4H"


def test_terminal_write_plain_text() -> None:
    """Text without a color is written verbatim."""
    stream = io.StringIO()

    TerminalCanvas(stream).write("Chrome 70")

    assert stream.getvalue() == "Chrome 70"


def test_terminal_write_colored_text() -> None:
    """Colored text is wrapped in color and reset sequences."""
    stream = io.StringIO()

    TerminalCanvas(stream).write("✓", 32)

    assert stream.getvalue() == "\033[32m✓\033[0m"


def test_terminal_clear_and_restore() -> None:
    """Clear hides the cursor and restore shows it."""
    stream = io.StringIO()
    canvas = TerminalCanvas(stream)

    canvas.clear()
    canvas.restore()

    assert stream.getvalue() == "\033[2J\033[?25l\033[?25h"


def test_recording_canvas_tracks_writes() -> None:
    """Writes are recorded at the cursor position they started at."""
    canvas = RecordingCanvas()

    canvas.move_to(2, 1)
    canvas.write("ab")
    canvas.write("c", 31)

    assert canvas.writes == [
        Write(x=2, y=1, text="ab", color=None),
        Write(x=4, y=1, text="c", color=31),
    ]
    assert canvas.row(1) == "  abc"
    assert canvas.writes_with_color(31) == [Write(x=4, y=1, text="c", color=31)]


def test_recording_canvas_overwrites_characters() -> None:
    """Later writes replace earlier characters."""
    canvas = RecordingCanvas()

    canvas.move_to(0, 0)
    canvas.write("hello")
    canvas.move_to(0, 0)
    canvas.write("J")

    assert canvas.row(0) == "Jello"
    assert canvas.row(5) == ""
