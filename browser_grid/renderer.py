"""Rendering of target states onto a canvas."""

from collections.abc import Sequence

from browser_grid.canvas import Canvas
from browser_grid.config import PLATFORM_COLOR, GridStyle
from browser_grid.layout import layout, pad_label, pad_platform
from browser_grid.state import BrowserState

SEPARATOR = "\n\n"


class GridRenderer:
    """Draws every target's cell: label, status symbol and platform."""

    def __init__(self, style: GridStyle, cell_width: int) -> None:
        self.style = style
        self.cell_width = cell_width

    def symbol_for(self, browser: BrowserState) -> str:
        return getattr(self.style.symbols, browser.status)

    def color_for(self, browser: BrowserState) -> int:
        return getattr(self.style.colors, browser.status)

    def render(
        self, browsers: Sequence[BrowserState], canvas: Canvas, canvas_width: int
    ) -> None:
        """Redraw all cells.

        Each row is padded to the full cell width, so redrawing overwrites
        whatever a previous render left in the cell.

        Args:
            browsers: Target states in display order
            canvas: Surface to draw on
            canvas_width: Width of the surface in columns

        """
        cells = layout([b.target for b in browsers], self.cell_width, canvas_width)

        for browser, cell in zip(browsers, cells, strict=True):
            canvas.move_to(cell.x, cell.y)
            canvas.write(pad_label(cell.target.label, self.cell_width))
            canvas.write(" ")
            canvas.write(self.symbol_for(browser), self.color_for(browser))
            canvas.move_to(cell.x, cell.y + 1)
            canvas.write(
                pad_platform(cell.target.platform, self.cell_width), PLATFORM_COLOR
            )

        canvas.write(SEPARATOR)
