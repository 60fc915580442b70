"""Live status grid of browser targets."""

import logging
from collections.abc import Sequence

from browser_grid.canvas import Canvas
from browser_grid.config import GridStyle
from browser_grid.layout import cell_width, layout
from browser_grid.models.result import FailureReport, RunResults
from browser_grid.models.target import Target
from browser_grid.renderer import GridRenderer
from browser_grid.reporter import collect_failures, total_failures
from browser_grid.resolver import DEFAULT_TABLES, NameResolver, NormalizationTables
from browser_grid.state import BrowserState

log = logging.getLogger(__name__)


class GridNotSizedError(Exception):
    """Raised when a grid with targets is drawn before its size is set."""


class GridView:
    """Tracks the run state of a fixed set of targets and keeps the grid drawn.

    Targets are fixed at construction and drawn in the order given. Every
    event entry point updates a single target and then redraws the whole
    grid. Events must be delivered one at a time.
    """

    def __init__(
        self,
        targets: Sequence[Target],
        *,
        canvas: Canvas,
        style: GridStyle | None = None,
        tables: NormalizationTables = DEFAULT_TABLES,
    ) -> None:
        self.canvas = canvas
        self.resolver = NameResolver(tables)
        self._browsers = tuple(BrowserState(target) for target in targets)
        self.cell_width = cell_width(targets)
        self.renderer = GridRenderer(style or GridStyle(), self.cell_width)
        self.width = 0
        self.height = 0

    @property
    def browsers(self) -> Sequence[BrowserState]:
        return self._browsers

    def size(self, width: int, height: int) -> "GridView":
        """Set the canvas dimensions used for layout.

        Must be called before the first draw. Rows past ``height`` are still
        drawn, and the terminal scrolls them into view.
        """
        self.width = width
        self.height = height
        if (rows := self.rows_needed()) > height:
            log.warning("Grid needs %d row(s) but the canvas has %d", rows, height)
        return self

    def rows_needed(self) -> int:
        """Number of canvas rows the grid covers at the current width."""
        cells = layout([b.target for b in self._browsers], self.cell_width, self.width)
        return cells[-1].y + 1 if cells else 0

    def on_init(self, target: Target) -> None:
        for browser in self._lookup(target):
            browser.start()
        self.draw()

    def on_start(self, target: Target) -> None:
        for browser in self._lookup(target):
            browser.start()
        self.draw()

    def on_end(self, target: Target, results: RunResults) -> None:
        for browser in self._lookup(target):
            browser.end(results)
        self.draw()

    def mark_as_failed(
        self, raw_name: str, raw_version: str, raw_platform: str
    ) -> None:
        """Fail every target matching a browser reported as errored by the cloud.

        The cloud does not own target identity, so a signal that cannot be
        resolved or matches no target is ignored. The version is not part of
        the match. The grid is redrawn either way.
        """
        matched = [
            browser
            for browser in self._browsers
            if self.resolver.matches(browser.target, raw_name, raw_platform)
        ]
        if not matched:
            log.debug(
                "No target matches errored browser %s %s on %s",
                raw_name,
                raw_version,
                raw_platform,
            )
        for browser in matched:
            browser.fail()
        self.draw()

    def draw(self) -> None:
        """Redraw every target onto the canvas.

        Raises:
            GridNotSizedError: If targets exist but no width was set

        """
        if self._browsers and self.width <= 0:
            raise GridNotSizedError("size() must be called before drawing the grid")
        self.renderer.render(self._browsers, self.canvas, self.width)

    def collect_failures(self) -> Sequence[FailureReport]:
        return collect_failures(self._browsers)

    def total_failures(self) -> int:
        return total_failures(self._browsers)

    def has_failures(self) -> bool:
        """Check whether any target is displayed as failed."""
        return any(browser.status == "error" for browser in self._browsers)

    def _lookup(self, target: Target) -> Sequence[BrowserState]:
        browsers = [b for b in self._browsers if b.target == target]
        if not browsers:
            raise KeyError(f"Unknown target: {target}")
        return browsers
