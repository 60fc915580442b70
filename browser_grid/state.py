"""Per-target run state and its transitions."""

import logging
from typing import Literal

from browser_grid.models.result import RunResults
from browser_grid.models.target import Target

log = logging.getLogger(__name__)

TargetState = Literal["pending", "running", "ended", "failed"]
DisplayStatus = Literal["ok", "error", "none"]


class BrowserState:
    """Mutable run state of a single target.

    State moves pending -> running -> ended, and from anywhere to failed.
    A failed target stays failed, even if a passing end event arrives later.
    """

    def __init__(self, target: Target) -> None:
        self.target = target
        self._state: TargetState = "pending"
        self._results: RunResults | None = None

    def __repr__(self) -> str:
        return f"BrowserState({self.target}, state={self._state!r})"

    @property
    def state(self) -> TargetState:
        return self._state

    @property
    def results(self) -> RunResults | None:
        return self._results

    @property
    def status(self) -> DisplayStatus:
        """Display status the symbol and color are both derived from."""
        if self._state == "failed" or (
            self._results is not None and self._results.failure_count > 0
        ):
            return "error"
        if self._state != "ended":
            return "none"
        return "ok"

    def start(self) -> None:
        """Handle an init or start event."""
        if self._state in ("pending", "running"):
            self._state = "running"
            log.debug("Target running: %s", self.target)

    def end(self, results: RunResults) -> None:
        """Handle an end event, recording the run results."""
        self._results = results
        if self._state == "failed":
            log.debug("Target already failed, keeping state: %s", self.target)
            return
        self._state = "ended"
        log.debug(
            "Target ended: %s (%d failure(s))", self.target, results.failure_count
        )

    def fail(self) -> None:
        """Mark the target as failed by an external signal."""
        if self._state != "failed":
            self._state = "failed"
            log.debug("Target failed: %s", self.target)
