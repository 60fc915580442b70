"""Lifecycle events delivered by the test orchestrator and the device cloud."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, TypeAdapter

from browser_grid.grid import GridView
from browser_grid.models.base import Model
from browser_grid.models.result import RunResults
from browser_grid.models.target import Target

log = logging.getLogger(__name__)


class InitEvent(Model):
    """A target's browser session is being initialized."""

    event: Literal["init"] = "init"
    target: Target


class StartEvent(Model):
    """A target's tests started running."""

    event: Literal["start"] = "start"
    target: Target


class EndEvent(Model):
    """A target's tests finished."""

    event: Literal["end"] = "end"
    target: Target
    results: RunResults


class ErroredEvent(Model):
    """The device cloud reported a browser as errored.

    Carries the cloud's own names, which may differ from the local targets.
    """

    event: Literal["errored"] = "errored"
    name: str
    version: str
    platform: str


Event = Annotated[
    InitEvent | StartEvent | EndEvent | ErroredEvent, Field(discriminator="event")
]

event_adapter: TypeAdapter[Event] = TypeAdapter(Event)


def apply_event(view: GridView, event: Event) -> None:
    """Route a single event to the grid view."""
    if isinstance(event, InitEvent):
        view.on_init(event.target)
    elif isinstance(event, StartEvent):
        view.on_start(event.target)
    elif isinstance(event, EndEvent):
        view.on_end(event.target, event.results)
    elif isinstance(event, ErroredEvent):
        view.mark_as_failed(event.name, event.version, event.platform)


async def replay(view: GridView, events: Iterable[Event], delay: float = 0.0) -> int:
    """Apply events to the view strictly in order, one at a time.

    Args:
        view: Grid view to update
        events: Events in delivery order
        delay: Seconds to wait between events

    Returns:
        Number of events applied

    """
    count = 0
    for event in events:
        if count and delay > 0:
            await asyncio.sleep(delay)
        log.debug("Applying %s event", event.event)
        apply_event(view, event)
        count += 1
    return count


def load_events(path: Path) -> Sequence[Event]:
    """Load events from a JSON Lines file, skipping blank lines."""
    return [
        event_adapter.validate_json(line)
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]
