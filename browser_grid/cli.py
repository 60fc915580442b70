"""CLI entry point for replaying a browser test run onto the status grid."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import TypeAdapter

from browser_grid.canvas import TerminalCanvas
from browser_grid.config import GridStyle
from browser_grid.events import load_events, replay
from browser_grid.grid import GridView
from browser_grid.models.target import Target
from browser_grid.reporter import MissingResultsError, log_failures

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_INCOMPLETE = 2

targets_adapter = TypeAdapter(list[Target])


def load_targets(path: Path) -> Sequence[Target]:
    """Load the target list from a JSON array of name/version/platform."""
    return targets_adapter.validate_json(path.read_text(encoding="utf-8"))


def parse_style(style_config: str) -> GridStyle:
    """Parse an optional JSON style override."""
    if not style_config.strip():
        return GridStyle()
    return GridStyle(**json.loads(style_config))


async def run(
    targets_path: Path,
    events_path: Path,
    style: GridStyle,
    width: int,
    height: int,
    delay: float = 0.0,
    stream: TextIO = sys.stdout,
) -> int:
    """Replay a recorded run onto the terminal and return exit code."""
    log = logging.getLogger("browser_grid")

    targets = load_targets(targets_path)
    log.info("Loaded %d target(s) from %s", len(targets), targets_path)
    events = load_events(events_path)
    log.info("Loaded %d event(s) from %s", len(events), events_path)

    canvas = TerminalCanvas(stream)
    view = GridView(targets, canvas=canvas, style=style).size(width, height)

    canvas.clear()
    try:
        view.draw()
        await replay(view, events, delay=delay)
    finally:
        canvas.restore()

    try:
        reports = view.collect_failures()
    except MissingResultsError as e:
        log.error("Run incomplete: %s", e)
        return EXIT_INCOMPLETE

    log_failures(log, reports)
    log.info("Total failures: %d", view.total_failures())

    return EXIT_FAILURES if view.has_failures() else EXIT_OK


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render a browser test run as a live terminal grid"
    )
    parser.add_argument(
        "--targets",
        type=Path,
        required=True,
        help="JSON file listing targets (name, version, platform)",
    )
    parser.add_argument(
        "--events",
        type=Path,
        required=True,
        help="JSON Lines file of lifecycle events to replay",
    )
    parser.add_argument(
        "--style-config",
        default="",
        help="JSON overrides for symbols and colors",
    )
    parser.add_argument("--width", type=int, default=80, help="Canvas width")
    parser.add_argument("--height", type=int, default=24, help="Canvas height")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between events",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            targets_path=args.targets,
            events_path=args.events,
            style=parse_style(args.style_config),
            width=args.width,
            height=args.height,
            delay=args.delay,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
