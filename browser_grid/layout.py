"""Row-major wrapping layout of target cells on a fixed-width canvas."""

from collections.abc import Sequence
from dataclasses import dataclass

from browser_grid.models.target import Target

MARGIN_X = 4
MARGIN_Y = 3
RIGHT_MARGIN = 5
GUTTER = 6
ROW_HEIGHT = 3


@dataclass(frozen=True, kw_only=True)
class Cell:
    """Position of one target's cell; the cell spans rows y and y + 1."""

    target: Target
    x: int
    y: int


def cell_width(targets: Sequence[Target]) -> int:
    """Compute the uniform cell width for a set of targets.

    Wide enough for the widest label or platform name. An empty set yields 0.
    """
    return max(
        (
            max(len(t.name) + len(t.version) + 1, len(t.platform))
            for t in targets
        ),
        default=0,
    )


def layout(
    targets: Sequence[Target], width: int, canvas_width: int
) -> Sequence[Cell]:
    """Place targets left to right, wrapping to a new row when out of room."""
    cells: list[Cell] = []
    x, y = MARGIN_X, MARGIN_Y

    for target in targets:
        if x + width > canvas_width - RIGHT_MARGIN:
            x = MARGIN_X
            y += ROW_HEIGHT
        cells.append(Cell(target=target, x=x, y=y))
        x += width + GUTTER

    return cells


def pad_label(label: str, width: int) -> str:
    """Right-pad a label row to the cell width."""
    return label.ljust(width)


def pad_platform(platform: str, width: int) -> str:
    """Right-pad a platform row, which spans the symbol column too."""
    return platform.ljust(width + 2)
