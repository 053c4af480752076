"""Map text parsing: rows of symbols to a ``GridWorld``."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np

from lightbot.config.constants import FLOOR, START_SYMBOLS
from lightbot.domain.snapshot import Heading
from lightbot.domain.world import GridWorld, Robot
from lightbot.errors import MapLoadError


def load_map(map_rows: Sequence[str]) -> GridWorld:
    """Build a world from equal-width rows of single-character symbols.

    ``U``/``D``/``L``/``R`` mark the robot start and heading; the cell under
    the robot becomes unlit floor. Exactly one start marker is required.
    """
    rows = list(map_rows)
    if not rows or not rows[0]:
        raise MapLoadError("Map must contain at least one non-empty row")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise MapLoadError(f"Map row {index} has width {len(row)}, expected {width}")

    grid = np.array([list(row) for row in rows], dtype="<U1")
    starts = [(r, c) for r, c in zip(*np.nonzero(np.isin(grid, START_SYMBOLS)), strict=True)]
    if not starts:
        raise MapLoadError("No start position found")
    if len(starts) > 1:
        raise MapLoadError(f"Map has {len(starts)} start positions, expected exactly one")

    row, col = int(starts[0][0]), int(starts[0][1])
    heading = Heading(str(grid[row, col]))
    grid[row, col] = FLOOR
    return GridWorld(grid=grid, robot=Robot(row=row, col=col, heading=heading))


def read_map_file(path: Path) -> list[str]:
    """Read map rows from a text file, ignoring trailing blank lines."""
    lines = path.read_text().splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
