"""Immutable point-in-time copies of the world.

A ``WorldSnapshot`` owns its own grid buffer (marked read-only) so that no
later mutation of the live world can leak into it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Heading(Enum):
    """Cardinal direction the robot faces, with its (row, col) unit step."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    def turned_left(self) -> Heading:
        return _LEFT_OF[self]

    def turned_right(self) -> Heading:
        return _RIGHT_OF[self]


_DELTAS: dict[Heading, tuple[int, int]] = {
    Heading.UP: (-1, 0),
    Heading.DOWN: (1, 0),
    Heading.LEFT: (0, -1),
    Heading.RIGHT: (0, 1),
}

# Up -> Left -> Down -> Right -> Up
_LEFT_OF: dict[Heading, Heading] = {
    Heading.UP: Heading.LEFT,
    Heading.LEFT: Heading.DOWN,
    Heading.DOWN: Heading.RIGHT,
    Heading.RIGHT: Heading.UP,
}
_RIGHT_OF: dict[Heading, Heading] = {after: before for before, after in _LEFT_OF.items()}


@dataclass(frozen=True)
class RobotPose:
    """Robot position and heading at one point in time."""

    row: int
    col: int
    heading: Heading


@dataclass(frozen=True, eq=False)
class WorldSnapshot:
    """Read-only copy of the grid plus the robot pose."""

    grid: np.ndarray
    pose: RobotPose

    @classmethod
    def capture(cls, grid: np.ndarray, pose: RobotPose) -> WorldSnapshot:
        frozen = grid.copy()
        frozen.setflags(write=False)
        return cls(grid=frozen, pose=pose)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldSnapshot):
            return NotImplemented
        return self.pose == other.pose and np.array_equal(self.grid, other.grid)
