"""Toroidal grid world with a single light-toggling robot.

Coordinates wrap around on both axes, so moving never fails. Only lightable
cells (see ``LIGHT_TOGGLES``) change when the robot switches a light; every
other symbol passes through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from lightbot.config.constants import LIGHT_TOGGLES
from lightbot.domain.snapshot import Heading, RobotPose, WorldSnapshot


@dataclass
class Robot:
    """Mutable robot pose."""

    row: int
    col: int
    heading: Heading

    def pose(self) -> RobotPose:
        return RobotPose(row=self.row, col=self.col, heading=self.heading)


@dataclass
class GridWorld:
    """Grid of single-character cells (shape ``(rows, cols)``) and the robot on it."""

    grid: np.ndarray
    robot: Robot

    def __post_init__(self) -> None:
        if self.grid.ndim != 2 or self.grid.size == 0:
            raise ValueError("grid must be a non-empty 2D array")
        if not (0 <= self.robot.row < self.n_rows and 0 <= self.robot.col < self.n_cols):
            raise ValueError("robot must start inside the grid")

    @property
    def n_rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self.grid.shape[1])

    def turn_left(self) -> None:
        self.robot.heading = self.robot.heading.turned_left()

    def turn_right(self) -> None:
        self.robot.heading = self.robot.heading.turned_right()

    def move_forward(self) -> None:
        """Step one cell along the heading, wrapping at the edges."""
        dr, dc = self.robot.heading.delta
        self.robot.row = (self.robot.row + dr) % self.n_rows
        self.robot.col = (self.robot.col + dc) % self.n_cols

    def toggle_light(self) -> None:
        """Switch the light of the cell under the robot, if it has one."""
        r, c = self.robot.row, self.robot.col
        cell = str(self.grid[r, c])
        toggled = LIGHT_TOGGLES.get(cell)
        if toggled is not None:
            self.grid[r, c] = toggled

    def cell(self, row: int, col: int) -> str:
        return str(self.grid[row % self.n_rows, col % self.n_cols])

    def rows(self) -> list[str]:
        """Render the grid as one string per row (the robot is not drawn)."""
        return ["".join(row) for row in self.grid.tolist()]

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot.capture(self.grid, self.robot.pose())

    def restore(self, snapshot: WorldSnapshot) -> None:
        """Overwrite grid and robot in place from *snapshot*."""
        if snapshot.grid.shape != self.grid.shape:
            raise ValueError(
                f"snapshot shape {snapshot.grid.shape} does not match grid {self.grid.shape}"
            )
        np.copyto(self.grid, snapshot.grid)
        self.robot.row = snapshot.pose.row
        self.robot.col = snapshot.pose.col
        self.robot.heading = snapshot.pose.heading
