"""Domain layer: grid world, robot pose, snapshots, and map loading."""

from lightbot.domain.map_loader import load_map, read_map_file
from lightbot.domain.snapshot import Heading, RobotPose, WorldSnapshot
from lightbot.domain.world import GridWorld, Robot

__all__ = [
    "GridWorld",
    "Heading",
    "Robot",
    "RobotPose",
    "WorldSnapshot",
    "load_map",
    "read_map_file",
]
