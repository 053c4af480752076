"""Configuration layer: constants and typed config dataclasses."""

from lightbot.config.constants import (
    DEFAULT_MAX_DEPTH,
    FLOOR,
    FLOOR_LIT,
    LIGHT_TOGGLES,
    MARKER,
    MARKER_LIT,
    START_SYMBOLS,
)
from lightbot.config.types import InterpreterConfig, RunResult

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "FLOOR",
    "FLOOR_LIT",
    "InterpreterConfig",
    "LIGHT_TOGGLES",
    "MARKER",
    "MARKER_LIT",
    "RunResult",
    "START_SYMBOLS",
]
