"""Configuration dataclasses for interpreter runs."""

from __future__ import annotations

from dataclasses import dataclass

from lightbot.config.constants import DEFAULT_MAX_DEPTH

__all__ = [
    "InterpreterConfig",
    "RunResult",
]


@dataclass(frozen=True)
class InterpreterConfig:
    """Runtime knobs for one LightBot session."""

    max_depth: int = DEFAULT_MAX_DEPTH
    """Maximum number of nested REPEAT/CALL scopes."""
    max_steps: int | None = None
    """Budget of primitive commands plus REPEAT iterations per run (None = unbounded)."""
    validate_nesting: bool = True
    """Reject unbalanced FUNCTION/REPEAT scopes before execution."""
    reject_recursion: bool = True
    """Reject programs whose reachable calls form a cycle."""

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError("max_steps must be >= 1 when set")


@dataclass(frozen=True)
class RunResult:
    """Outcome of one successful program run."""

    steps: int
    position: tuple[int, int]
    functions_defined: int
