"""LightBot: an interpreter for a small robot command language on a toroidal grid."""

from lightbot.config.types import InterpreterConfig, RunResult
from lightbot.errors import (
    ArityMismatchError,
    CallDepthExceededError,
    FunctionNotDefinedError,
    LightBotError,
    MalformedProgramError,
    MapLoadError,
    RecursiveCallError,
    StepBudgetExceededError,
)
from lightbot.session import LightBot

__all__ = [
    "ArityMismatchError",
    "CallDepthExceededError",
    "FunctionNotDefinedError",
    "InterpreterConfig",
    "LightBot",
    "LightBotError",
    "MalformedProgramError",
    "MapLoadError",
    "RecursiveCallError",
    "RunResult",
    "StepBudgetExceededError",
]
