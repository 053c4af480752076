"""Error taxonomy for map loading and program execution.

Every interpreter failure derives from :class:`LightBotError`, a
``ValueError`` subclass, so callers can either catch the specific kind or
treat any failure as invalid input.
"""

from __future__ import annotations


class LightBotError(ValueError):
    """Base class for all map and program failures."""


class MapLoadError(LightBotError):
    """Map text cannot be turned into a grid and a start pose."""


class MalformedProgramError(LightBotError):
    """Instruction list has unbalanced scopes or unparsable tokens."""

    def __init__(self, message: str, index: int | None = None) -> None:
        if index is not None:
            message = f"{message} (instruction {index})"
        super().__init__(message)
        self.index = index


class FunctionNotDefinedError(LightBotError):
    """CALL references a name absent from the function table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Function not defined: {name}")
        self.name = name


class ArityMismatchError(LightBotError):
    """CALL passes a different number of arguments than the definition declares."""

    def __init__(self, name: str, expected: int, got: int) -> None:
        super().__init__(f"Function {name} expects {expected} argument(s), got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class RecursiveCallError(LightBotError):
    """Reachable calls form a cycle."""

    def __init__(self, names: set[str] | frozenset[str]) -> None:
        self.names = frozenset(names)
        super().__init__(f"Recursive function calls: {', '.join(sorted(self.names))}")


class CallDepthExceededError(LightBotError):
    """Nested REPEAT/CALL scopes exceed the configured depth."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Maximum nesting depth exceeded: {limit}")
        self.limit = limit


class StepBudgetExceededError(LightBotError):
    """Run executed more primitive commands than the configured budget."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Step budget exceeded: {limit}")
        self.limit = limit
