"""Recursive block executor.

Walks an instruction list once, dispatching primitive commands to the world
and re-entering itself for REPEAT bodies and CALLed function bodies. Every
re-entry increments an explicit depth counter; exceeding ``max_depth`` fails
the run instead of exhausting the interpreter stack.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence

from lightbot.config.constants import (
    DEFAULT_MAX_DEPTH,
    KW_CALL,
    KW_END_REPEAT,
    KW_FORWARD,
    KW_FUNCTION,
    KW_LEFT,
    KW_LIGHT,
    KW_REPEAT,
    KW_RIGHT,
)
from lightbot.domain.world import GridWorld
from lightbot.errors import (
    ArityMismatchError,
    CallDepthExceededError,
    FunctionNotDefinedError,
    StepBudgetExceededError,
)
from lightbot.program.functions import FunctionDef, substitute
from lightbot.program.tokens import (
    find_scope_end,
    keyword,
    parse_repeat_count,
    parse_signature,
)

logger = logging.getLogger(__name__)


class BlockExecutor:
    """Execute instruction lists against one ``GridWorld``.

    The executor holds no per-call variable scopes: CALL arguments are
    substituted into a copy of the body before it is executed.
    """

    def __init__(
        self,
        world: GridWorld,
        functions: Mapping[str, FunctionDef],
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_steps: int | None = None,
    ) -> None:
        self.world = world
        self.functions = functions
        self.max_depth = max_depth
        self.max_steps = max_steps
        self.steps_executed = 0
        self._primitives: dict[str, Callable[[], None]] = {
            KW_LEFT: world.turn_left,
            KW_RIGHT: world.turn_right,
            KW_FORWARD: world.move_forward,
            KW_LIGHT: world.toggle_light,
        }

    def execute(self, instructions: Sequence[str]) -> None:
        """Run a top-level instruction list.

        Exhausting the interpreter stack before ``max_depth`` is reached is
        reported as :exc:`CallDepthExceededError` as well.
        """
        try:
            self._execute_block(instructions, 0)
        except RecursionError as exc:
            raise CallDepthExceededError(self.max_depth) from exc

    def _execute_block(self, instructions: Sequence[str], depth: int) -> None:
        if depth > self.max_depth:
            raise CallDepthExceededError(self.max_depth)
        i = 0
        while i < len(instructions):
            token = instructions[i]
            primitive = self._primitives.get(token)
            if primitive is not None:
                self._count_step()
                primitive()
                i += 1
                continue
            if token == KW_END_REPEAT:
                # Stray closer: only reachable when nesting was not validated.
                return
            kw = keyword(token)
            if kw == KW_REPEAT:
                i = self._run_repeat(instructions, i, depth)
            elif kw == KW_FUNCTION:
                i = find_scope_end(instructions, i, KW_FUNCTION) + 1
            elif kw == KW_CALL:
                self._run_call(token, i, depth)
                i += 1
            else:
                i += 1

    def _count_step(self) -> None:
        self.steps_executed += 1
        if self.max_steps is not None and self.steps_executed > self.max_steps:
            raise StepBudgetExceededError(self.max_steps)

    def _run_repeat(self, instructions: Sequence[str], index: int, depth: int) -> int:
        """Execute a REPEAT scope and return the index just past its closer.

        Each iteration counts as one step, so loops without primitives are
        still bounded by ``max_steps``.
        """
        times = parse_repeat_count(instructions[index], index)
        end = find_scope_end(instructions, index, KW_REPEAT)
        body = instructions[index + 1 : end]
        logger.debug("REPEAT %d x %d instruction(s) at depth %d", times, len(body), depth)
        for _ in range(times):
            self._count_step()
            self._execute_block(body, depth + 1)
        return end + 1

    def _run_call(self, token: str, index: int, depth: int) -> None:
        name, args = parse_signature(token, KW_CALL, index)
        fn = self.functions.get(name)
        if fn is None:
            raise FunctionNotDefinedError(name)
        if len(args) != fn.arity:
            raise ArityMismatchError(name, fn.arity, len(args))
        logger.debug("CALL %s(%s) at depth %d", name, ", ".join(args), depth)
        self._execute_block(substitute(fn.body, fn.params, args), depth + 1)
