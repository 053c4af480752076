"""Session controller: one world, one snapshot, many program runs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from lightbot.config.types import InterpreterConfig, RunResult
from lightbot.domain.map_loader import load_map
from lightbot.domain.world import GridWorld
from lightbot.errors import RecursiveCallError
from lightbot.program.call_graph import build_call_graph, find_recursive_functions
from lightbot.program.executor import BlockExecutor
from lightbot.program.functions import FunctionDef, build_function_table
from lightbot.program.tokens import normalize, validate_nesting

logger = logging.getLogger(__name__)


class LightBot:
    """Owns the live world, its start snapshot, and the current function table.

    Runs accumulate: each ``run`` continues from wherever the previous one
    left the robot and the lights. Call :meth:`reset` to start over.
    """

    def __init__(self, map_rows: Sequence[str], config: InterpreterConfig | None = None) -> None:
        self.config = config or InterpreterConfig()
        self._world = load_map(map_rows)
        self._initial = self._world.snapshot()
        self._functions: dict[str, FunctionDef] = {}

    @property
    def world(self) -> GridWorld:
        return self._world

    @property
    def functions(self) -> Mapping[str, FunctionDef]:
        """Read-only view of the definitions harvested by the last run."""
        return MappingProxyType(self._functions)

    def run(self, instructions: Iterable[str]) -> RunResult:
        """Harvest function definitions from *instructions*, then execute them.

        Definitions from earlier runs are discarded. On failure the world keeps
        whatever mutations happened before the error.
        """
        program = normalize(instructions)
        if self.config.validate_nesting:
            validate_nesting(program)

        self._functions.clear()
        self._functions.update(build_function_table(program))

        if self.config.reject_recursion:
            recursive = find_recursive_functions(build_call_graph(program, self._functions))
            if recursive:
                raise RecursiveCallError(recursive)

        logger.debug(
            "Running %d instruction(s) with %d function(s)", len(program), len(self._functions)
        )
        executor = BlockExecutor(
            self._world,
            self._functions,
            max_depth=self.config.max_depth,
            max_steps=self.config.max_steps,
        )
        executor.execute(program)
        logger.debug("Run finished after %d step(s)", executor.steps_executed)
        return RunResult(
            steps=executor.steps_executed,
            position=self.query_position(),
            functions_defined=len(self._functions),
        )

    def reset(self) -> None:
        """Restore the world to its state at construction time."""
        self._world.restore(self._initial)
        logger.debug("World reset to initial snapshot")

    def query_position(self) -> tuple[int, int]:
        """Return the robot position as ``(x, y)``, i.e. ``(col, row)``."""
        return self._world.robot.col, self._world.robot.row

    def query_map(self) -> list[str]:
        return self._world.rows()
