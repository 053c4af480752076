"""Tests for lightbot.program.call_graph."""

from __future__ import annotations

from lightbot.config.constants import MAIN_NODE
from lightbot.program.call_graph import build_call_graph, find_recursive_functions
from lightbot.program.functions import build_function_table


def _recursive(program: list[str]) -> set[str]:
    graph = build_call_graph(program, build_function_table(program))
    return find_recursive_functions(graph)


class TestBuildCallGraph:
    def test_edges_follow_calls(self) -> None:
        program = [
            "FUNCTION A",
            "CALL B",
            "ENDFUNCTION",
            "FUNCTION B",
            "LIGHT",
            "ENDFUNCTION",
            "CALL A",
        ]
        graph = build_call_graph(program, build_function_table(program))
        assert set(graph.edges()) == {(MAIN_NODE, "A"), ("A", "B")}

    def test_undefined_callee_gets_node(self) -> None:
        graph = build_call_graph(["CALL GHOST"], {})
        assert graph.has_edge(MAIN_NODE, "GHOST")

    def test_calls_inside_repeat_count(self) -> None:
        program = ["FUNCTION A", "ENDFUNCTION", "REPEAT 3", "CALL A", "ENDREPEAT"]
        graph = build_call_graph(program, build_function_table(program))
        assert graph.has_edge(MAIN_NODE, "A")


class TestFindRecursiveFunctions:
    def test_acyclic_program(self) -> None:
        program = ["FUNCTION A", "CALL B", "ENDFUNCTION", "FUNCTION B", "ENDFUNCTION", "CALL A"]
        assert _recursive(program) == set()

    def test_self_recursion(self) -> None:
        program = ["FUNCTION F(n)", "FORWARD", "CALL F(n)", "ENDFUNCTION", "CALL F(1)"]
        assert _recursive(program) == {"F"}

    def test_mutual_recursion(self) -> None:
        program = [
            "FUNCTION A",
            "CALL B",
            "ENDFUNCTION",
            "FUNCTION B",
            "CALL A",
            "ENDFUNCTION",
            "CALL A",
        ]
        assert _recursive(program) == {"A", "B"}

    def test_unreachable_cycle_is_ignored(self) -> None:
        program = ["FUNCTION A", "CALL A", "ENDFUNCTION", "LIGHT"]
        assert _recursive(program) == set()

    def test_call_inside_zero_repeat_is_ignored(self) -> None:
        program = [
            "FUNCTION F",
            "LIGHT",
            "REPEAT 0",
            "CALL F",
            "ENDREPEAT",
            "ENDFUNCTION",
            "CALL F",
        ]
        assert _recursive(program) == set()

