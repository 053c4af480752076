"""Program layer: token scanning, function table, call graph, and executor."""

from lightbot.program.call_graph import build_call_graph, find_recursive_functions
from lightbot.program.executor import BlockExecutor
from lightbot.program.functions import FunctionDef, build_function_table, substitute
from lightbot.program.tokens import normalize, validate_nesting

__all__ = [
    "BlockExecutor",
    "FunctionDef",
    "build_call_graph",
    "build_function_table",
    "find_recursive_functions",
    "normalize",
    "substitute",
    "validate_nesting",
]
