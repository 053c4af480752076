"""Static call graph of a program and recursion detection.

Nodes are function names plus ``MAIN_NODE`` for the top-level program; an
edge ``a -> b`` means a CALL to ``b`` appears in ``a``'s executable tokens.
Callees that are never defined still get a node so that the runtime, not this
check, reports them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import networkx as nx

from lightbot.config.constants import MAIN_NODE
from lightbot.program.functions import FunctionDef
from lightbot.program.tokens import iter_call_names


def build_call_graph(
    instructions: Sequence[str], functions: Mapping[str, FunctionDef]
) -> nx.DiGraph:
    """Build the directed call graph rooted at ``MAIN_NODE``."""
    graph = nx.DiGraph()
    graph.add_node(MAIN_NODE)
    graph.add_nodes_from(functions)
    for callee in iter_call_names(instructions):
        graph.add_edge(MAIN_NODE, callee)
    for fn in functions.values():
        for callee in iter_call_names(fn.body):
            graph.add_edge(fn.name, callee)
    return graph


def find_recursive_functions(graph: nx.DiGraph) -> set[str]:
    """Return functions reachable from ``MAIN_NODE`` that lie on a call cycle."""
    reachable = nx.descendants(graph, MAIN_NODE) | {MAIN_NODE}
    sub = graph.subgraph(reachable)
    recursive: set[str] = set()
    for component in nx.strongly_connected_components(sub):
        if len(component) > 1:
            recursive |= component
    recursive |= {u for u, _ in nx.selfloop_edges(sub)}
    recursive.discard(MAIN_NODE)
    return recursive
