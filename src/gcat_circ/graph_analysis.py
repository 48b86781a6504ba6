"""
Cycle and longest path enumeration on representing graphs.

Both searches are exhaustive depth-first searches over simple paths. They
keep an explicit stack instead of recursing, and mark the vertices of the
current path so that every path stays simple and every search terminates.
Representing graphs are small (bounded by code size times word length);
`SearchLimits` can still bound the work for untrusted input.
"""

from typing import List, Optional, Sequence

import igraph as ig

from .config import PATH_SEPARATOR
from .search_limits import SearchLimits


def vertex_names(graph: ig.Graph) -> List[str]:
    """Vertex names in vertex-index order."""
    if graph.vcount() == 0:
        return []
    return list(graph.vs["name"])


def is_acyclic(graph: ig.Graph) -> bool:
    """
    Check whether a directed graph contains no directed cycle.

    Self-loops count as cycles of length one.
    """
    return graph.is_dag() and not any(graph.is_loop())


def find_cycles(
    graph: ig.Graph, limits: Optional[SearchLimits] = None
) -> List[List[str]]:
    """
    Enumerate all simple directed cycles.

    Each cycle is a closed vertex sequence ``[v0, v1, ..., v0]`` whose first
    vertex is the lexicographically smallest vertex on the cycle, so every
    cycle is reported exactly once. Cycles are returned ordered by length,
    shortest first; cycles of equal length keep their discovery order.

    Parameters
    ----------
    graph : ig.Graph
        Directed graph with vertex attribute ``name``.
    limits : SearchLimits, optional
        Bounds for the search. Unbounded if not given.

    Returns
    -------
    list of list of str
        All cycles, empty for an acyclic graph.

    Raises
    ------
    SearchBoundExceeded
        If a bound in `limits` is exceeded.
    """
    names = vertex_names(graph)
    adjacency = graph.get_adjlist(mode="out")
    order = sorted(range(graph.vcount()), key=lambda v: names[v])
    rank = {v: i for i, v in enumerate(order)}
    budget = (limits or SearchLimits()).budget("find_cycles")

    cycles: List[List[str]] = []
    for start in order:
        # Only vertices ranked above `start` may appear after it, so the
        # cycle is found from its smallest vertex only.
        path = [start]
        on_path = {start}
        stack = [iter(adjacency[start])]
        while stack:
            budget.step()
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                on_path.discard(path.pop())
                continue
            if nxt == start:
                cycles.append([names[v] for v in path] + [names[start]])
                budget.check_results(len(cycles))
            elif rank[nxt] > rank[start] and nxt not in on_path:
                path.append(nxt)
                on_path.add(nxt)
                stack.append(iter(adjacency[nxt]))

    cycles.sort(key=len)
    return cycles


def find_longest_paths(
    graph: ig.Graph, limits: Optional[SearchLimits] = None
) -> List[List[str]]:
    """
    Enumerate all simple directed paths with the maximum number of edges.

    Parameters
    ----------
    graph : ig.Graph
        Directed graph with vertex attribute ``name``.
    limits : SearchLimits, optional
        Bounds for the search. Unbounded if not given.

    Returns
    -------
    list of list of str
        Vertex sequences of all longest paths in discovery order. Empty if
        no simple path has an edge.

    Raises
    ------
    SearchBoundExceeded
        If a bound in `limits` is exceeded.
    """
    if graph.ecount() == 0:
        return []

    names = vertex_names(graph)
    adjacency = graph.get_adjlist(mode="out")
    budget = (limits or SearchLimits()).budget("find_longest_paths")

    if is_acyclic(graph):
        # a longest path in a DAG cannot be extended backwards
        starts = [v for v, indeg in enumerate(graph.indegree()) if indeg == 0]
    else:
        starts = list(range(graph.vcount()))

    best_length = 0
    longest: List[List[int]] = []
    for start in starts:
        path = [start]
        on_path = {start}
        stack = [iter(adjacency[start])]
        extended = [False]
        while stack:
            budget.step()
            nxt = next(stack[-1], None)
            if nxt is None:
                if not extended[-1]:
                    # path cannot be extended
                    length = len(path) - 1
                    if length > best_length:
                        best_length = length
                        longest = [list(path)]
                    elif length == best_length:
                        longest.append(list(path))
                        budget.check_results(len(longest))
                stack.pop()
                extended.pop()
                on_path.discard(path.pop())
                continue
            if nxt in on_path:
                continue
            extended[-1] = True
            path.append(nxt)
            on_path.add(nxt)
            stack.append(iter(adjacency[nxt]))
            extended.append(False)

    if best_length == 0:
        # only self-loops
        return []
    return [[names[v] for v in path] for path in longest]


def format_path(path: Sequence[str]) -> str:
    """Render a vertex path as ``"A -> AD -> B -> A"``."""
    return PATH_SEPARATOR.join(path)
