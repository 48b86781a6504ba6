"""
Representing graph construction for codes.

This module builds the directed graph G(X) associated to a code X
(Fimmel, Michel and Struengmann, "N-nucleotide circular codes in graph
theory"): every word N1...Nn of X and every cut position 0 < i < n
contributes the vertices N1...Ni and Ni+1...Nn and the edge between them.

    V(X) = {N1...Ni, Ni+1...Nn : N1...Nn in X, 0 < i < n}
    E(X) = {[N1...Ni, Ni+1...Nn] : N1...Nn in X, 0 < i < n}

The i-component G_i(X) keeps only the cuts at position i.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Set, Tuple

import igraph as ig

from .config import VERTEX_COLOR, edge_kind_to_color
from .errors import InvalidComponentIndex
from .graph_analysis import find_cycles, find_longest_paths, is_acyclic, vertex_names
from .search_limits import SearchLimits

if TYPE_CHECKING:
    from .code import Code

Edge = Tuple[str, str]


class RepresentingGraphBuilder:
    """
    Builder class for the representing graph of a word set.

    Vertices and edges are added in order of first occurrence during a single
    left-to-right pass over the words (cut positions in increasing order), so
    the vertex and edge order of the result is reproducible.
    """

    def __init__(self, words: Sequence[str], component: Optional[int] = None):
        """
        Initialize the representing graph builder.

        Parameters
        ----------
        words : sequence of str
            Words of the code.
        component : int, optional
            If given, only cuts at this position are used (the i-component).
            Must lie in 1..(max word length - 1).
        """
        self.words = tuple(words)
        self.component = component

        if component is not None:
            max_cut = max((len(w) for w in self.words), default=1) - 1
            if (
                isinstance(component, bool)
                or not isinstance(component, int)
                or not 1 <= component <= max_cut
            ):
                raise InvalidComponentIndex(
                    f"Component index must be in 1..{max_cut}. Got {component!r}"
                )

        self._vertex_ids: Dict[str, int] = {}
        self._edge_set: Set[Tuple[int, int]] = set()
        self._names: List[str] = []
        self._edges: List[Tuple[int, int]] = []
        self._edge_words: List[str] = []
        self._edge_cuts: List[int] = []

    def build(self) -> ig.Graph:
        """
        Build the directed representing graph.

        Returns
        -------
        ig.Graph
            Directed graph with vertex attribute ``name`` and edge attributes
            ``word``, ``cut`` and ``kind``.
        """
        for word in self.words:
            for cut in self._cut_positions(word):
                self._add_cut(word, cut)

        return ig.Graph(
            n=len(self._names),
            edges=self._edges,
            directed=True,
            vertex_attrs={"name": self._names},
            edge_attrs={
                "word": self._edge_words,
                "cut": self._edge_cuts,
                "kind": ["plain"] * len(self._edges),
            },
        )

    def _cut_positions(self, word: str) -> range:
        """Cut positions of `word` used by this builder."""
        if self.component is None:
            return range(1, len(word))
        if self.component < len(word):
            return range(self.component, self.component + 1)
        return range(0)

    def _add_cut(self, word: str, cut: int) -> None:
        """Add the vertices and the edge for one cut of one word."""
        prefix_id = self._vertex_id(word[:cut])
        suffix_id = self._vertex_id(word[cut:])
        if (prefix_id, suffix_id) in self._edge_set:
            return
        self._edge_set.add((prefix_id, suffix_id))
        self._edges.append((prefix_id, suffix_id))
        self._edge_words.append(word)
        self._edge_cuts.append(cut)

    def _vertex_id(self, label: str) -> int:
        vid = self._vertex_ids.get(label)
        if vid is None:
            vid = len(self._names)
            self._vertex_ids[label] = vid
            self._names.append(label)
        return vid


def _path_edges(paths: Sequence[Sequence[str]]) -> Tuple[Edge, ...]:
    """Edges along vertex paths, in order of first appearance, without duplicates."""
    seen: Set[Edge] = set()
    edges: List[Edge] = []
    for path in paths:
        for edge in zip(path[:-1], path[1:]):
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
    return tuple(edges)


@dataclass(frozen=True, eq=False)
class RepresentingGraph:
    """
    Representing graph of a code together with optional highlight sets.

    The underlying `ig.Graph` is private; `to_igraph` hands out copies.

    Attributes
    ----------
    component : int or None
        Cut position for an i-component, None for the full graph.
    cycle_edges : tuple of (str, str) or None
        Edges lying on some cycle, if requested.
    longest_path_edges : tuple of (str, str) or None
        Edges lying on some longest path, if requested.
    """

    _graph: ig.Graph
    component: Optional[int] = None
    cycle_edges: Optional[Tuple[Edge, ...]] = None
    longest_path_edges: Optional[Tuple[Edge, ...]] = None

    @property
    def vertices(self) -> List[str]:
        return vertex_names(self._graph)

    @property
    def edges(self) -> List[Edge]:
        names = vertex_names(self._graph)
        return [(names[s], names[t]) for s, t in self._graph.get_edgelist()]

    def is_acyclic(self) -> bool:
        return is_acyclic(self._graph)

    def to_igraph(self) -> ig.Graph:
        """
        Return a copy of the graph prepared for rendering.

        Edges receive a ``kind`` ("plain", "cycle" or "longest_path") and a
        matching ``color`` attribute; cycle highlighting takes precedence.
        Vertices receive ``label`` and ``color``.
        """
        g = self._graph.copy()
        cycle_edges = set(self.cycle_edges or ())
        longest_edges = set(self.longest_path_edges or ())

        kinds = []
        for edge in self.edges:
            if edge in cycle_edges:
                kinds.append("cycle")
            elif edge in longest_edges:
                kinds.append("longest_path")
            else:
                kinds.append("plain")

        if g.ecount():
            g.es["kind"] = kinds
            g.es["color"] = [edge_kind_to_color(kind) for kind in kinds]
        if g.vcount():
            g.vs["label"] = g.vs["name"]
            g.vs["color"] = [VERTEX_COLOR] * g.vcount()
        return g

    def cycle_subgraph(self, limits: Optional[SearchLimits] = None) -> "RepresentingGraph":
        """Subgraph formed by the edges of all cycles."""
        cycle_edges = self.cycle_edges
        if cycle_edges is None:
            cycle_edges = _path_edges(find_cycles(self._graph, limits))
        return RepresentingGraph(
            _graph=self._edge_subgraph(cycle_edges),
            component=self.component,
            cycle_edges=cycle_edges,
        )

    def longest_path_subgraph(
        self, limits: Optional[SearchLimits] = None
    ) -> "RepresentingGraph":
        """Subgraph formed by the edges of all longest paths."""
        longest_path_edges = self.longest_path_edges
        if longest_path_edges is None:
            longest_path_edges = _path_edges(find_longest_paths(self._graph, limits))
        return RepresentingGraph(
            _graph=self._edge_subgraph(longest_path_edges),
            component=self.component,
            longest_path_edges=longest_path_edges,
        )

    def _edge_subgraph(self, edges: Sequence[Edge]) -> ig.Graph:
        edge_ids = sorted(self._graph.get_eid(source, target) for source, target in edges)
        return self._graph.subgraph_edges(edge_ids, delete_vertices=True)


def _representing_graph(
    code: "Code",
    component: Optional[int],
    show_cycles: bool,
    show_longest_paths: bool,
    limits: Optional[SearchLimits],
) -> RepresentingGraph:
    graph = RepresentingGraphBuilder(code.words, component=component).build()

    cycle_edges = None
    if show_cycles:
        cycle_edges = _path_edges(find_cycles(graph, limits))

    longest_path_edges = None
    if show_longest_paths:
        longest_path_edges = _path_edges(find_longest_paths(graph, limits))

    return RepresentingGraph(
        _graph=graph,
        component=component,
        cycle_edges=cycle_edges,
        longest_path_edges=longest_path_edges,
    )


def get_representing_graph(
    code: "Code",
    show_cycles: bool = False,
    show_longest_paths: bool = False,
    limits: Optional[SearchLimits] = None,
) -> RepresentingGraph:
    """
    Build the full representing graph G(X) of a code.

    Parameters
    ----------
    code : Code
        The code X.
    show_cycles : bool, default False
        Whether to collect the edges lying on cycles.
    show_longest_paths : bool, default False
        Whether to collect the edges lying on longest paths.
    limits : SearchLimits, optional
        Bounds for the cycle and longest path searches.

    Returns
    -------
    RepresentingGraph
        The graph and the requested highlight sets.
    """
    return _representing_graph(code, None, show_cycles, show_longest_paths, limits)


def get_component_of_representing_graph(
    code: "Code",
    i: int,
    show_cycles: bool = False,
    show_longest_paths: bool = False,
    limits: Optional[SearchLimits] = None,
) -> RepresentingGraph:
    """
    Build the i-component G_i(X) of the representing graph.

    Only words longer than `i` contribute, each with its single cut at
    position `i`.

    Raises
    ------
    InvalidComponentIndex
        If `i` is not in 1..(max word length - 1).
    """
    return _representing_graph(code, i, show_cycles, show_longest_paths, limits)


def get_cyclic_paths(code: "Code", limits: Optional[SearchLimits] = None) -> List[List[str]]:
    """
    All simple cycles of the full representing graph of a code.

    See `find_cycles` for the cycle format.
    """
    graph = RepresentingGraphBuilder(code.words).build()
    return find_cycles(graph, limits)


def get_longest_paths(code: "Code", limits: Optional[SearchLimits] = None) -> List[List[str]]:
    """
    All longest simple paths of the full representing graph of a code.

    See `find_longest_paths` for the path format.
    """
    graph = RepresentingGraphBuilder(code.words).build()
    return find_longest_paths(graph, limits)
