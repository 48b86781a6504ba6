"""
Tests for cycle and longest path enumeration.
"""

import pytest

from gcat_circ import (
    Code,
    SearchBoundExceeded,
    SearchLimits,
    format_path,
    get_cyclic_paths,
    get_longest_paths,
)
from gcat_circ.graph_analysis import find_cycles, find_longest_paths, is_acyclic
from gcat_circ.graph_builder import RepresentingGraphBuilder

CODE_20 = (
    "AAC AAG AAT ACC ACG ACT AGC AGG AGT ATT "
    "CCG CCT CGG CGT CTT GCT GGT GTT TCA TGA"
).split()


class TestCyclicPaths:
    """Test enumeration of cycles."""

    def test_cycles_sorted_by_length(self):
        code = Code(["ACGG", "GGGC", "GCAC", "GGAC", "AC"])
        assert get_cyclic_paths(code) == [
            ["AC", "GG", "AC"],
            ["AC", "GG", "GC", "AC"],
        ]

    def test_cycles_start_at_smallest_vertex(self):
        code = Code(["ADB", "BA", "AAD", "DAA"])
        cycles = get_cyclic_paths(code)
        assert cycles == [["AA", "D", "AA"], ["A", "AD", "B", "A"]]
        assert [format_path(c) for c in cycles] == [
            "AA -> D -> AA",
            "A -> AD -> B -> A",
        ]

    def test_self_loop(self):
        assert get_cyclic_paths(Code(["AA"])) == [["A", "A"]]

    def test_acyclic(self):
        assert get_cyclic_paths(Code(["ACG", "CGG", "AC"])) == []

    def test_every_cycle_once(self):
        code = Code(["1100", "0022", "2233", "3311"])
        cycles = get_cyclic_paths(code)
        assert ["00", "22", "33", "11", "00"] in cycles
        assert len(cycles) == len({tuple(c) for c in cycles})

    def test_max_steps(self):
        code = Code(["ACGG", "GGGC", "GCAC", "GGAC", "AC"])
        with pytest.raises(SearchBoundExceeded):
            get_cyclic_paths(code, SearchLimits(max_steps=1))

    def test_max_results(self):
        code = Code(["ACGG", "GGGC", "GCAC", "GGAC", "AC"])
        with pytest.raises(SearchBoundExceeded):
            get_cyclic_paths(code, SearchLimits(max_results=1))


class TestLongestPaths:
    """Test enumeration of longest paths."""

    def test_all_longest_paths(self):
        paths = get_longest_paths(Code(["ACG", "CGG", "AC"]))
        assert paths == [["A", "CG", "G"], ["A", "C", "GG"]]

    def test_chain(self):
        paths = get_longest_paths(Code(["ABC", "BCD", "DEF", "EFG"]))
        assert paths == [["A", "BC", "D", "EF", "G"]]

    def test_twenty_word_code(self):
        paths = get_longest_paths(Code(CODE_20))
        assert len(paths) == 16
        assert {len(p) - 1 for p in paths} == {8}

    def test_paths_are_simple(self):
        paths = get_longest_paths(Code(["ADB", "BA", "AAD", "DAA"]))
        assert paths
        assert len({len(p) for p in paths}) == 1
        for path in paths:
            assert len(path) == len(set(path))

    def test_no_edges(self):
        assert get_longest_paths(Code(["A", "C"])) == []

    def test_only_self_loop(self):
        assert get_longest_paths(Code(["AA"])) == []

    def test_facade_uses_code_limits(self):
        code = Code(CODE_20, search_limits=SearchLimits(max_steps=5))
        with pytest.raises(SearchBoundExceeded):
            code.get_longest_paths()


class TestGraphHelpers:
    """Test the graph level helpers directly."""

    def test_is_acyclic(self):
        assert is_acyclic(RepresentingGraphBuilder(["ACG", "CGG"]).build())
        assert not is_acyclic(RepresentingGraphBuilder(["AA"]).build())
        assert is_acyclic(RepresentingGraphBuilder(["A"]).build())

    def test_find_on_component(self):
        graph = RepresentingGraphBuilder(["ACGG", "GGAC"], component=2).build()
        assert find_cycles(graph) == [["AC", "GG", "AC"]]
        assert find_longest_paths(graph) == [["AC", "GG"], ["GG", "AC"]]
