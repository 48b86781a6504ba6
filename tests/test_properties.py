"""
Tests for the relations between the code properties.

Every code in CODES is checked against the implication chain
strong comma-free => comma-free => circular => code, and against the
consistency of the predicates with the enumerations.
"""

import pytest

from gcat_circ import (
    Code,
    all_ambiguous_sequences,
    circular_shift,
    get_cyclic_paths,
    get_k_graph_circular,
    get_representing_graph,
    is_code,
    is_code_circular,
    is_code_comma_free,
    is_code_strong_comma_free,
)

CODES = [
    ["ACG", "CGG", "AC"],
    ["ACG", "CGG", "AC", "GCGG"],
    ["ABC", "DEF"],
    ["ABC", "CEF"],
    ["1100", "0022", "2233", "3311"],
    ["1100", "0022", "2233", "3314"],
    ["ADB", "BA", "AAD", "DAA"],
    ["ACGG", "GGGC", "GCAC", "GGAC", "AC"],
    ["AA"],
    ["A", "C"],
    ["ABDC", "AB", "DC"],
    (
        "AAC AAG AAT ACC ACG ACT AGC AGG AGT ATT "
        "CCG CCT CGG CGT CTT GCT GGT GTT TCA TGA"
    ).split(),
]


@pytest.fixture(params=CODES, ids=lambda words: "_".join(words[:3]))
def code(request):
    return Code(request.param)


class TestPropertyRelations:
    """Test relations that hold for every code."""

    def test_implication_chain(self, code):
        if is_code_strong_comma_free(code):
            assert is_code_comma_free(code)
        if is_code_comma_free(code):
            assert is_code_circular(code)
        if is_code_circular(code):
            assert is_code(code)

    def test_ambiguous_sequences_iff_not_code(self, code):
        assert is_code(code) == (all_ambiguous_sequences(code) == [])

    def test_cycles_iff_not_circular(self, code):
        if is_code(code):
            assert (get_cyclic_paths(code) == []) == is_code_circular(code)
            assert get_representing_graph(code).is_acyclic() == is_code_circular(code)

    def test_k_graph_circular_consistent_with_cycles(self, code):
        lengths = {len(cycle) - 1 for cycle in get_cyclic_paths(code)}
        if len(lengths) == 1:
            assert get_k_graph_circular(code) == lengths.pop()
        else:
            assert get_k_graph_circular(code) == -1

    def test_shift_by_tuple_length(self, code):
        if len(code.tuple_lengths) == 1:
            assert circular_shift(code, code.tuple_lengths[0]) == code
