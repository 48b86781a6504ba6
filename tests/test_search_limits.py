"""
Tests for SearchLimits class.

This module tests the SearchLimits class functionality including
dictionary-like access, validation, and convenience methods.
"""

import pytest

from gcat_circ import SearchBoundExceeded, SearchLimits


class TestSearchLimitsBasics:
    """Test basic SearchLimits functionality."""

    def test_init_default(self):
        """Test default initialization."""
        limits = SearchLimits()
        assert limits['max_steps'] is None
        assert limits['max_results'] is None
        assert limits.is_unbounded()

    def test_init_with_parameters(self):
        limits = SearchLimits(max_steps=100, max_results=5)
        assert limits['max_steps'] == 100
        assert limits['max_results'] == 5
        assert not limits.is_unbounded()

    def test_unbounded(self):
        assert SearchLimits.unbounded() == SearchLimits()

    def test_service_defaults(self):
        limits = SearchLimits.service_defaults()
        assert limits['max_steps'] == 1_000_000
        assert limits['max_results'] == 100_000


class TestSearchLimitsDictionaryAccess:
    """Test dictionary-like access functionality."""

    def test_setitem(self):
        limits = SearchLimits()
        limits['max_steps'] = 10
        assert limits['max_steps'] == 10
        limits['max_steps'] = None
        assert limits['max_steps'] is None

    def test_unknown_key(self):
        limits = SearchLimits()
        with pytest.raises(KeyError):
            limits['max_depth']
        with pytest.raises(KeyError):
            limits['max_depth'] = 3

    def test_contains(self):
        limits = SearchLimits()
        assert 'max_steps' in limits
        assert 'max_depth' not in limits

    def test_keys_values_items(self):
        limits = SearchLimits(max_steps=7)
        assert list(limits.keys()) == ['max_steps', 'max_results']
        assert list(limits.values()) == [7, None]
        assert list(limits.items()) == [('max_steps', 7), ('max_results', None)]


class TestSearchLimitsValidation:
    """Test validation functionality."""

    def test_negative_in_constructor(self):
        with pytest.raises(ValueError):
            SearchLimits(max_steps=-1)

    def test_negative_assignment(self):
        limits = SearchLimits()
        with pytest.raises(ValueError):
            limits['max_results'] = -5


class TestSearchLimitsStringRepresentation:
    """Test string representation methods."""

    def test_str_unbounded(self):
        assert str(SearchLimits()) == "SearchLimits(unbounded)"

    def test_str_bounded(self):
        assert str(SearchLimits(max_results=3)) == "SearchLimits(max_results=3)"

    def test_repr(self):
        assert repr(SearchLimits(max_steps=2)) == "SearchLimits(max_steps=2, max_results=None)"


class TestSearchBudget:
    """Test the per-search budget."""

    def test_step_limit(self):
        budget = SearchLimits(max_steps=2).budget("test")
        budget.step()
        budget.step()
        with pytest.raises(SearchBoundExceeded, match="max_steps=2"):
            budget.step()

    def test_result_limit(self):
        budget = SearchLimits(max_results=1).budget("test")
        budget.check_results(1)
        with pytest.raises(SearchBoundExceeded, match="test"):
            budget.check_results(2)

    def test_unbounded_budget(self):
        budget = SearchLimits().budget("test")
        for _ in range(1000):
            budget.step()
        budget.check_results(10**6)


class TestSearchLimitsCopy:
    """Test copying of limits."""

    def test_copy_is_independent(self):
        limits = SearchLimits(max_steps=10)
        copied = limits.copy()
        assert copied == limits
        copied['max_steps'] = 3
        assert limits['max_steps'] == 10
