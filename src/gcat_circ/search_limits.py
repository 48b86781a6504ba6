"""
Search limits for exhaustive graph and sequence searches.

This module provides the SearchLimits class for bounding the depth-first
searches used to enumerate cycles, longest paths and ambiguous sequences.
"""

from typing import Iterator, Optional, Self, Tuple

from .errors import SearchBoundExceeded


class SearchLimits:
    """
    Bounds for exhaustive searches with dictionary-like access.

    Every bound is either a non-negative integer or None, which means
    unbounded. A search that exceeds a bound raises `SearchBoundExceeded`
    instead of running indefinitely.

    Examples
    --------
    Unbounded search (the default):
    >>> limits = SearchLimits()
    >>> print(limits['max_steps'])  # None

    Cap the number of DFS expansions, e.g. when analysing codes in a service:
    >>> limits = SearchLimits(max_steps=1_000_000)

    Cap the number of collected cycles or paths:
    >>> limits = SearchLimits(max_results=10_000)
    """

    def __init__(
        self,
        max_steps: Optional[int] = None,
        max_results: Optional[int] = None,
    ):
        """
        Initialize search limits.

        Parameters
        ----------
        max_steps : int, optional
            Maximum number of depth-first expansions per search.
        max_results : int, optional
            Maximum number of cycles, paths or sequences collected per search.
        """
        self._params = {
            "max_steps": None if max_steps is None else int(max_steps),
            "max_results": None if max_results is None else int(max_results),
        }

        self.validate()

    @classmethod
    def unbounded(cls) -> Self:
        """Limits that never stop a search."""
        return cls()

    @classmethod
    def service_defaults(cls) -> Self:
        """
        Limits suitable for analysing untrusted input.

        Returns
        -------
        SearchLimits
            One million DFS expansions and one hundred thousand results.
        """
        return cls(max_steps=1_000_000, max_results=100_000)

    def __getitem__(self, key: str) -> Optional[int]:
        """
        Enable dictionary-like access: limits['max_steps'].

        Raises
        ------
        KeyError
            If the limit name is not recognized.
        """
        if key not in self._params:
            valid_keys = list(self._params.keys())
            raise KeyError(f"Unknown search limit '{key}'. Valid limits: {valid_keys}")
        return self._params[key]

    def __setitem__(self, key: str, value: Optional[int]) -> None:
        """
        Enable dictionary-like assignment: limits['max_steps'] = 1000.

        Raises
        ------
        KeyError
            If the limit name is not recognized.
        ValueError
            If value is negative.
        """
        if key not in self._params:
            valid_keys = list(self._params.keys())
            raise KeyError(f"Unknown search limit '{key}'. Valid limits: {valid_keys}")

        if value is None:
            self._params[key] = None
            return

        int_value = int(value)
        if int_value < 0:
            raise ValueError(f"Search limit '{key}' must be non-negative, got {int_value}")
        self._params[key] = int_value

    def __contains__(self, key: str) -> bool:
        return key in self._params

    def keys(self) -> Iterator[str]:
        return iter(self._params.keys())

    def values(self) -> Iterator[Optional[int]]:
        for key in self._params:
            yield self[key]

    def items(self) -> Iterator[Tuple[str, Optional[int]]]:
        for key in self._params:
            yield (key, self[key])

    def validate(self) -> None:
        """
        Validate all limits are None or non-negative.

        Raises
        ------
        ValueError
            If any limit is negative.
        """
        for key, value in self._params.items():
            if value is not None and value < 0:
                raise ValueError(f"Search limit '{key}' must be non-negative, got {value}")

    def is_unbounded(self) -> bool:
        """True if no limit is set."""
        return all(value is None for value in self.values())

    def copy(self) -> "SearchLimits":
        """Return an independent copy of these limits."""
        return SearchLimits(**self._params)

    def budget(self, search: str) -> "SearchBudget":
        """Start a fresh budget for one search named `search`."""
        return SearchBudget(self, search)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchLimits):
            return NotImplemented
        return self._params == other._params

    def __str__(self) -> str:
        if self.is_unbounded():
            return "SearchLimits(unbounded)"

        bounded = [f"{key}={value}" for key, value in self.items() if value is not None]
        return f"SearchLimits({', '.join(bounded)})"

    def __repr__(self) -> str:
        param_strs = [f"{key}={value}" for key, value in self._params.items()]
        return f"SearchLimits({', '.join(param_strs)})"


class SearchBudget:
    """Counts the work done by a single search against its `SearchLimits`."""

    def __init__(self, limits: Optional[SearchLimits], search: str):
        limits = limits if limits is not None else SearchLimits()
        self.max_steps = limits["max_steps"]
        self.max_results = limits["max_results"]
        self.search = search
        self.steps = 0

    def step(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchBoundExceeded(
                f"{self.search}: exceeded max_steps={self.max_steps}"
            )

    def check_results(self, num_results: int) -> None:
        if self.max_results is not None and num_results > self.max_results:
            raise SearchBoundExceeded(
                f"{self.search}: exceeded max_results={self.max_results}"
            )
