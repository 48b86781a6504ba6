"""
Exceptions raised by gcat_circ.

Construction and parameter validation raise subclasses of ``ValueError``;
analysis functions never raise for a valid code unless a search bound
configured through ``SearchLimits`` is hit.
"""


class InvalidCode(ValueError):
    """A word list or sequence cannot be turned into a code."""


class InvalidShift(ValueError):
    """A circular shift amount is negative or not an integer."""


class InvalidComponentIndex(ValueError):
    """A component index lies outside the cut positions of a code."""


class SearchBoundExceeded(RuntimeError):
    """An exhaustive search exceeded the configured ``SearchLimits``."""
