"""
Configuration constants and type definitions for code analysis.

This module centralizes sentinels, default values and rendering colours used
throughout the gcat_circ package.
"""

from typing import Dict, Literal

# Type definitions
EDGE_KIND = Literal["plain", "cycle", "longest_path"]

DEFAULT_CODE_ID = "unknown"

# Returned by get_exact_k_circular when no circular concatenation is ambiguous
FULLY_CIRCULAR: int = 2**32 - 1

# Returned by get_k_graph_circular for acyclic graphs or mixed cycle lengths
NO_COMMON_CYCLE_LENGTH: int = -1

EDGE_COLORS: Dict[str, str] = {
    "plain": "black",
    "cycle": "red",
    "longest_path": "green",
}

VERTEX_COLOR = "white"

PATH_SEPARATOR = " -> "


def edge_kind_to_color(kind: EDGE_KIND) -> str:
    """
    Convert an edge kind to the colour used when rendering it.

    Parameters
    ----------
    kind : EDGE_KIND
        Edge kind ("plain", "cycle" or "longest_path").

    Returns
    -------
    str
        Matplotlib colour name.
    """
    return EDGE_COLORS[kind]
