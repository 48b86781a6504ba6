from .code import Code, code_from_sequence, code_from_words
from .search_limits import SearchLimits
from .errors import InvalidCode, InvalidShift, InvalidComponentIndex, SearchBoundExceeded
from .config import FULLY_CIRCULAR, NO_COMMON_CYCLE_LENGTH
from .decipherability import is_code, all_ambiguous_sequences
from .circularity import (
    circular_shift,
    get_exact_k_circular,
    get_k_graph_circular,
    is_code_circular,
    is_code_cn_circular,
    is_code_comma_free,
    is_code_strong_comma_free,
)
from .graph_builder import (
    RepresentingGraph,
    RepresentingGraphBuilder,
    get_component_of_representing_graph,
    get_cyclic_paths,
    get_longest_paths,
    get_representing_graph,
)
from .graph_analysis import format_path
from .c3 import c3_equiv_class, c3_in_class
from .batch import analyze_code, analyze_codes
from .utils import split_words
from .visualization import draw_representing_graph

__all__ = [
    "Code",
    "code_from_words",
    "code_from_sequence",
    "SearchLimits",
    "InvalidCode",
    "InvalidShift",
    "InvalidComponentIndex",
    "SearchBoundExceeded",
    "FULLY_CIRCULAR",
    "NO_COMMON_CYCLE_LENGTH",
    "is_code",
    "all_ambiguous_sequences",
    "circular_shift",
    "get_exact_k_circular",
    "get_k_graph_circular",
    "is_code_circular",
    "is_code_cn_circular",
    "is_code_comma_free",
    "is_code_strong_comma_free",
    "RepresentingGraph",
    "RepresentingGraphBuilder",
    "get_component_of_representing_graph",
    "get_cyclic_paths",
    "get_longest_paths",
    "get_representing_graph",
    "format_path",
    "c3_equiv_class",
    "c3_in_class",
    "analyze_code",
    "analyze_codes",
    "split_words",
    "draw_representing_graph",
]
