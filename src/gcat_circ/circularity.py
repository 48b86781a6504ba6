"""
Circularity tests for codes.

A code X is circular if every concatenation of its words written on a circle
has only one factorization into words of X. Comma-free and strong comma-free
codes are increasingly restrictive members of the family; Cn-circular codes
stay circular under every circular shift of their words; k-circular codes
only guarantee a unique circular factorization for fewer than k words.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Set

from .config import FULLY_CIRCULAR, NO_COMMON_CYCLE_LENGTH
from .decipherability import is_code
from .graph_analysis import find_cycles, is_acyclic
from .graph_builder import RepresentingGraphBuilder
from .search_limits import SearchLimits
from .utils import lcm_of

if TYPE_CHECKING:
    from .code import Code


def is_code_circular(code: "Code") -> bool:
    """
    Check whether a code is circular.

    X is circular iff it is a code and its representing graph G(X) is
    acyclic: a cycle in G(X) spells a circular word with two
    factorizations.
    """
    if not is_code(code):
        return False
    graph = RepresentingGraphBuilder(code.words).build()
    return is_acyclic(graph)


def circular_shift(code: "Code", sh: int) -> "Code":
    """
    Rotate every word left by `sh` positions (modulo the word length).

    Let X = {123, 332}; then circular_shift(X, 2) = {312, 233}.

    Raises
    ------
    InvalidShift
        If `sh` is negative or not an integer.
    """
    return code.shift(sh)


def is_code_cn_circular(code: "Code") -> bool:
    """
    Check whether a code is Cn-circular.

    All circular shifts of the code by 0 .. n-1 positions must be circular,
    where n is the least common multiple of the word lengths. Shifting by n
    gives the code back.
    """
    n = lcm_of(code.tuple_lengths)
    return all(is_code_circular(code.shift(sh)) for sh in range(n))


def is_code_comma_free(code: "Code") -> bool:
    """
    Check whether a code is comma-free.

    No concatenation of a nonempty proper suffix of a word with a nonempty
    proper prefix of a word (possibly the same one) may be a word of X.
    """
    if not is_code(code):
        return False

    words = code.words
    suffixes = {w[i:] for w in words for i in range(1, len(w))}
    prefixes = {w[:i] for w in words for i in range(1, len(w))}
    for w in words:
        for i in range(1, len(w)):
            if w[:i] in suffixes and w[i:] in prefixes:
                return False
    return True


def is_code_strong_comma_free(code: "Code") -> bool:
    """
    Check whether a code is strong comma-free.

    No nonempty proper suffix of a word may be a nonempty proper prefix of
    a word.
    """
    if not is_code(code):
        return False

    words = code.words
    suffixes = {w[i:] for w in words for i in range(1, len(w))}
    prefixes = {w[:i] for w in words for i in range(1, len(w))}
    return suffixes.isdisjoint(prefixes)


def _has_alternative_factorization(word: str, words: Sequence[str]) -> bool:
    """True if `word` splits into two or more words of `words`."""
    reachable = [False] * (len(word) + 1)
    reachable[0] = True
    for start in range(len(word)):
        if not reachable[start]:
            continue
        for w in words:
            if len(w) < len(word) and word.startswith(w, start):
                reachable[start + len(w)] = True
    return reachable[len(word)]


def _pending_successors(pending: str, word: str, words: Sequence[str]) -> Set[str]:
    """
    States of the second factorization after the first one reads `word`.

    `pending` is the part of the second factorization's current word that
    still lies ahead at a word boundary of the first factorization (empty
    when both factorizations have a boundary there). The returned states are
    the possible pending parts at the end of `word`.
    """
    results = set()
    stack = [(pending, word)]
    while stack:
        pending, rest = stack.pop()
        if pending:
            if pending.startswith(rest):
                results.add(pending[len(rest):])
            elif rest.startswith(pending):
                stack.append(("", rest[len(pending):]))
            continue
        for w in words:
            if rest.startswith(w):
                if len(w) == len(rest):
                    results.add("")
                else:
                    stack.append(("", rest[len(w):]))
            elif w.startswith(rest):
                results.add(w[len(rest):])
    return results


def _pending_transitions(words: Sequence[str]) -> Dict[str, Set[str]]:
    """Transition relation over all pending states, one step per word."""
    states = {""} | {w[i:] for w in words for i in range(1, len(w))}
    return {
        state: set().union(*(_pending_successors(state, w, words) for w in words))
        for state in states
    }


def get_exact_k_circular(code: "Code") -> int:
    """
    Largest k such that circular concatenations of up to k words are unique.

    The check grows the number m of concatenated words one at a time. A
    circular concatenation of m words has a second factorization iff some
    nonempty pending state returns to itself after m words, or (for m = 1)
    a single word splits into other words. Simple returns are no longer
    than the number of pending states, which bounds the search.

    For codes of one word length a cycle-free representing graph and a
    result of FULLY_CIRCULAR coincide. With mixed lengths they can differ:
    {A, BAB} has an acyclic graph, so `is_code_circular` is True, but the
    circle ABAB reads as A.BAB from two offsets and the result here is 1.

    Returns
    -------
    int
        (first ambiguous word count) - 1, which may be 0; FULLY_CIRCULAR if no
        circular concatenation is ambiguous.
    """
    words = code.words
    if any(_has_alternative_factorization(w, words) for w in words):
        return 0

    transitions = _pending_transitions(words)
    reachable = {state: {state} for state in transitions if state}
    for m in range(1, len(transitions) + 1):
        reachable = {
            state: set().union(*(transitions[s] for s in current))
            for state, current in reachable.items()
        }
        if any(state in current for state, current in reachable.items()):
            return m - 1
    return FULLY_CIRCULAR


def get_k_graph_circular(
    code: "Code", limits: Optional[SearchLimits] = None
) -> int:
    """
    Common length of all cycles of the representing graph.

    Returns
    -------
    int
        The number of edges shared by every cycle of G(X), or
        NO_COMMON_CYCLE_LENGTH (-1) if G(X) is acyclic or its cycles have
        different lengths.
    """
    graph = RepresentingGraphBuilder(code.words).build()
    cycles: List[List[str]] = find_cycles(graph, limits)
    lengths = {len(cycle) - 1 for cycle in cycles}
    if len(lengths) != 1:
        return NO_COMMON_CYCLE_LENGTH
    return lengths.pop()
