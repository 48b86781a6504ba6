"""
Unique decipherability of word sets.

A set of words X is a code if every concatenation of words from X has exactly
one factorization into words of X. The test implemented here is the
Sardinas-Patterson closure over "dangling suffixes": whenever two
factorizations of the same text are out of step, the part by which the
leading one is ahead is a suffix of some word of X. Both factorizations end
together exactly when that suffix becomes empty.

Only suffixes of words can ever be dangling, so the closure is finite and the
searches below terminate.
"""

from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Set, Tuple

from .search_limits import SearchLimits

if TYPE_CHECKING:
    from .code import Code


def _seed_suffixes(words: Sequence[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield (lagging text, dangling suffix) for every proper prefix relation.

    For distinct words u, v with u a prefix of v the factorizations starting
    with u and with v disagree, and v is ahead by ``v[len(u):]``.
    """
    for u in words:
        for v in words:
            if u != v and v.startswith(u):
                yield u, v[len(u):]


def _next_suffixes(suffix: str, words: Sequence[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield (consumed text, next dangling suffix) after the lagging side reads a word.

    The consumed text is what both factorizations now additionally agree on.
    An empty next suffix means both factorizations end at the same position.
    """
    for w in words:
        if suffix.startswith(w):
            yield w, suffix[len(w):]
        elif w.startswith(suffix):
            # the lagging side overtakes; roles swap
            yield suffix, w[len(suffix):]


def dangling_suffixes(words: Sequence[str]) -> Set[str]:
    """
    Compute the closure of dangling suffixes of a word set.

    Parameters
    ----------
    words : sequence of str
        Distinct non-empty words.

    Returns
    -------
    set of str
        Every suffix reachable from the seed pairs. Contains the empty
        string iff the words do not form a code.
    """
    seen = {suffix for _, suffix in _seed_suffixes(words)}
    frontier = list(seen)
    while frontier:
        suffix = frontier.pop()
        if not suffix:
            continue
        for _, nxt in _next_suffixes(suffix, words):
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return seen


def is_code(code: "Code") -> bool:
    """
    Check whether a word set is uniquely decipherable.

    Parameters
    ----------
    code : Code
        The word set to test.

    Returns
    -------
    bool
        True if every concatenation of words has a single factorization.
    """
    return "" not in dangling_suffixes(code.words)


def all_ambiguous_sequences(
    code: "Code", limits: Optional[SearchLimits] = None
) -> List[str]:
    """
    Enumerate the minimal sequences that have two factorizations.

    A sequence is reported when two factorizations which start with
    different words end at the same position for the first time. Along one
    search branch a dangling suffix is never revisited, so every reported
    sequence corresponds to a simple chain of dangling suffixes.

    Parameters
    ----------
    code : Code
        The word set to analyse.
    limits : SearchLimits, optional
        Bounds for the search. Unbounded if not given.

    Returns
    -------
    list of str
        Ambiguous sequences in discovery order, without duplicates. Empty
        iff the word set is a code.

    Raises
    ------
    SearchBoundExceeded
        If a bound in `limits` is exceeded.
    """
    words = code.words
    budget = (limits or SearchLimits()).budget("all_ambiguous_sequences")
    found: List[str] = []
    found_set: Set[str] = set()

    for text, suffix in _seed_suffixes(words):
        # (consumed text, dangling suffix, suffixes on the current branch)
        stack = [(text, suffix, frozenset([suffix]))]
        while stack:
            budget.step()
            text, suffix, on_branch = stack.pop()
            children = []
            for consumed, nxt in _next_suffixes(suffix, words):
                if not nxt:
                    sequence = text + consumed
                    if sequence not in found_set:
                        found_set.add(sequence)
                        found.append(sequence)
                        budget.check_results(len(found))
                elif nxt not in on_branch:
                    children.append((text + consumed, nxt, on_branch | {nxt}))
            # keep word order when popping
            stack.extend(reversed(children))

    return found
