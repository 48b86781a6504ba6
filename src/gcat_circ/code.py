from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
)

import matplotlib.pyplot as plt

from .circularity import (
    get_exact_k_circular,
    get_k_graph_circular,
    is_code_circular,
    is_code_cn_circular,
    is_code_comma_free,
    is_code_strong_comma_free,
)
from .config import DEFAULT_CODE_ID
from .decipherability import all_ambiguous_sequences, is_code
from .errors import InvalidCode, InvalidShift
from .graph_builder import (
    RepresentingGraph,
    get_component_of_representing_graph,
    get_cyclic_paths,
    get_longest_paths,
    get_representing_graph,
)
from .search_limits import SearchLimits
from .utils import rotate_left, timeit
from .visualization import draw_representing_graph


class Code:
    """
    Immutable set of words together with every analysis defined on it.

    Words keep the order in which they were given, but two codes with the
    same words compare equal regardless of order.

    Examples
    --------
    >>> from gcat_circ import Code
    >>> code = Code.from_words(["ACG", "CGG", "AC"], id="example")
    >>> code.is_code()
    True
    >>> code.get_longest_paths()
    [['A', 'CG', 'G'], ['A', 'C', 'GG']]

    A code from a flat sequence of trinucleotides:

    >>> Code.from_sequence("ACGCGGACG", 3).words
    ('ACG', 'CGG')
    """

    _words: Tuple[str, ...]
    _id: str
    _search_limits: SearchLimits
    _benchmarking: bool

    def __init__(
        self,
        words: Iterable[str],
        id: str = DEFAULT_CODE_ID,
        search_limits: Optional[SearchLimits] = None,
        _benchmarking: bool = False,
    ):
        """
        Create a code from distinct non-empty words.

        Parameters
        ----------
        words : iterable of str
            Words of the code. Must be non-empty, duplicate-free, and consist
            of non-empty strings.
        id : str, default "unknown"
            Identifier shown when the code is printed.
        search_limits : SearchLimits, optional
            Bounds applied to the exhaustive cycle, path and ambiguity
            searches of this code. Unbounded if not given.
        _benchmarking : bool, default False
            Whether to print the execution time of each analysis.

        Raises
        ------
        InvalidCode
            If the words do not form a valid word set.
        """
        if isinstance(words, str):
            raise InvalidCode(
                "Expected a collection of words, got a single string. "
                "Use split_words or Code.from_sequence to split it."
            )

        words = tuple(words)
        if not words:
            raise InvalidCode("A code needs at least one word.")

        seen = set()
        for word in words:
            if not isinstance(word, str):
                raise InvalidCode(f"Words must be strings, got {word!r}.")
            if not word:
                raise InvalidCode("Words must not be empty.")
            if word in seen:
                raise InvalidCode(f"Duplicate word '{word}'.")
            seen.add(word)

        self._words = words
        self._id = str(id)
        # private snapshot
        self._search_limits = (
            search_limits.copy() if search_limits is not None else SearchLimits()
        )
        self._benchmarking = _benchmarking

    @classmethod
    def from_words(cls, words: Iterable[str], **kwargs) -> "Code":
        """Create a code from an explicit word list. See `Code.__init__`."""
        return cls(words, **kwargs)

    @classmethod
    def from_sequence(cls, sequence: str, tuple_length: int, **kwargs) -> "Code":
        """
        Create a code by cutting a flat sequence into words of equal length.

        Repeated tuples are kept once, at their first occurrence.

        Parameters
        ----------
        sequence : str
            Flat symbol sequence, e.g. ``"ACGCGGACG"``.
        tuple_length : int
            Length of every word. Must be positive and divide the sequence
            length.

        Raises
        ------
        InvalidCode
            If the sequence is empty or cannot be cut into whole tuples.
        """
        if (
            isinstance(tuple_length, bool)
            or not isinstance(tuple_length, int)
            or tuple_length <= 0
        ):
            raise InvalidCode(f"Tuple length must be a positive integer. Got {tuple_length!r}")
        if not sequence:
            raise InvalidCode("Cannot create a code from an empty sequence.")
        if len(sequence) % tuple_length:
            raise InvalidCode(
                f"Sequence length {len(sequence)} is not a multiple of "
                f"tuple length {tuple_length}."
            )

        tuples = (
            sequence[i : i + tuple_length] for i in range(0, len(sequence), tuple_length)
        )
        return cls(dict.fromkeys(tuples), **kwargs)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def id(self) -> str:
        return self._id

    @property
    def search_limits(self) -> SearchLimits:
        """Copy of the search limits; modifying it does not affect the code."""
        return self._search_limits.copy()

    @property
    def alphabet(self) -> Tuple[str, ...]:
        """Sorted symbols occurring in the words."""
        return tuple(sorted(set("".join(self._words))))

    @property
    def tuple_lengths(self) -> Tuple[int, ...]:
        """Sorted distinct word lengths."""
        return tuple(sorted({len(w) for w in self._words}))

    def with_id(self, id: str) -> "Code":
        """Return the same code under another identifier."""
        return self._derive(self._words, id)

    def shift(self, sh: int) -> "Code":
        """
        Rotate every word left by `sh` positions, modulo its length.

        Raises
        ------
        InvalidShift
            If `sh` is negative or not an integer.
        """
        if isinstance(sh, bool) or not isinstance(sh, int):
            raise InvalidShift(f"Shift must be an integer. Got {sh!r}")
        if sh < 0:
            raise InvalidShift(f"Shift must be non-negative. Got {sh}")

        return self._derive([rotate_left(w, sh) for w in self._words], self._id)

    def _derive(self, words: Iterable[str], id: str) -> "Code":
        return Code(
            words,
            id=id,
            search_limits=self._search_limits,
            _benchmarking=self._benchmarking,
        )

    @timeit
    def is_code(self) -> bool:
        return is_code(self)

    @timeit
    def is_circular(self) -> bool:
        return is_code_circular(self)

    @timeit
    def is_cn_circular(self) -> bool:
        return is_code_cn_circular(self)

    @timeit
    def is_comma_free(self) -> bool:
        return is_code_comma_free(self)

    @timeit
    def is_strong_comma_free(self) -> bool:
        return is_code_strong_comma_free(self)

    @timeit
    def get_exact_k_circular(self) -> int:
        return get_exact_k_circular(self)

    @timeit
    def get_k_graph_circular(self) -> int:
        return get_k_graph_circular(self, self._search_limits)

    @timeit
    def all_ambiguous_sequences(self) -> List[str]:
        return all_ambiguous_sequences(self, self._search_limits)

    @timeit
    def get_representing_graph(
        self, show_cycles: bool = False, show_longest_paths: bool = False
    ) -> RepresentingGraph:
        return get_representing_graph(
            self, show_cycles, show_longest_paths, self._search_limits
        )

    @timeit
    def get_component_of_representing_graph(
        self, i: int, show_cycles: bool = False, show_longest_paths: bool = False
    ) -> RepresentingGraph:
        return get_component_of_representing_graph(
            self, i, show_cycles, show_longest_paths, self._search_limits
        )

    @timeit
    def get_cyclic_paths(self) -> List[List[str]]:
        return get_cyclic_paths(self, self._search_limits)

    @timeit
    def get_longest_paths(self) -> List[List[str]]:
        return get_longest_paths(self, self._search_limits)

    def draw_representing_graph(
        self,
        ax: Optional[plt.Axes] = None,
        component: Optional[int] = None,
        show_cycles: bool = False,
        show_longest_paths: bool = False,
        **kwargs: Any,
    ) -> plt.Axes:
        """
        Draw the representing graph (or one of its components).

        Parameters
        ----------
        ax : matplotlib.axes.Axes, optional
            The axes on which to draw the graph. If None, a new figure and axes
            will be created.
        component : int, optional
            Cut position of the component to draw. The full graph if None.
        show_cycles : bool, default False
            Whether to colour the edges lying on cycles.
        show_longest_paths : bool, default False
            Whether to colour the edges lying on longest paths.
        **kwargs : dict
            Additional keyword arguments passed to `draw_representing_graph`.

        Returns
        -------
        matplotlib.axes.Axes
            The axes containing the drawn graph.
        """
        if component is None:
            graph = self.get_representing_graph(show_cycles, show_longest_paths)
        else:
            graph = self.get_component_of_representing_graph(
                component, show_cycles, show_longest_paths
            )
        return draw_representing_graph(graph, ax=ax, **kwargs)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return set(self._words) == set(other._words)

    def __hash__(self) -> int:
        return hash(frozenset(self._words))

    def __str__(self) -> str:
        return (
            f"{self._id} -> {{ {', '.join(self._words)} }} "
            f"Alphabet = [{', '.join(self.alphabet)}]"
        )

    def __repr__(self) -> str:
        return f"Code({list(self._words)!r}, id={self._id!r})"


def code_from_words(words: Sequence[str], **kwargs) -> Code:
    """Create a code from an explicit word list."""
    return Code.from_words(words, **kwargs)


def code_from_sequence(sequence: str, tuple_length: int, **kwargs) -> Code:
    """Create a code from a flat sequence cut into tuples of `tuple_length`."""
    return Code.from_sequence(sequence, tuple_length, **kwargs)
