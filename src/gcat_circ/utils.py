import math
import re
import time
from functools import reduce, wraps
from typing import (
    Callable,
    Iterable,
    List,
    ParamSpec,
    TypeVar,
)

# Type variables for preserving the signature
P = ParamSpec("P")  # For parameters
R = TypeVar("R")  # For return type

_WORD_SEPARATORS = re.compile(r"[\s,]+")


def timeit(func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrap(*args: P.args, **kwargs: P.kwargs) -> R:
        if args[0]._benchmarking:
            start = time.time()
            res = func(*args, **kwargs)
            elapsed = time.time() - start
            print(f"Elapsed time for function '{func.__name__}': {elapsed:.2e} s")
        else:
            res = func(*args, **kwargs)
        return res

    return wrap


def split_words(text: str) -> List[str]:
    """
    Split a comma and/or whitespace separated string into words.

    Parameters
    ----------
    text : str
        Input such as ``"ACG, CGG AC"``.

    Returns
    -------
    list of str
        Words in input order, without empty entries.
    """
    return [w for w in _WORD_SEPARATORS.split(text.strip()) if w]


def lcm_of(values: Iterable[int]) -> int:
    """Least common multiple of positive integers (1 for no values)."""
    return reduce(lambda a, b: a * b // math.gcd(a, b), values, 1)


def rotate_left(word: str, shift: int) -> str:
    """Rotate `word` left by `shift` positions, modulo its length."""
    shift %= len(word)
    return word[shift:] + word[:shift]
