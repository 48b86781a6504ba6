"""
Batch analysis of many codes.

Every code is analysed independently, so the codes can be spread over
joblib workers. The results are only combined into a DataFrame afterwards.
"""

from typing import Any, Dict, Iterable

import pandas as pd
from joblib import Parallel, cpu_count, delayed

from .code import Code

COLUMNS = [
    "id",
    "words",
    "num_words",
    "tuple_lengths",
    "is_code",
    "is_circular",
    "is_cn_circular",
    "is_comma_free",
    "is_strong_comma_free",
    "exact_k_circular",
    "k_graph_circular",
    "num_cycles",
    "num_longest_paths",
    "longest_path_length",
]


def analyze_code(code: Code) -> Dict[str, Any]:
    """
    Run every predicate and measure on a single code.

    Parameters
    ----------
    code : Code
        The code to analyse.

    Returns
    -------
    dict
        One entry per analysis, plus the code id and its words joined by
        spaces.
    """
    cycles = code.get_cyclic_paths()
    longest_paths = code.get_longest_paths()
    return {
        "id": code.id,
        "words": " ".join(code.words),
        "num_words": len(code),
        "tuple_lengths": code.tuple_lengths,
        "is_code": code.is_code(),
        "is_circular": code.is_circular(),
        "is_cn_circular": code.is_cn_circular(),
        "is_comma_free": code.is_comma_free(),
        "is_strong_comma_free": code.is_strong_comma_free(),
        "exact_k_circular": code.get_exact_k_circular(),
        "k_graph_circular": code.get_k_graph_circular(),
        "num_cycles": len(cycles),
        "num_longest_paths": len(longest_paths),
        "longest_path_length": len(longest_paths[0]) - 1 if longest_paths else 0,
    }


def analyze_codes(codes: Iterable[Code], n_jobs: int = 1) -> pd.DataFrame:
    """
    Analyse many codes, optionally in parallel.

    Parameters
    ----------
    codes : iterable of Code
        Codes to analyse.
    n_jobs : int, default 1
        Number of joblib workers. Non-positive values use all CPUs.

    Returns
    -------
    pandas.DataFrame
        One row per code, in input order, with the columns of `analyze_code`.
    """
    codes = list(codes)
    n_jobs = n_jobs if n_jobs > 0 else cpu_count()

    results = Parallel(n_jobs=n_jobs)(delayed(analyze_code)(code) for code in codes)

    return pd.DataFrame(results, columns=COLUMNS)
