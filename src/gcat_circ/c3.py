"""
Equivalence classes of the 216 maximal self-complementary C3 codes.

The 216 C3 codes (Arques and Michel) fall into 27 classes of eight codes
each. Codes are numbered 1..216 and classes 1..27, both as in the
literature.
"""

from typing import List

import numpy as np

NUM_C3_CODES = 216
NUM_C3_CLASSES = 27

# fmt: off
_CLASS_OF_CODE = [
    1, 1, 2, 3, 2, 3, 4, 5, 4, 5, 6, 7, 8, 9, 2, 3, 10, 11, 11, 10,
    6, 1, 8, 12, 13, 9, 7, 9, 1, 7, 6, 12, 8, 10, 13, 9, 8, 7, 6, 10,
    11, 3, 2, 11, 5, 4, 13, 12, 12, 13, 4, 5, 5, 4, 5, 13, 12, 4, 13, 12,
    3, 2, 11, 7, 8, 9, 11, 6, 10, 9, 1, 7, 12, 6, 10, 13, 8, 6, 1, 10,
    8, 9, 12, 7, 13, 3, 8, 7, 10, 2, 6, 9, 11, 11, 4, 5, 4, 5, 1, 1,
    2, 3, 2, 3, 14, 14, 15, 16, 17, 16, 18, 15, 19, 17, 19, 18, 20, 20, 18, 15,
    17, 16, 14, 14, 16, 18, 15, 17, 19, 20, 20, 19, 20, 19, 20, 19, 17, 18, 15, 16,
    14, 16, 14, 17, 18, 15, 14, 15, 16, 14, 18, 16, 17, 17, 19, 15, 20, 19, 18, 20,
    21, 21, 22, 23, 22, 23, 24, 21, 25, 25, 24, 26, 27, 24, 26, 27, 25, 24, 21, 25,
    26, 27, 27, 26, 22, 23, 23, 22, 23, 22, 23, 27, 27, 22, 26, 26, 21, 25, 25, 24,
    24, 26, 27, 24, 26, 27, 21, 24, 25, 25, 21, 22, 23, 21, 22, 23,
]
# fmt: on

# Row k holds (code number, class number) of C3 code k + 1.
C3_EQUIV_MATRIX: np.ndarray = np.column_stack(
    [np.arange(1, NUM_C3_CODES + 1), np.array(_CLASS_OF_CODE)]
)
C3_EQUIV_MATRIX.setflags(write=False)


def c3_equiv_class(cid: int) -> int:
    """
    Equivalence class of a C3 code.

    Parameters
    ----------
    cid : int
        Code number in 1..216.

    Returns
    -------
    int
        Class number in 1..27.

    Raises
    ------
    ValueError
        If `cid` is out of range.
    """
    if not 1 <= cid <= NUM_C3_CODES:
        raise ValueError(f"C3 code number must be in 1..{NUM_C3_CODES}. Got {cid}")
    return int(C3_EQUIV_MATRIX[cid - 1, 1])


def c3_in_class(eid: int) -> List[int]:
    """
    C3 code numbers belonging to an equivalence class, in increasing order.

    Raises
    ------
    ValueError
        If `eid` is not in 1..27.
    """
    if not 1 <= eid <= NUM_C3_CLASSES:
        raise ValueError(f"C3 class number must be in 1..{NUM_C3_CLASSES}. Got {eid}")
    mask = C3_EQUIV_MATRIX[:, 1] == eid
    return C3_EQUIV_MATRIX[mask, 0].tolist()
