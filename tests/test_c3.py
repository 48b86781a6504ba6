"""
Tests for the C3 equivalence class table.
"""

import numpy as np
import pytest

from gcat_circ import c3_equiv_class, c3_in_class
from gcat_circ.c3 import C3_EQUIV_MATRIX


class TestC3EquivalenceClasses:
    """Test lookups in the C3 equivalence table."""

    def test_table_shape(self):
        assert C3_EQUIV_MATRIX.shape == (216, 2)
        assert np.array_equal(C3_EQUIV_MATRIX[:, 0], np.arange(1, 217))

    def test_table_is_read_only(self):
        with pytest.raises(ValueError):
            C3_EQUIV_MATRIX[0, 1] = 5

    @pytest.mark.parametrize(
        "cid, eid",
        [(1, 1), (3, 2), (23, 8), (105, 14), (160, 20), (161, 21), (216, 23)],
    )
    def test_equiv_class(self, cid, eid):
        assert c3_equiv_class(cid) == eid

    def test_in_class(self):
        assert c3_in_class(1) == [1, 2, 22, 29, 71, 79, 99, 100]
        assert c3_in_class(27) == [173, 176, 182, 183, 192, 193, 203, 206]

    def test_every_class_has_eight_codes(self):
        for eid in range(1, 28):
            members = c3_in_class(eid)
            assert len(members) == 8
            assert all(c3_equiv_class(cid) == eid for cid in members)

    @pytest.mark.parametrize("cid", [0, 217, -1])
    def test_invalid_code_number(self, cid):
        with pytest.raises(ValueError):
            c3_equiv_class(cid)

    @pytest.mark.parametrize("eid", [0, 28])
    def test_invalid_class_number(self, eid):
        with pytest.raises(ValueError):
            c3_in_class(eid)
