"""Tests for fars.utils.parse."""
import math

import numpy as np
import pytest

from fars.utils.parse import as_int


@pytest.mark.parametrize(
    "value",
    [2013, "2013", " 2013 ", 2013.0, 2013.9, "2013.076", np.int64(2013), np.float64(2013.5)],
)
def test_as_int_accepts_numeric_forms(value):
    assert as_int(value) == 2013


def test_as_int_truncates_toward_zero():
    assert as_int(-1.7) == -1


@pytest.mark.parametrize("value", ["abc", "", "20x3", "2_013", math.nan, math.inf, "nan"])
def test_as_int_rejects_unparsable(value):
    with pytest.raises(ValueError, match="invalid year"):
        as_int(value, "year")


@pytest.mark.parametrize("value", [None, True, [2013], object()])
def test_as_int_rejects_other_types(value):
    with pytest.raises(TypeError):
        as_int(value)
