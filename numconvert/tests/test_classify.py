"""
Testing for classify.py
"""

import datetime
from collections import OrderedDict

import numpy as np
import pandas as pd
import pytest

from numconvert.utils.classify import classify
from numconvert.utils.types import ValueKind


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, ValueKind.BOOLEAN),
        (np.bool_(False), ValueKind.BOOLEAN),
        ("12", ValueKind.STRING),
        ("", ValueKind.STRING),
        (0, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        (float("nan"), ValueKind.NUMBER),
        (np.int64(3), ValueKind.NUMBER),
        (np.float32(1.0), ValueKind.NUMBER),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        (np.array([1, 2]), ValueKind.SEQUENCE),
        (pd.Series([1, 2]), ValueKind.SEQUENCE),
        ({}, ValueKind.MAPPING),
        (OrderedDict(a=1), ValueKind.MAPPING),
    ],
)
def test_classify_supported(value, expected):
    """Test that supported shapes get their own kind."""
    assert classify(value) is expected


@pytest.mark.parametrize(
    "value",
    [
        None,
        b"12",
        {1, 2},
        frozenset(),
        datetime.date(2024, 1, 1),
        len,
        object(),
        np.array(3),
        2 + 1j,
        range(3),
    ],
)
def test_classify_unsupported(value):
    """Test that everything else is unsupported."""
    assert classify(value) is ValueKind.UNSUPPORTED
