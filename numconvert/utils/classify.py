"""
This module classifies input values into the shapes convert understands
"""

from typing import Any

import numpy as np

from numconvert.utils.types import (
    BOOLEAN_RUNTIME_TYPES,
    MAPPING_RUNTIME_TYPES,
    NUMERIC_RUNTIME_TYPES,
    SEQUENCE_RUNTIME_TYPES,
    ValueKind,
)


def classify(value: Any) -> ValueKind:
    """
    Returns the ValueKind of value. Checks run in priority order, so a bool
    is never reported as a number.
    """
    if isinstance(value, BOOLEAN_RUNTIME_TYPES):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, NUMERIC_RUNTIME_TYPES):
        return ValueKind.NUMBER
    if isinstance(value, SEQUENCE_RUNTIME_TYPES):
        # 0-d arrays have no length and cannot be iterated
        if isinstance(value, np.ndarray) and value.ndim == 0:
            return ValueKind.UNSUPPORTED
        return ValueKind.SEQUENCE
    if isinstance(value, MAPPING_RUNTIME_TYPES):
        return ValueKind.MAPPING
    return ValueKind.UNSUPPORTED
