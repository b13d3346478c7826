"""
This module contains typing
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, List, Tuple, Union

import numpy as np
import pandas as pd


Numeric = Union[float, int]
ObjKey = Hashable

Converted = Union[Numeric, List[Any], Tuple[Any, ...], Dict[ObjKey, Any], pd.Series]

BOOLEAN_RUNTIME_TYPES = (bool, np.bool_)
NUMERIC_RUNTIME_TYPES = (int, float, np.integer, np.floating)
SEQUENCE_RUNTIME_TYPES = (list, tuple, np.ndarray, pd.Series)
MAPPING_RUNTIME_TYPES = (dict,)


class ValueKind(Enum):
    """
    Shape category of an input value
    """

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


CONTAINER_KINDS = (ValueKind.SEQUENCE, ValueKind.MAPPING)


class NanPolicy(Enum):
    """
    What happens to a leaf that cannot be converted
        ----------
        REJECT : the whole call fails
        KEEP_NAN : the leaf becomes NaN
        KEEP_ORIGINAL : the leaf keeps its input value
    """

    REJECT = "reject"
    KEEP_NAN = "keep_nan"
    KEEP_ORIGINAL = "keep_original"


class FailureReason(Enum):
    """
    Why a call to convert did not succeed
    """

    UNCONVERTIBLE = "unconvertible"
    EMPTY = "empty"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Failure:
    """
    Result of a conversion that did not succeed. Never equal to a number, NaN included.
    """

    reason: FailureReason
    detail: str = ""
