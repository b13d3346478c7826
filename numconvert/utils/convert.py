"""
This module contains utility functions converting values to numbers
"""

import copy
import logging
import math
import re
from typing import Any, Dict, List, Mapping, Tuple, overload

import numpy as np
import pandas as pd

from numconvert.utils.classify import classify
from numconvert.utils.options import ConvertPolicy, resolve_options
from numconvert.utils.types import (
    CONTAINER_KINDS,
    Converted,
    Failure,
    FailureReason,
    NanPolicy,
    Numeric,
    ObjKey,
    ValueKind,
)

_LOG = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_PREFIXED_INT_PATTERN = re.compile(r"^0[xob][0-9a-f]+$", re.IGNORECASE | re.ASCII)
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}

Options = Mapping[str, Any] | ConvertPolicy | None


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def _parse_string(text: str) -> Numeric:
    """
    Parses a numeric literal, NaN when text is not one
    """
    stripped = text.strip()
    # only ASCII literals, no locale digits
    if not stripped or not stripped.isascii():
        return np.nan
    if stripped in _INFINITY:
        return _INFINITY[stripped]
    try:
        if _INT_PATTERN.match(stripped):
            return int(stripped)
        if _PREFIXED_INT_PATTERN.match(stripped):
            return int(stripped, 0)
        if _FLOAT_PATTERN.match(stripped):
            return float(stripped)
    except ValueError:
        pass
    return np.nan


def _convert_leaf(value: Any, kind: ValueKind, policy: ConvertPolicy) -> Numeric:
    if kind is ValueKind.BOOLEAN:
        if policy.convert_booleans:
            return 1 if value else 0
        return np.nan
    if kind is ValueKind.STRING:
        return _parse_string(value)
    return value


def _dispose(original: Any, policy: ConvertPolicy, container: bool = False) -> Any:
    """
    Value stored in place of an unconvertible element.
    Kept containers are copies, so the result never aliases the input.
    """
    if policy.nan_policy is NanPolicy.KEEP_ORIGINAL:
        return copy.deepcopy(original) if container else original
    return np.nan


def _convert_element(value: Any, policy: ConvertPolicy) -> Tuple[Any, bool]:
    """
    Converts one value found at any depth.
    Returns (converted value, whether anything unconvertible was met)
    """
    kind = classify(value)

    if kind in CONTAINER_KINDS:
        if policy.convert_nested:
            return _convert_container(value, kind, policy)
        return _dispose(value, policy, container=True), True

    if kind is ValueKind.UNSUPPORTED:
        _LOG.debug("Type not implemented for: %r", value)
        return _dispose(value, policy), True

    number = _convert_leaf(value, kind, policy)
    if _is_nan(number):
        if kind is ValueKind.NUMBER:
            return value, True
        return _dispose(value, policy), True
    return number, False


def _rebuild_sequence(original: Any, items: List[Any]) -> Any:
    if isinstance(original, tuple):
        return tuple(items)
    if isinstance(original, pd.Series):
        return pd.Series(items, index=original.index, name=original.name)
    return items


def _convert_sequence(seq: Any, policy: ConvertPolicy) -> Tuple[Any, bool]:
    items = seq.tolist() if isinstance(seq, np.ndarray) else list(seq)
    converted: List[Any] = []
    encountered_nan = False

    for item in items:
        value, unconvertible = _convert_element(item, policy)
        if unconvertible:
            # nothing of this traversal will be returned
            if not policy.allows_nan:
                return None, True
            encountered_nan = True
        converted.append(value)

    return _rebuild_sequence(seq, converted), encountered_nan


def _convert_mapping(
    obj: Mapping[ObjKey, Any], policy: ConvertPolicy
) -> Tuple[Dict[ObjKey, Any] | None, bool]:
    converted: Dict[ObjKey, Any] = {}
    encountered_nan = False

    for key, item in obj.items():
        value, unconvertible = _convert_element(item, policy)
        if unconvertible:
            if not policy.allows_nan:
                return None, True
            encountered_nan = True
        converted[key] = value

    return converted, encountered_nan


def _convert_container(
    value: Any, kind: ValueKind, policy: ConvertPolicy
) -> Tuple[Any, bool]:
    if kind is ValueKind.MAPPING:
        return _convert_mapping(value, policy)
    return _convert_sequence(value, policy)


@overload
def convert(value: List[Any], options: Options = None, **overrides: Any) -> List[Any] | Failure: ...

@overload
def convert(
    value: Tuple[Any, ...], options: Options = None, **overrides: Any
) -> Tuple[Any, ...] | Failure: ...

@overload
def convert(value: pd.Series, options: Options = None, **overrides: Any) -> pd.Series | Failure: ...

@overload
def convert(
    value: Dict[ObjKey, Any], options: Options = None, **overrides: Any
) -> Dict[ObjKey, Any] | Failure: ...

@overload
def convert(value: Any, options: Options = None, **overrides: Any) -> Any: ...


def convert(value: Any, options: Options = None, **overrides: Any) -> Converted | Failure:
    """
    Converts a value to a number, a sequence of numbers or a mapping of numbers.

    Parameters:
        value: string, number, boolean, sequence or dict, possibly nested
        options: sparse ConvertOptions mapping or a resolved ConvertPolicy
        overrides: options given as keywords, they win over options

    Options:
        allow_nan: unconvertible leaves become NaN instead of failing. Defaults to False
        allow_empty: empty sequences and dicts are returned as is. Defaults to False
        convert_booleans: booleans become 1 and 0. Defaults to False
        convert_nested: nested sequences and dicts are converted. Defaults to False
        nan_policy: "reject", "keep_nan" or "keep_original", wins over allow_nan

    Returns:
        The converted value with the shape of the input, or a Failure.
        Ordinary conversion problems never raise.
    """
    policy = resolve_options(options, **overrides)
    kind = classify(value)

    if kind is ValueKind.UNSUPPORTED:
        _LOG.warning("Type not implemented for: %r", value)
        return Failure(
            FailureReason.UNSUPPORTED, f"unsupported type {type(value).__name__}"
        )

    if kind in CONTAINER_KINDS:
        if len(value) == 0:
            if not policy.allow_empty:
                return Failure(FailureReason.EMPTY, f"empty {type(value).__name__}")
            return {} if kind is ValueKind.MAPPING else _rebuild_sequence(value, [])
        result, unconvertible = _convert_container(value, kind, policy)
        detail = f"{type(value).__name__} holds a value that is not a number"
    else:
        result, unconvertible = _convert_element(value, policy)
        detail = f"{value!r} is not a number"

    if unconvertible and not policy.allows_nan:
        return Failure(FailureReason.UNCONVERTIBLE, detail)
    return result


def is_failure(result: Any) -> bool:
    """
    True when result is the outcome of a failed conversion
    """
    return isinstance(result, Failure)


def convert_to_numpy(data: Any, options: Options = None, **overrides: Any) -> np.ndarray:
    """
    Converts supported inputs (scalars and sequences) to a standardized float np.ndarray.
    Takes the same options as convert, but raises TypeError instead of returning a Failure.
    """
    result = convert(data, options, **overrides)

    if isinstance(result, Failure):
        raise TypeError(
            f"Unsupported input type: {type(data).__name__} ({result.reason.value}: {result.detail})"
        )

    # Keys have no place in an array
    if isinstance(result, dict):
        raise TypeError(f"Unsupported input type: {type(data).__name__}")

    try:
        return np.asarray(result, dtype=float)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Converted {type(data).__name__} has no numeric array form"
        ) from exc
