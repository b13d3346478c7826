"""
This module resolves sparse conversion options into a complete policy
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, TypedDict

from numconvert.utils.types import BOOLEAN_RUNTIME_TYPES, NanPolicy

_LOG = logging.getLogger(__name__)


class ConvertOptions(TypedDict, total=False):
    """
    Options accepted by convert. Every key is optional.
    """

    allow_nan: bool
    allow_empty: bool
    convert_booleans: bool
    convert_nested: bool
    nan_policy: NanPolicy | str


_SWITCHES = ("allow_empty", "convert_booleans", "convert_nested")
_KNOWN_OPTIONS = frozenset(ConvertOptions.__annotations__)


@dataclass(frozen=True)
class ConvertPolicy:
    """
    Fully resolved conversion behaviour, shared by every level of one call
        ----------
        nan_policy : NanPolicy
            Disposition of unconvertible leaves.
        allow_empty : bool
            Top-level empty containers are returned instead of failing.
        convert_booleans : bool
            Booleans become 1 and 0.
        convert_nested : bool
            Nested sequences and mappings are converted recursively.
    """

    nan_policy: NanPolicy = NanPolicy.REJECT
    allow_empty: bool = False
    convert_booleans: bool = False
    convert_nested: bool = False

    @property
    def allows_nan(self) -> bool:
        """
        True when an unconvertible leaf does not fail the call
        """
        return self.nan_policy is not NanPolicy.REJECT


def _is_enabled(value: Any) -> bool:
    return isinstance(value, BOOLEAN_RUNTIME_TYPES) and bool(value)


def _parse_nan_policy(value: Any) -> NanPolicy | None:
    if isinstance(value, NanPolicy):
        return value
    if isinstance(value, str):
        try:
            return NanPolicy(value.strip().lower())
        except ValueError:
            pass
    _LOG.debug("Ignoring invalid nan_policy: %r", value)
    return None


def resolve_options(
    options: Mapping[str, Any] | ConvertPolicy | None = None, **overrides: Any
) -> ConvertPolicy:
    """
    Builds a ConvertPolicy from sparse options. Keyword overrides win over
    entries of options. Invalid values fall back to defaults, this never raises.
    """
    if isinstance(options, ConvertPolicy):
        if not overrides:
            return options
        merged: Dict[str, Any] = {
            "nan_policy": options.nan_policy,
            "allow_empty": options.allow_empty,
            "convert_booleans": options.convert_booleans,
            "convert_nested": options.convert_nested,
        }
    elif isinstance(options, Mapping):
        merged = dict(options)
    else:
        if options is not None:
            _LOG.debug("Ignoring options of type %s", type(options).__name__)
        merged = {}
    # an explicit allow_nan override replaces an inherited nan_policy
    if "allow_nan" in overrides and "nan_policy" not in overrides:
        merged.pop("nan_policy", None)
    merged.update(overrides)

    unknown = sorted(str(key) for key in merged if key not in _KNOWN_OPTIONS)
    if unknown:
        _LOG.debug("Ignoring unknown conversion options: %s", ", ".join(unknown))

    nan_policy = None
    if merged.get("nan_policy") is not None:
        nan_policy = _parse_nan_policy(merged["nan_policy"])
    if nan_policy is None:
        allow_nan = _is_enabled(merged.get("allow_nan"))
        nan_policy = NanPolicy.KEEP_NAN if allow_nan else NanPolicy.REJECT

    switches = {name: _is_enabled(merged.get(name)) for name in _SWITCHES}
    return ConvertPolicy(nan_policy=nan_policy, **switches)
