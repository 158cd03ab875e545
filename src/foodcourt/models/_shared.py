"""Helpers shared by the record models."""

import math
import re
from typing import Any

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_float(value: Any, default: float = 0.0) -> float:
    """
    Leniently convert a stored value to float.

    Strings are parsed from their leading number ("12.50 INR" -> 12.5).
    Anything unparsable, including booleans and NaN, gives ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return default
        number = float(match.group(0))
    else:
        return default
    return default if math.isnan(number) else number


def children(value: Any) -> list[tuple[str, Any]]:
    """
    Return the (key, value) children of a database node.

    The Realtime Database returns nodes with integer-like keys as lists,
    with ``None`` in the gaps; those are mapped back to string keys.
    """
    if isinstance(value, dict):
        return [(str(key), child) for key, child in value.items()]
    if isinstance(value, list):
        return [(str(index), child) for index, child in enumerate(value) if child is not None]
    return []
