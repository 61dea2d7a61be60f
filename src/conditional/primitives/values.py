"""Value semantics shared by predicates and kernels.

Comparison values follow JavaScript rules rather than Python ones: ``None``
is an explicit null, ``UNDEFINED`` marks a value that was never supplied,
empty containers are truthy and ``True`` is not the number ``1``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from .dates import to_epoch_millis

__all__ = [
    "UNDEFINED",
    "contains_null",
    "is_array",
    "is_falsy_nonzero",
    "is_nan",
    "is_number",
    "is_object",
    "is_truthy",
    "is_zero",
    "strict_equal",
    "strict_index",
    "to_number",
    "to_primitive",
]

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")
_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$", re.ASCII)


class _Undefined:
    """Singleton marking an argument that was not supplied."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_number(value: Any) -> bool:
    """Return True for int, float and Decimal values, never for bool."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def is_zero(value: Any) -> bool:
    return is_number(value) and not is_nan(value) and value == 0


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Array or mapping: the shapes that can hold members."""
    return is_array(value) or isinstance(value, Mapping)


def is_truthy(value: Any) -> bool:
    """JavaScript truthiness: containers are truthy even when empty."""
    if value is UNDEFINED or value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_number(value):
        return not (is_nan(value) or value == 0)
    if isinstance(value, str):
        return value != ""
    return True


def is_falsy_nonzero(value: Any) -> bool:
    """Falsy but not the number zero (``UNDEFINED``, ``""``, ``False``, NaN...)."""
    return not is_truthy(value) and not is_zero(value)


def contains_null(operands: Any) -> bool:
    """Check for an explicit null among the operands.

    A list is searched by identity; any other value is null only when it is
    ``None`` itself.
    """
    if isinstance(operands, list):
        return any(operand is None for operand in operands)
    return operands is None


def to_primitive(value: Any) -> Any:
    """Coerce native dates to epoch milliseconds; leave everything else."""
    if isinstance(value, date):
        return to_epoch_millis(value)
    return value


def to_number(value: Any) -> float | int | Decimal:
    """Numeric coercion used by native relational comparison.

    Anything without a numeric reading becomes NaN.
    """
    value = to_primitive(value)
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return float("nan") if is_nan(value) else value
    if value is None:
        return 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if _NUMERIC_RE.match(text):
            return float(text)
        if _HEX_RE.match(text):
            return int(text, 16)
        match = _INFINITY_RE.match(text)
        if match:
            return -math.inf if match.group(1) == "-" else math.inf
    return float("nan")


def strict_equal(left: Any, right: Any) -> bool:
    """Identity-flavoured equality without type coercion.

    Scalars compare by value, containers and other objects by identity.
    """
    if left is right:
        return not is_nan(left)
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if is_number(left) and is_number(right):
        if is_nan(left) or is_nan(right):
            return False
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if isinstance(left, date) and isinstance(right, date):
        return type(left) is type(right) and left == right
    return False


def strict_index(items: Any, value: Any) -> int:
    """Position of ``value`` in ``items`` under strict equality, or -1."""
    for index, item in enumerate(items):
        if strict_equal(item, value):
            return index
    return -1
