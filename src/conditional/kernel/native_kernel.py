"""
Native kernel.

Orders operands the way a JavaScript relational operator would: two
strings compare lexicographically, anything else is coerced to a number
and NaN never satisfies an ordering.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from conditional.primitives.values import (
    is_nan,
    strict_equal,
    to_number,
    to_primitive,
)

__all__ = ["NativeKernel", "native_compare"]


def native_compare(left: Any, right: Any, op: Callable[[Any, Any], bool]) -> bool:
    """Apply ``op`` with native coercion rules."""
    left = to_primitive(left)
    right = to_primitive(right)
    if isinstance(left, str) and isinstance(right, str):
        return op(left, right)
    x = to_number(left)
    y = to_number(right)
    if is_nan(x) or is_nan(y):
        return False
    return op(x, y)


class NativeKernel:
    """Kernel backed by Python's relational operators."""

    __slots__ = ()

    name = "native"

    def gt(self, left: Any, right: Any) -> bool:
        return native_compare(left, right, operator.gt)

    def lt(self, left: Any, right: Any) -> bool:
        return native_compare(left, right, operator.lt)

    def ge(self, left: Any, right: Any) -> bool:
        return native_compare(left, right, operator.ge)

    def le(self, left: Any, right: Any) -> bool:
        return native_compare(left, right, operator.le)

    def eq(self, left: Any, right: Any) -> bool:
        return strict_equal(left, right)

    def __repr__(self) -> str:
        return "NativeKernel()"
