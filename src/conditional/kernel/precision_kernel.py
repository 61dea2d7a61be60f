"""
Precision kernel.

Numeric operands are converted to ``Decimal`` inside a high-precision
context and compared exactly. Floats enter through their shortest ``repr``
so ``0.1`` compares as the decimal ``0.1`` and not as its binary
approximation. Operands that are not both numeric fall back to native
semantics.
"""

from __future__ import annotations

import decimal
import operator
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from conditional.exceptions import KernelError
from conditional.primitives.values import (
    is_number,
    strict_equal,
    to_primitive,
)

from .native_kernel import native_compare

__all__ = ["DEFAULT_DIGITS", "PrecisionKernel"]

# Enough for 256-bit integers (up to ~10^77).
DEFAULT_DIGITS = 78


class PrecisionKernel:
    """Kernel comparing numbers as exact decimals."""

    __slots__ = ("context", "digits")

    name = "precision"

    def __init__(self, digits: int = DEFAULT_DIGITS) -> None:
        if digits < 1:
            msg = f"Precision digits must be positive, got {digits}"
            raise KernelError(msg, context={"digits": digits})
        self.digits = digits
        self.context = decimal.Context(prec=digits)

    def to_decimal(self, value: int | float | Decimal) -> Decimal:
        """Round a number to the kernel's precision."""
        if isinstance(value, float):
            return self.context.create_decimal(repr(value))
        return self.context.create_decimal(value)

    def _compare(
        self, left: Any, right: Any, op: Callable[[Any, Any], bool]
    ) -> bool:
        left = to_primitive(left)
        right = to_primitive(right)
        if not (is_number(left) and is_number(right)):
            return native_compare(left, right, op)
        a = self.to_decimal(left)
        b = self.to_decimal(right)
        if a.is_nan() or b.is_nan():
            return False
        return op(self.context.compare(a, b), 0)

    def gt(self, left: Any, right: Any) -> bool:
        return self._compare(left, right, operator.gt)

    def lt(self, left: Any, right: Any) -> bool:
        return self._compare(left, right, operator.lt)

    def ge(self, left: Any, right: Any) -> bool:
        return self._compare(left, right, operator.ge)

    def le(self, left: Any, right: Any) -> bool:
        return self._compare(left, right, operator.le)

    def eq(self, left: Any, right: Any) -> bool:
        if not (is_number(left) and is_number(right)):
            return strict_equal(left, right)
        a = self.to_decimal(left)
        b = self.to_decimal(right)
        if a.is_nan() or b.is_nan():
            return False
        return self.context.compare(a, b) == 0

    def __repr__(self) -> str:
        return f"PrecisionKernel(digits={self.digits})"
