"""Ordering predicates: gt, lt, cap, floor and range.

All of them answer False when an operand is an explicit null. ISO-8601
arguments are converted to epoch milliseconds on each call.
"""

from __future__ import annotations

from typing import Any

from conditional.primitives.dates import normalize_date
from conditional.primitives.values import (
    UNDEFINED,
    contains_null,
    is_falsy_nonzero,
)

from ._base import Predicate, register_predicate


@register_predicate("gt")
class GtPredicate(Predicate):
    """Greater than."""

    name = "gt"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        if contains_null([value, staged]):
            return False
        return self.kernel.gt(staged, normalize_date(value))


@register_predicate("lt")
class LtPredicate(Predicate):
    """Less than."""

    name = "lt"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        if contains_null([value, staged]):
            return False
        return self.kernel.lt(staged, normalize_date(value))


@register_predicate("cap")
@register_predicate("ceil")
class CapPredicate(Predicate):
    """Less than or equal.

    A missing or empty staged value (falsy, but not zero) is under any cap.
    """

    name = "cap"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        if contains_null([value, staged]):
            return False
        value = normalize_date(value)
        if is_falsy_nonzero(staged):
            return True
        return self.kernel.le(staged, value)


@register_predicate("floor")
class FloorPredicate(Predicate):
    """Greater than or equal.

    A missing or empty staged value (falsy, but not zero) never reaches a
    floor.
    """

    name = "floor"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        if contains_null([value, staged]):
            return False
        value = normalize_date(value)
        if is_falsy_nonzero(staged):
            return False
        return self.kernel.ge(staged, value)


@register_predicate("range")
class RangePredicate(Predicate):
    """Inclusive range membership with bounds in either order."""

    name = "range"

    def evaluate(
        self, staged: Any, value1: Any = UNDEFINED, value2: Any = UNDEFINED
    ) -> bool:
        if contains_null([value1, value2, staged]):
            return False
        low = normalize_date(value1)
        high = normalize_date(value2)
        if is_falsy_nonzero(staged):
            return False
        if self.kernel.gt(low, high):
            low, high = high, low
        return self.kernel.ge(staged, low) and self.kernel.le(staged, high)
