"""Presence predicates: exists, isnull and isnotnull."""

from __future__ import annotations

from typing import Any

from conditional.primitives.values import is_truthy, is_zero

from ._base import Predicate, register_predicate


@register_predicate("exists")
class ExistsPredicate(Predicate):
    """True for zero and for any truthy value."""

    name = "exists"

    def evaluate(self, staged: Any) -> bool:
        return is_zero(staged) or is_truthy(staged)


@register_predicate("isnull")
class IsNullPredicate(Predicate):
    """True only for an explicit ``None``, not for ``UNDEFINED``."""

    name = "isnull"

    def evaluate(self, staged: Any) -> bool:
        return staged is None


@register_predicate("isnotnull")
class IsNotNullPredicate(Predicate):
    name = "isnotnull"

    def evaluate(self, staged: Any) -> bool:
        return staged is not None
