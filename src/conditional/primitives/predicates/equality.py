"""Equality predicates.

Unlike the ordering predicates these are not null-guarded: ``None`` equals
``None``.
"""

from __future__ import annotations

from typing import Any

from deepdiff import DeepDiff

from conditional.primitives.dates import normalize_date
from conditional.primitives.values import UNDEFINED, is_number, strict_equal

from ._base import Predicate, register_predicate


@register_predicate("equal")
class EqualPredicate(Predicate):
    """Strict equality after ISO-date conversion of the argument."""

    name = "equal"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        return self.kernel.eq(staged, normalize_date(value))


@register_predicate("notequal")
class NotEqualPredicate(EqualPredicate):
    name = "notequal"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        return not super().evaluate(staged, value)


@register_predicate("deepequal")
class DeepEqualPredicate(Predicate):
    """Structural equality without type coercion.

    Leaves compare like ``equal``: ``[1, {"a": 2}]`` deep-equals
    ``[1.0, {"a": 2}]`` but not ``(1, {"a": 2})`` or ``[True, {"a": 2}]``.
    """

    name = "deepequal"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        diff = DeepDiff(staged, value)
        if set(diff) - {"type_changes"}:
            return False
        # Numbers of different types are still equal when their values are.
        return all(
            is_number(change["old_value"])
            and is_number(change["new_value"])
            and strict_equal(change["old_value"], change["new_value"])
            for change in diff.get("type_changes", {}).values()
        )
