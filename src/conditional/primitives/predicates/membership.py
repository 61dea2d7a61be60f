"""Membership predicates: in and notin."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from conditional.primitives.values import (
    UNDEFINED,
    is_array,
    is_object,
    strict_index,
)

from ._base import Predicate, register_predicate


@register_predicate("in")
@register_predicate("in_")
@register_predicate("isin")
class InPredicate(Predicate):
    """
    Membership of the staged value in the argument.

    The argument's shape picks the test, first match wins:

    1. a list, tuple or mapping, staged value not a list: the staged value
       is an element (or a key of the mapping);
    2. a string, staged value a list: the string is one of its elements;
    3. a string, staged value not a list: the staged value is one of the
       comma-separated items;
    4. anything else: False.
    """

    name = "in"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        if is_object(value) and not is_array(staged):
            if isinstance(value, Mapping):
                return strict_index(value.keys(), staged) != -1
            return strict_index(value, staged) != -1
        if is_array(staged) and isinstance(value, str):
            return strict_index(staged, value) != -1
        if not is_array(staged) and isinstance(value, str):
            return strict_index(value.split(","), staged) != -1
        return False


@register_predicate("notin")
class NotInPredicate(InPredicate):
    name = "notin"

    def evaluate(self, staged: Any, value: Any = UNDEFINED) -> bool:
        return not super().evaluate(staged, value)
