"""Predicates package.

Predicates are organized by category:
- ordering: gt, lt, cap (ceil), floor, range
- equality: equal, notequal, deepequal
- membership: in (isin, in_), notin
- presence: exists, isnull, isnotnull

All predicates are registered automatically on import and accessible via
get_predicate().
"""

from __future__ import annotations

from ._base import (
    COMPARISON_ERRORS,
    PREDICATES,
    Predicate,
    get_predicate,
    instantiate_predicates,
    register_predicate,
)

# Import predicate implementations (registration happens on import)
from .equality import DeepEqualPredicate, EqualPredicate, NotEqualPredicate
from .membership import InPredicate, NotInPredicate
from .ordering import (
    CapPredicate,
    FloorPredicate,
    GtPredicate,
    LtPredicate,
    RangePredicate,
)
from .presence import ExistsPredicate, IsNotNullPredicate, IsNullPredicate

__all__ = [
    # Base classes and utilities
    "COMPARISON_ERRORS",
    "PREDICATES",
    "Predicate",
    "get_predicate",
    "instantiate_predicates",
    "register_predicate",
    # Ordering predicates
    "CapPredicate",
    "FloorPredicate",
    "GtPredicate",
    "LtPredicate",
    "RangePredicate",
    # Equality predicates
    "DeepEqualPredicate",
    "EqualPredicate",
    "NotEqualPredicate",
    # Membership predicates
    "InPredicate",
    "NotInPredicate",
    # Presence predicates
    "ExistsPredicate",
    "IsNotNullPredicate",
    "IsNullPredicate",
]
