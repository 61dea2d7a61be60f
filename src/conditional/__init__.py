"""conditional - predicates against a staged comparison value.

    from conditional import compare

    compare(10).gt(5)                          # True
    compare("2018-06-11").equal("2018-06-11")  # True (ISO dates as epoch ms)
    compare(None).not_.isnull()                # False
"""

from __future__ import annotations

from conditional.comparator import (
    Comparator,
    Comparison,
    NegatedComparison,
    make_compare,
)
from conditional.config import ComparatorConfig, load_config
from conditional.primitives.values import UNDEFINED

__all__ = [
    "UNDEFINED",
    "Comparator",
    "ComparatorConfig",
    "Comparison",
    "NegatedComparison",
    "compare",
    "load_config",
    "make_compare",
]

__version__ = "0.1.0"

compare = make_compare()
