"""Building blocks for comparisons: value semantics, dates and predicates.

Predicates live in :mod:`conditional.primitives.predicates` and are not
imported here, so kernels can depend on the value helpers without pulling
in the predicate registry.
"""

from __future__ import annotations
