"""Property-based tests for predicates using Hypothesis.

These tests verify that predicates behave correctly across a wide range
of inputs, focusing on:
1. Safety (every predicate answers a bool, never raises)
2. Correctness (negation, symmetry and determinism hold)
3. Date handling (ISO strings and native datetimes agree)
"""

from __future__ import annotations

from datetime import timedelta, timezone
from decimal import Decimal

import pytest
from hypothesis import assume, given, settings, strategies as st

from conditional import UNDEFINED, Comparator

NATIVE = Comparator().compare
PRECISE = Comparator(precision=True).compare

# Number of arguments each predicate takes
PREDICATE_ARITY = {
    "gt": 1,
    "lt": 1,
    "cap": 1,
    "floor": 1,
    "range": 2,
    "equal": 1,
    "notequal": 1,
    "deepequal": 1,
    "in": 1,
    "notin": 1,
    "exists": 0,
    "isnull": 0,
    "isnotnull": 0,
}
PREDICATE_NAMES = sorted(PREDICATE_ARITY)

# -----------------------------------------------------------------------------
# Strategies for generating test data
# -----------------------------------------------------------------------------

safe_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=30)

numbers = st.one_of(
    st.integers(),
    st.floats(),
    st.decimals(allow_nan=False, places=6),
    st.just(Decimal("NaN")),
)

offsets = st.sampled_from(
    [
        timezone.utc,
        timezone(timedelta(hours=5, minutes=30)),
        timezone(-timedelta(hours=8)),
    ]
)
datetimes = st.datetimes(timezones=st.none() | offsets)

scalars = st.one_of(
    st.none(),
    st.just(UNDEFINED),
    st.booleans(),
    numbers,
    safe_text,
    datetimes,
)

values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(safe_text, children, max_size=4),
    ),
    max_leaves=8,
)


# -----------------------------------------------------------------------------
# Safety Properties: predicates should never raise
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("compare", [NATIVE, PRECISE], ids=["native", "precision"])
@given(
    staged=values,
    name=st.sampled_from(PREDICATE_NAMES),
    args=st.lists(values, min_size=2, max_size=2),
)
def test_predicates_are_total(compare, staged, name, args):
    """Any value, any predicate, any arguments: always a bool."""
    result = compare(staged).check(name, *args[: PREDICATE_ARITY[name]])
    assert isinstance(result, bool)


# -----------------------------------------------------------------------------
# Correctness Properties
# -----------------------------------------------------------------------------


@given(
    staged=values,
    name=st.sampled_from(PREDICATE_NAMES),
    args=st.lists(scalars, min_size=2, max_size=2),
)
def test_negation_is_complement(staged, name, args):
    comparison = NATIVE(staged)
    args = args[: PREDICATE_ARITY[name]]
    assert comparison.not_.check(name, *args) is (not comparison.check(name, *args))


@pytest.mark.parametrize("compare", [NATIVE, PRECISE], ids=["native", "precision"])
@given(staged=numbers, low=numbers, high=numbers)
def test_range_ignores_bound_order(compare, staged, low, high):
    comparison = compare(staged)
    assert comparison.range(low, high) is comparison.range(high, low)


@given(
    staged=values,
    name=st.sampled_from(PREDICATE_NAMES),
    args=st.lists(scalars, min_size=2, max_size=2),
)
def test_predicates_are_deterministic(staged, name, args):
    comparison = NATIVE(staged)
    args = args[: PREDICATE_ARITY[name]]
    assert comparison.check(name, *args) is comparison.check(name, *args)


@given(staged=st.integers(), low=st.integers(), high=st.integers())
def test_range_matches_cap_and_floor(staged, low, high):
    comparison = NATIVE(staged)
    low, high = min(low, high), max(low, high)
    expected = comparison.floor(low) and comparison.cap(high)
    assert comparison.range(low, high) is expected


@given(staged=st.floats(allow_nan=False), other=st.floats(allow_nan=False))
def test_gt_and_lt_are_exclusive(staged, other):
    comparison = NATIVE(staged)
    assert not (comparison.gt(other) and comparison.lt(other))


@given(value=st.integers(min_value=-(2**200), max_value=2**200))
@settings(max_examples=200)
def test_precision_kernel_orders_integers_exactly(value):
    comparison = PRECISE(value)
    assert comparison.gt(value - 1)
    assert comparison.lt(value + 1)
    assert comparison.equal(value)


# -----------------------------------------------------------------------------
# Date Properties
# -----------------------------------------------------------------------------


@given(dt=datetimes)
def test_iso_string_equals_itself(dt):
    text = dt.isoformat()
    assert NATIVE(text).equal(text)
    assert NATIVE(text).range(text, text)


@given(dt=datetimes)
def test_native_datetime_reaches_its_iso_floor_and_cap(dt):
    comparison = NATIVE(dt)
    assert comparison.floor(dt.isoformat())
    assert comparison.cap(dt.isoformat())


later_by = st.timedeltas(
    min_value=timedelta(milliseconds=1), max_value=timedelta(days=3650)
)


@given(dt=datetimes, delta=later_by)
def test_later_iso_date_is_greater(dt, delta):
    assume(dt.year < 9990)
    later = dt + delta
    assert NATIVE(later.isoformat()).gt(dt.isoformat())
    assert NATIVE(dt.isoformat()).lt(later.isoformat())
