"""
Assertion conditions.

Small predicates for comparisons plain equality gets wrong (floats,
decimals of different scale) and a described Condition wrapper that reads
well in assertion failures:

    starts_once = condition(str.startswith, "starting with", "Once")
    assert_that("Once upon a time", starts_once)
"""

from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

BiPredicate = Callable[[Any, Any], bool]


def is_close_to(threshold: float) -> Callable[[Real, Real], bool]:
    """
    Numbers equal within a margin.

    Args:
        threshold: Exclusive bound on the absolute difference

    Returns:
        Predicate (actual, expected) -> bool
    """

    def test(actual: Real, expected: Real) -> bool:
        return abs(float(actual) - float(expected)) < threshold

    return test


def is_decimal_equal() -> Callable[[Decimal, Decimal], bool]:
    """Decimals equal by value, ignoring scale: Decimal("1E+2") matches Decimal("100")."""

    def test(actual: Decimal, expected: Decimal) -> bool:
        return actual.compare(expected) == 0

    return test


@dataclass(frozen=True)
class Condition(Generic[T]):
    """
    A predicate with a human-readable description.

    Calling the condition tests a value.
    """

    predicate: Callable[[T], bool]
    description: str

    def __call__(self, actual: T) -> bool:
        return bool(self.predicate(actual))

    def matches(self, actual: T) -> bool:
        return self(actual)

    def __str__(self) -> str:
        return self.description


def condition(predicate: BiPredicate, description: str, expected: T) -> Condition[T]:
    """
    Condition comparing the actual value against an expected one.

    Args:
        predicate: Called as predicate(actual, expected)
        description: Short description of the test, e.g. "starting with"
        expected: Value to test against

    Returns:
        Condition described as: starting with "Once"
    """
    return Condition(
        predicate=lambda actual: predicate(actual, expected),
        description=f'{description} "{expected}"',
    )


def extracted(
    function: Callable[[T], U],
    predicate: BiPredicate,
    description: str,
    expected: U,
    extract: Optional[str] = None,
) -> Condition[T]:
    """
    Condition comparing a value extracted from the actual one.

    Args:
        function: Extracts the value to test
        predicate: Called as predicate(extracted, expected)
        description: Short description of the test
        expected: Value to test against
        extract: Short description of the extracted value, prefixed to
            the description when given

    Returns:
        Condition described as: having month equal to "1"
    """
    label = f"{extract} {description}" if extract else description
    return Condition(
        predicate=lambda actual: predicate(function(actual), expected),
        description=f'{label} "{expected}"',
    )


def matching(
    function: Callable[[T], U], predicate: Callable[[U], bool], description: str
) -> Condition[T]:
    """Condition testing a single-argument predicate against an extracted value."""
    return Condition(
        predicate=lambda actual: predicate(function(actual)),
        description=description,
    )


def assert_that(
    actual: T,
    cond: Condition[T],
    description: Optional[str] = None,
    negate: bool = False,
) -> None:
    """
    Assert that a value meets (or, with negate, does not meet) a condition.

    Raises:
        AssertionError: With a message naming the value and the condition
    """
    if cond(actual) != negate:
        return

    prefix = f"[{description}] " if description else ""
    expectation = "not to be" if negate else "to be"
    raise AssertionError(
        f"{prefix}\nExpecting actual:\n  {actual!r}\n{expectation} {cond}"
    )
