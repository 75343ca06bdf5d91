"""Assertions used inside koans.

Each assertion raises KoanFailure when it does not hold, and
KoanIncomplete when the learner has not filled in a ``__`` yet.
"""

from __future__ import annotations

from datekoans.errors import KoanFailure, KoanIncomplete
from datekoans.koan.placeholder import is_placeholder


def _check_filled_in(*values: object) -> None:
    if any(is_placeholder(v) for v in values):
        raise KoanIncomplete("replace __ with the right value")


def assert_equals(actual: object, expected: object) -> None:
    """Check that actual == expected.

    Raises:
        KoanIncomplete: If either side is still ``__``.
        KoanFailure: If the values differ.

    Examples:
        >>> assert_equals(33, 33)
        >>> assert_equals(33, 32)
        Traceback (most recent call last):
        ...
        KoanFailure: expected 32 but was 33
    """
    _check_filled_in(actual, expected)
    if actual != expected:
        raise KoanFailure(f"expected {expected!r} but was {actual!r}")


def assert_true(condition: object) -> None:
    """Check that condition is true.

    Raises:
        KoanIncomplete: If condition is still ``__``.
        KoanFailure: If condition is false.
    """
    _check_filled_in(condition)
    if not condition:
        raise KoanFailure(f"expected a true value but was {condition!r}")


def assert_false(condition: object) -> None:
    """Check that condition is false."""
    _check_filled_in(condition)
    if condition:
        raise KoanFailure(f"expected a false value but was {condition!r}")


def assert_same(actual: object, expected: object) -> None:
    """Check that actual and expected are the same object."""
    _check_filled_in(actual, expected)
    if actual is not expected:
        raise KoanFailure(f"expected the same object as {expected!r} but was {actual!r}")


def assert_not_same(actual: object, unexpected: object) -> None:
    """Check that actual and unexpected are different objects.

    Immutable values make this worth asking: plus_days() returns a new
    object and leaves the original alone.
    """
    _check_filled_in(actual, unexpected)
    if actual is unexpected:
        raise KoanFailure(f"expected a different object than {unexpected!r}")


__all__ = [
    "assert_equals",
    "assert_false",
    "assert_not_same",
    "assert_same",
    "assert_true",
]
