"""A small koan framework.

A koan is a method marked with @koan inside a class registered with
@suite. The learner replaces each ``__`` with the right answer until
the assertions hold.

Examples:
    >>> from datekoans.koan import __, assert_equals, koan, suite

    >>> @suite
    ... class AboutAddition:
    ...     @koan
    ...     def one_plus_one(self):
    ...         assert_equals(1 + 1, __)
"""

from __future__ import annotations

from datekoans.koan.assertions import (
    assert_equals,
    assert_false,
    assert_not_same,
    assert_same,
    assert_true,
)
from datekoans.koan.decorators import is_koan, koan, suite
from datekoans.koan.placeholder import Placeholder, __, is_placeholder
from datekoans.koan.registry import SuiteRegistry, default_registry
from datekoans.koan.runner import (
    KoanCase,
    KoanResult,
    KoanRunner,
    KoanStatus,
    RunReport,
    collect_koans,
)

__all__: list[str] = [
    # Placeholder
    "__",
    "Placeholder",
    "is_placeholder",
    # Decorators and registry
    "koan",
    "suite",
    "is_koan",
    "SuiteRegistry",
    "default_registry",
    # Assertions
    "assert_equals",
    "assert_false",
    "assert_not_same",
    "assert_same",
    "assert_true",
    # Running
    "KoanCase",
    "KoanResult",
    "KoanRunner",
    "KoanStatus",
    "RunReport",
    "collect_koans",
]
