"""Decorators that mark koans and koan suites.

This module provides:
    - @koan / @koan(name=...): Mark a suite method as a koan
    - @suite / @suite(name=...): Register a class of koans
"""

from __future__ import annotations

import itertools
from typing import Callable, TypeVar, overload

from datekoans.koan.registry import SuiteRegistry, default_registry

F = TypeVar("F", bound=Callable[..., object])
C = TypeVar("C", bound=type)

# Definition order across all suites
_order = itertools.count()


@overload
def koan(func: F) -> F: ...


@overload
def koan(*, name: str | None = None) -> Callable[[F], F]: ...


def koan(func: F | None = None, *, name: str | None = None) -> F | Callable[[F], F]:
    """Mark a method as a koan.

    The method is left unwrapped; the decorator only records the koan's
    display name and its position, so koans run in the order they are
    written.

    Args:
        func: The method, when used as a bare ``@koan``.
        name: Display name; defaults to the method name.

    Examples:
        >>> class AboutNumbers:
        ...     @koan
        ...     def addition(self):
        ...         assert_equals(1 + 1, 2)
        ...
        ...     @koan(name="subtraction is not commutative")
        ...     def subtraction(self):
        ...         assert_true(2 - 1 != 1 - 2)
    """

    def decorator(f: F) -> F:
        f._koan_name = name or f.__name__  # type: ignore[attr-defined]
        f._koan_order = next(_order)  # type: ignore[attr-defined]
        return f

    if func is not None:
        return decorator(func)
    return decorator


def is_koan(obj: object) -> bool:
    """Return True if obj was marked with @koan."""
    return callable(obj) and hasattr(obj, "_koan_name")


@overload
def suite(cls: C) -> C: ...


@overload
def suite(
    *, name: str | None = None, registry: SuiteRegistry | None = None
) -> Callable[[C], C]: ...


def suite(
    cls: C | None = None,
    *,
    name: str | None = None,
    registry: SuiteRegistry | None = None,
) -> C | Callable[[C], C]:
    """Register a class of koans.

    Args:
        cls: The class, when used as a bare ``@suite``.
        name: Suite name; defaults to the class name.
        registry: Registry to add the suite to; defaults to the shared one.

    Raises:
        ValueError: If another suite already uses the name.
    """

    def decorator(c: C) -> C:
        (registry if registry is not None else default_registry).register(c, name=name)
        return c

    if cls is not None:
        return decorator(cls)
    return decorator


__all__ = ["is_koan", "koan", "suite"]
