"""The ``__`` fill-in placeholder used in unsolved koans."""

from __future__ import annotations

from datekoans.errors import KoanIncomplete


class Placeholder:
    """Marks the blank a learner replaces with the right answer.

    There is a single instance, exported as ``__``. Assertions that see
    it report the koan as incomplete instead of failed. Comparing it with
    ``==`` or ``!=`` raises KoanIncomplete, so a blank inside an
    expression such as ``assert_true(days != __)`` is reported the same
    way.

    Examples:
        >>> __
        __
        >>> __ == 33
        Traceback (most recent call last):
        ...
        KoanIncomplete: replace __ with the right value
    """

    __slots__ = ()

    _instance: Placeholder | None = None

    def __new__(cls) -> Placeholder:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        raise KoanIncomplete("replace __ with the right value")

    def __ne__(self, other: object) -> bool:
        raise KoanIncomplete("replace __ with the right value")

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "__"


__ = Placeholder()


def is_placeholder(value: object) -> bool:
    """Return True if value is the ``__`` placeholder."""
    return value is __


__all__ = ["Placeholder", "__", "is_placeholder"]
