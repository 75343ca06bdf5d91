"""Integer helpers for datekoans.

This module is not part of the public API.
"""

from __future__ import annotations


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, unlike ``//``.

    Examples:
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


__all__ = ["trunc_div"]
