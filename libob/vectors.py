"""Helpers building evenly spaced ranges of floats."""

from __future__ import annotations

from libob.errors import lib_assert

__all__ = ["range_by_step", "range_by_count"]


def range_by_step(a: float, b: float, step: float) -> list[float]:
    """Values ``a, a+step, ...`` while not exceeding ``b``.

    The step must point from ``a`` towards ``b``. Values are accumulated by
    repeated addition, and only an ascending range produces values.
    """
    lib_assert((a <= b and step > 0) or (a >= b and step < 0), "[getVectorRange] Invalid range.")
    values: list[float] = []
    current = a
    while current <= b:
        values.append(current)
        current += step
    return values


def range_by_count(a: float, b: float, n: int) -> list[float]:
    """``n + 1`` evenly spaced values from ``a`` to ``b`` inclusive."""
    lib_assert(n > 0, "[getVectorRange] n must be positive.")
    step = (b - a) / n
    return [a + i * step for i in range(n + 1)]