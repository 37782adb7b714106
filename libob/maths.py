"""Price rounding and conversion helpers, plus floating-point constants."""

from __future__ import annotations

import math

__all__ = [
    "NAN",
    "POS_INF",
    "NEG_INF",
    "round_price_to_tick",
    "double_price_to_int",
    "int_price_to_double",
    "is_nan",
]

NAN = math.nan
POS_INF = math.inf
NEG_INF = -math.inf

DEFAULT_TICK = 0.01
DEFAULT_MULTIPLIER = 10000.0


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot round non-finite value {value!r}")
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_price_to_tick(price: float, tick: float = DEFAULT_TICK) -> float:
    """Round ``price`` to the nearest multiple of ``tick``."""
    return _round_half_away(price / tick) * tick


def double_price_to_int(price: float, multiplier: float = DEFAULT_MULTIPLIER) -> int:
    """Convert a decimal price to its fixed-point integer representation."""
    return _round_half_away(price * multiplier)


def int_price_to_double(price: int, multiplier: float = DEFAULT_MULTIPLIER) -> float:
    """Convert a fixed-point integer price back to a decimal price."""
    return price / multiplier


def is_nan(x: float) -> bool:
    """Return True if ``x`` is NaN."""
    return math.isnan(x)