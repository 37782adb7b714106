"""Library error type and assertion helper."""

from __future__ import annotations

__all__ = ["LibError", "lib_assert"]


class LibError(Exception):
    """Raised when the library detects an invalid state or argument."""


def lib_assert(condition: object, message: str) -> None:
    """Raise :class:`LibError` with ``message`` unless ``condition`` is truthy."""
    if not condition:
        raise LibError(message)