"""Fixed-width string encoding and string hashing helpers."""

from __future__ import annotations

__all__ = ["string_to_char_raw", "pack_string", "hash_string"]

_FNV_OFFSET_BASIS = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


def _as_bytes(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


def string_to_char_raw(text: str | bytes, size: int, padding: str = " ") -> bytes:
    """Return ``text`` as exactly ``size`` bytes, truncated or right-padded."""
    if size <= 0:
        raise ValueError("output size must be greater than zero")
    pad = _as_bytes(padding)
    if len(pad) != 1:
        raise ValueError("padding must be a single byte")
    return _as_bytes(text)[:size].ljust(size, pad)


def pack_string(text: str | bytes, size: int = 8) -> int:
    """Pack up to ``size`` leading bytes of ``text`` big-endian into an integer."""
    if size <= 0:
        raise ValueError("size must be greater than zero")
    return int.from_bytes(_as_bytes(text)[:size], "big")


def hash_string(text: str | bytes, bits: int = 64) -> int:
    """FNV-1a 64-bit hash of ``text``, truncated to the low ``bits`` bits."""
    if not 0 < bits <= 64:
        raise ValueError("bits must be between 1 and 64")
    value = _FNV_OFFSET_BASIS
    for byte in _as_bytes(text):
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value & ((1 << bits) - 1)