"""Orders, order events, trades and supporting utilities for limit order book simulation."""

__version__ = "0.1.0"