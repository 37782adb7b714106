"""Descriptive information attached to trades and orders."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from libob.strings import hash_string, string_to_char_raw

__all__ = ["TradeMetaInfo", "OrderMetaInfo"]

_SYMBOL_WIDTH = 8
_EXCHANGE_ID_WIDTH = 8
_PARTICIPANT_WIDTH = 4
_RAW_PADDING = "0"


@dataclass
class TradeMetaInfo:
    """Symbol and exchange a trade belongs to."""

    symbol: str = ""
    exchange_id: str = ""

    @property
    def symbol_char_raw(self) -> bytes:
        """The symbol as 8 fixed-width bytes, padded with '0'."""
        return string_to_char_raw(self.symbol, _SYMBOL_WIDTH, _RAW_PADDING)

    @property
    def exchange_id_char_raw(self) -> bytes:
        """The exchange id as 8 fixed-width bytes, padded with '0'."""
        return string_to_char_raw(self.exchange_id, _EXCHANGE_ID_WIDTH, _RAW_PADDING)

    def clone(self) -> TradeMetaInfo:
        """Return an independent copy."""
        return dataclasses.replace(self)

    def to_json(self) -> str:
        """JSON text with the symbol and exchange id."""
        return f'{{"Symbol":"{self.symbol}","ExchangeId":"{self.exchange_id}"}}'

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class OrderMetaInfo(TradeMetaInfo):
    """Trade information plus the agent and market participant behind an order."""

    agent_id: str = ""
    market_participant_id: str = ""

    @property
    def agent_id_hash(self) -> int:
        """64-bit FNV-1a hash of the agent id."""
        return hash_string(self.agent_id)

    @property
    def market_participant_char_raw(self) -> bytes:
        """The market participant id as 4 fixed-width bytes, padded with '0'."""
        return string_to_char_raw(self.market_participant_id, _PARTICIPANT_WIDTH, _RAW_PADDING)

    def clone(self) -> OrderMetaInfo:
        """Return an independent copy."""
        return dataclasses.replace(self)

    def to_json(self) -> str:
        """JSON text with the symbol, exchange id and agent id."""
        return (
            f'{{"Symbol":"{self.symbol}","ExchangeId":"{self.exchange_id}",'
            f'"getAgentId":"{self.agent_id}"}}'
        )