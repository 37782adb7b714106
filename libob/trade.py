"""Executed trades between a buy and a sell order."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from libob.errors import LibError
from libob.meta_info import TradeMetaInfo
from libob.order import OrderBase
from libob.order_utils import OrderType

__all__ = ["Trade"]


def _flag(value: bool) -> int:
    return 1 if value else 0


@dataclass
class Trade:
    """A fill between a buy order and a sell order at a single price."""

    id: int = 0
    timestamp: int = 0
    buy_id: int = 0
    sell_id: int = 0
    quantity: int = 0
    price: float = 0.0
    is_buy_limit_order: bool = True
    is_sell_limit_order: bool = True
    is_buy_initiated: bool = True
    meta_info: TradeMetaInfo | None = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise LibError("[TradeBase::init] Price cannot be negative.")

    @classmethod
    def from_orders(
        cls,
        trade_id: int,
        timestamp: int,
        quantity: int,
        price: float,
        is_buy_initiated: bool,
        buy_order: OrderBase,
        sell_order: OrderBase,
    ) -> Trade:
        """Build a trade from the two matched orders.

        The meta information is taken from the order that initiated the trade.
        """
        initiator = buy_order if is_buy_initiated else sell_order
        return cls(
            id=trade_id,
            timestamp=timestamp,
            buy_id=buy_order.id,
            sell_id=sell_order.id,
            quantity=quantity,
            price=price,
            is_buy_limit_order=buy_order.order_type is OrderType.LIMIT,
            is_sell_limit_order=sell_order.order_type is OrderType.LIMIT,
            is_buy_initiated=is_buy_initiated,
            meta_info=initiator.meta_info,
        )

    @property
    def symbol(self) -> str:
        """The traded symbol, or an empty string without meta information."""
        return self.meta_info.symbol if self.meta_info is not None else ""

    @property
    def exchange_id(self) -> str:
        """The exchange id, or an empty string without meta information."""
        return self.meta_info.exchange_id if self.meta_info is not None else ""

    def clone(self) -> Trade:
        """Return a copy sharing the meta information."""
        return dataclasses.replace(self)

    def to_json(self) -> str:
        """JSON text describing the trade."""
        return (
            f'{{"Id":{self.id},"Timestamp":{self.timestamp},'
            f'"BuyId":{self.buy_id},"SellId":{self.sell_id},'
            f'"Quantity":{self.quantity},"Price":{self.price:g},'
            f'"IsBuyLimitOrder":{_flag(self.is_buy_limit_order)},'
            f'"IsSellLimitOrder":{_flag(self.is_sell_limit_order)},'
            f'"IsBuyInitiated":{_flag(self.is_buy_initiated)},'
            f'"Symbol":"{self.symbol}","ExchangeId":"{self.exchange_id}"}}'
        )

    def __str__(self) -> str:
        return self.to_json()