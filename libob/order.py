"""Orders: the common base, limit orders and market orders."""

from __future__ import annotations

import copy
import math
from typing import Protocol

from libob.errors import LibError
from libob.maths import NAN, POS_INF, double_price_to_int
from libob.meta_info import OrderMetaInfo
from libob.order_utils import OrderState, OrderType, Side

__all__ = ["OrderBase", "LimitOrder", "MarketOrder"]


class _OrderEvent(Protocol):
    def apply_to(self, order: OrderBase) -> None: ...


def _format_number(value: float) -> str:
    return f"{value:g}"


class OrderBase:
    """Fields and behaviour shared by all orders."""

    def __init__(
        self,
        order_id: int = 0,
        timestamp: int = 0,
        side: Side = Side.NULL_SIDE,
        quantity: int = 0,
        meta_info: OrderMetaInfo | None = None,
    ) -> None:
        self.id = order_id
        self.timestamp = timestamp
        self.side = side
        self.quantity = quantity
        self.order_type = OrderType.NULL_ORDER_TYPE
        self.order_state = OrderState.NULL_ORDER_STATE
        self.meta_info = meta_info

    @property
    def price(self) -> float:
        """Orders without a limit have no price."""
        return NAN

    def is_buy(self) -> bool:
        return self.side is Side.BUY

    def is_limit_order(self) -> bool:
        return self.order_type is OrderType.LIMIT

    def is_alive(self) -> bool:
        """True while the order is active or partially filled with quantity left."""
        return (
            self.order_state in (OrderState.ACTIVE, OrderState.PARTIAL_FILLED)
            and self.quantity > 0
        )

    def reduce_quantity_by(self, quantity: int) -> None:
        """Reduce the quantity, never below zero."""
        self.quantity -= min(self.quantity, quantity)

    def clone(self) -> OrderBase:
        """Return a copy sharing the meta information."""
        return copy.copy(self)

    def execute_order_event(self, event: _OrderEvent) -> None:
        """Apply ``event`` to this order; a bare order ignores events."""

    def check_state(self) -> bool:
        """Whether the quantity is consistent with the order state."""
        if self.order_state in (OrderState.ACTIVE, OrderState.PARTIAL_FILLED):
            return self.quantity > 0
        if self.order_state in (OrderState.FILLED, OrderState.CANCELLED):
            return self.quantity == 0
        return False

    def _init(self) -> None:
        self.order_state = OrderState.ACTIVE

    def cancel(self) -> None:
        """Mark the order cancelled, clearing its side and quantity."""
        self.side = Side.NULL_SIDE
        self.quantity = 0
        self.order_state = OrderState.CANCELLED

    def _meta_json(self) -> str:
        return self.meta_info.to_json() if self.meta_info is not None else "{}"

    def to_json(self) -> str:
        """JSON text describing the order."""
        return (
            f'{{"Id":{self.id},"Timestamp":{self.timestamp},"Side":"{self.side}",'
            f'"Quantity":{self.quantity},"OrderType":"{self.order_type}",'
            f'"OrderState":"{self.order_state}","MetaInfo":{self._meta_json()}}}'
        )

    def __str__(self) -> str:
        return self.to_json()


class LimitOrder(OrderBase):
    """An order to trade at a given price or better."""

    def __init__(
        self,
        order_id: int,
        timestamp: int,
        side: Side,
        quantity: int,
        price: float,
        meta_info: OrderMetaInfo | None = None,
    ) -> None:
        super().__init__(order_id, timestamp, side, quantity, meta_info)
        if side is Side.NULL_SIDE:
            raise LibError("[LimitOrder::init] Side cannot be null.")
        if price < 0:
            raise LibError("[LimitOrder::init] Price cannot be negative.")
        self.price = price
        self._init()

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        self._price = value
        self._int_price = double_price_to_int(value)

    @property
    def int_price(self) -> int:
        """Fixed-point price, ten thousandths of a unit."""
        return self._int_price

    def _init(self) -> None:
        self.order_state = OrderState.ACTIVE
        self.order_type = OrderType.LIMIT

    def clone(self) -> LimitOrder:
        return copy.copy(self)

    def execute_order_event(self, event: _OrderEvent) -> None:
        event.apply_to(self)

    def check_state(self) -> bool:
        return self._price >= 0 and super().check_state()

    def cancel(self) -> None:
        """Cancel, moving the price to the unreachable end of the book."""
        super().cancel()
        # The fixed-point price is left as it was.
        self._price = 0.0 if self.is_buy() else POS_INF

    def to_json(self) -> str:
        price = self._price
        price_text = _format_number(price) if not math.isnan(price) else "nan"
        return (
            f'{{"Id":{self.id},"Timestamp":{self.timestamp},"Side":"{self.side}",'
            f'"Quantity":{self.quantity},"Price":{price_text},'
            f'"OrderType":"{self.order_type}","OrderState":"{self.order_state}",'
            f'"MetaInfo":{self._meta_json()}}}'
        )


class MarketOrder(OrderBase):
    """An order to trade immediately at the best available price."""

    def __init__(
        self,
        order_id: int,
        timestamp: int,
        side: Side,
        quantity: int,
        meta_info: OrderMetaInfo | None = None,
    ) -> None:
        super().__init__(order_id, timestamp, side, quantity, meta_info)
        self._init()

    def _init(self) -> None:
        if self.side is Side.NULL_SIDE:
            raise LibError("[MarketOrder::init] Side cannot be null.")
        self.order_state = OrderState.ACTIVE
        self.order_type = OrderType.MARKET

    def clone(self) -> MarketOrder:
        """Return a copy, reactivated as a fresh market order."""
        duplicate = copy.copy(self)
        duplicate._init()
        return duplicate

    def execute_order_event(self, event: _OrderEvent) -> None:
        event.apply_to(self)