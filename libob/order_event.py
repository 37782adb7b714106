"""Events that act on orders: submission, fills, modifications and cancels."""

from __future__ import annotations

import copy

from libob.errors import LibError
from libob.order import LimitOrder, MarketOrder, OrderBase
from libob.order_utils import OrderEventType, OrderState

__all__ = [
    "OrderEventBase",
    "OrderSubmitEvent",
    "OrderFillEvent",
    "OrderModifyPriceEvent",
    "OrderModifyQuantityEvent",
    "OrderCancelEvent",
    "OrderPartialCancelEvent",
    "OrderCancelAndReplaceEvent",
    "BrokenTradeEvent",
]

_ORDER_OPERATIONS = frozenset(
    {
        OrderEventType.SUBMIT,
        OrderEventType.CANCEL,
        OrderEventType.PARTIAL_CANCEL,
        OrderEventType.CANCEL_REPLACE,
        OrderEventType.MODIFY_PRICE,
        OrderEventType.MODIFY_QUANTITY,
    }
)


def _format_number(value: float) -> str:
    return f"{value:g}"


class OrderEventBase:
    """Fields shared by every order event."""

    event_type_default = OrderEventType.NULL_ORDER_EVENT_TYPE

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        order: OrderBase | None = None,
    ) -> None:
        self.event_id = event_id
        self.order_id = order_id
        self.timestamp = timestamp
        self.order = order
        self.event_type = self.event_type_default

    def is_submit(self) -> bool:
        return self.event_type is OrderEventType.SUBMIT

    def is_order_operation(self) -> bool:
        """True for events that a client issues against an order."""
        return self.event_type in _ORDER_OPERATIONS

    def clone(self) -> OrderEventBase:
        """Return a copy sharing the attached order."""
        return copy.copy(self)

    def apply_to(self, order: OrderBase) -> None:
        """Apply the event's effect to ``order``."""
        if isinstance(order, LimitOrder):
            self._apply_to_limit(order)
        elif isinstance(order, MarketOrder):
            self._apply_to_market(order)
        else:
            raise TypeError(f"cannot apply an order event to {type(order).__name__}")

    def _apply_to_market(self, order: MarketOrder) -> None:
        raise LibError(
            f"No implementation for {type(self).__name__}.apply_to(MarketOrder)."
        )

    def _apply_to_limit(self, order: LimitOrder) -> None:
        raise LibError(
            f"No implementation for {type(self).__name__}.apply_to(LimitOrder)."
        )

    def _json_head(self) -> str:
        return (
            f'"EventId":{self.event_id},"OrderId":{self.order_id},'
            f'"Timestamp":{self.timestamp},"EventType":"{self.event_type}"'
        )

    def _json_extra(self) -> str:
        return ""

    def to_json(self) -> str:
        """JSON text describing the event."""
        extra = self._json_extra()
        return "{" + self._json_head() + ("," + extra if extra else "") + "}"

    def __str__(self) -> str:
        return self.to_json()


class OrderSubmitEvent(OrderEventBase):
    """Submission of a new order."""

    event_type_default = OrderEventType.SUBMIT

    def __init__(
        self, event_id: int, order_id: int, timestamp: int, order: OrderBase | None
    ) -> None:
        if order is None:
            raise LibError("[OrderSubmitEvent::init] Order is null.")
        super().__init__(event_id, order_id, timestamp, order)

    def _json_extra(self) -> str:
        return f'"Order":{self.order.to_json()}'


class OrderFillEvent(OrderEventBase):
    """A (partial) fill of an order, as derived by a matching engine."""

    event_type_default = OrderEventType.FILL

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        fill_quantity: int = 0,
        fill_price: float = 0.0,
    ) -> None:
        if fill_price < 0:
            raise LibError("[OrderFillEvent::init] Price cannot be negative.")
        super().__init__(event_id, order_id, timestamp)
        self.fill_quantity = fill_quantity
        self.fill_price = fill_price

    def _fill(self, order: OrderBase) -> None:
        if self.fill_quantity < order.quantity:
            order.reduce_quantity_by(self.fill_quantity)
            order.order_state = OrderState.PARTIAL_FILLED
        else:
            order.quantity = 0
            order.order_state = OrderState.FILLED

    def _apply_to_market(self, order: MarketOrder) -> None:
        self._fill(order)

    def _apply_to_limit(self, order: LimitOrder) -> None:
        self._fill(order)

    def _json_extra(self) -> str:
        return (
            f'"FillQuantity":{self.fill_quantity},'
            f'"FillPrice":{_format_number(self.fill_price)}'
        )


class OrderModifyPriceEvent(OrderEventBase):
    """A change of a limit order's price."""

    event_type_default = OrderEventType.MODIFY_PRICE

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        modified_price: float = 0.0,
    ) -> None:
        if modified_price < 0:
            raise LibError("[OrderModifyPriceEvent::init] Price cannot be negative.")
        super().__init__(event_id, order_id, timestamp)
        self.modified_price = modified_price

    def _apply_to_limit(self, order: LimitOrder) -> None:
        order.price = self.modified_price

    def _json_extra(self) -> str:
        return f'"ModifiedPrice":{_format_number(self.modified_price)}'


class OrderModifyQuantityEvent(OrderEventBase):
    """A change of a limit order's quantity."""

    event_type_default = OrderEventType.MODIFY_QUANTITY

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        modified_quantity: float = 0,
    ) -> None:
        super().__init__(event_id, order_id, timestamp)
        self.modified_quantity = int(modified_quantity)

    def _apply_to_limit(self, order: LimitOrder) -> None:
        order.quantity = self.modified_quantity

    def _json_extra(self) -> str:
        return f'"ModifiedQuantity":{self.modified_quantity}'


class OrderCancelEvent(OrderEventBase):
    """Full cancellation of an order."""

    event_type_default = OrderEventType.CANCEL

    def _cancel(self, order: OrderBase) -> None:
        order.quantity = 0
        order.order_state = OrderState.CANCELLED

    def _apply_to_market(self, order: MarketOrder) -> None:
        self._cancel(order)

    def _apply_to_limit(self, order: LimitOrder) -> None:
        self._cancel(order)


class OrderPartialCancelEvent(OrderEventBase):
    """Cancellation of part of an order's quantity."""

    event_type_default = OrderEventType.PARTIAL_CANCEL

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        cancel_quantity: int = 0,
    ) -> None:
        super().__init__(event_id, order_id, timestamp)
        self.cancel_quantity = cancel_quantity

    def _partial_cancel(self, order: OrderBase) -> None:
        if self.cancel_quantity < order.quantity:
            order.reduce_quantity_by(self.cancel_quantity)
        else:
            order.quantity = 0
            order.order_state = OrderState.CANCELLED

    def _apply_to_market(self, order: MarketOrder) -> None:
        self._partial_cancel(order)

    def _apply_to_limit(self, order: LimitOrder) -> None:
        self._partial_cancel(order)

    def _json_extra(self) -> str:
        return f'"CancelQuantity":{self.cancel_quantity}'


class OrderCancelAndReplaceEvent(OrderEventBase):
    """Cancel an order and replace it under a new id with new terms."""

    event_type_default = OrderEventType.CANCEL_REPLACE

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        new_order_id: int = 0,
        modified_quantity: int | None = None,
        modified_price: float | None = None,
    ) -> None:
        if modified_price is not None and modified_price < 0:
            raise LibError(
                "[OrderCancelAndReplaceEvent::init] Modified price cannot be negative."
            )
        super().__init__(event_id, order_id, timestamp)
        self.new_order_id = new_order_id
        self.modified_quantity = modified_quantity
        self.modified_price = modified_price

    @staticmethod
    def _cancel(order: OrderBase) -> None:
        order.quantity = 0
        order.order_state = OrderState.CANCELLED

    def _replace(self, order: OrderBase) -> None:
        order.id = self.new_order_id
        order.order_state = OrderState.ACTIVE

    def _apply_to_market(self, order: MarketOrder) -> None:
        has_quantity = self.modified_quantity is not None
        if has_quantity:
            order.quantity = self.modified_quantity
        if has_quantity and order.is_alive():
            self._replace(order)
        else:
            self._cancel(order)

    def _apply_to_limit(self, order: LimitOrder) -> None:
        has_quantity = self.modified_quantity is not None
        has_price = self.modified_price is not None
        if has_quantity:
            order.quantity = self.modified_quantity
        if has_price:
            order.price = self.modified_price
        if (has_quantity or has_price) and order.is_alive():
            self._replace(order)
        else:
            self._cancel(order)

    def _json_extra(self) -> str:
        quantity = "null" if self.modified_quantity is None else str(self.modified_quantity)
        price = "null" if self.modified_price is None else f"{self.modified_price:f}"
        return f'"ModifiedQuantity":{quantity},"ModifiedPrice":{price}'


class BrokenTradeEvent(OrderEventBase):
    """Reverses a previous trade; it acts on trades, never on orders."""

    event_type_default = OrderEventType.BROKEN_TRADE

    def __init__(
        self,
        event_id: int = 0,
        order_id: int = 0,
        timestamp: int = 0,
        trade_id: int = 0,
    ) -> None:
        super().__init__(event_id, order_id, timestamp)
        self.trade_id = trade_id

    def _json_extra(self) -> str:
        return f'"TradeId":{self.trade_id}'