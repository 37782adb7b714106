"""Order sides, types, states and event types with their display names."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["Side", "OrderType", "OrderState", "OrderEventType"]


class Side(Enum):
    """The side of the book an order rests on."""

    BUY = auto()
    SELL = auto()
    NULL_SIDE = auto()

    def __str__(self) -> str:
        return _SIDE_NAMES.get(self, "Null")


class OrderType(Enum):
    """The kind of an order."""

    LIMIT = auto()
    MARKET = auto()
    NULL_ORDER_TYPE = auto()

    def __str__(self) -> str:
        return _ORDER_TYPE_NAMES.get(self, "Null")


class OrderState(Enum):
    """Life-cycle state of an order: active, partially filled, then filled."""

    ACTIVE = auto()
    FILLED = auto()
    PARTIAL_FILLED = auto()
    CANCELLED = auto()
    INVALID = auto()
    NULL_ORDER_STATE = auto()

    def __str__(self) -> str:
        return _ORDER_STATE_NAMES.get(self, "Null")


class OrderEventType(Enum):
    """The kind of an order event."""

    SUBMIT = auto()
    FILL = auto()
    CANCEL = auto()
    PARTIAL_CANCEL = auto()
    CANCEL_REPLACE = auto()
    MODIFY_PRICE = auto()
    MODIFY_QUANTITY = auto()
    BROKEN_TRADE = auto()
    NULL_ORDER_EVENT_TYPE = auto()

    def __str__(self) -> str:
        return _ORDER_EVENT_TYPE_NAMES.get(self, "Null")


_SIDE_NAMES = {Side.BUY: "Buy", Side.SELL: "Sell"}

_ORDER_TYPE_NAMES = {OrderType.LIMIT: "Limit", OrderType.MARKET: "Market"}

_ORDER_STATE_NAMES = {
    OrderState.ACTIVE: "Active",
    OrderState.FILLED: "Filled",
    OrderState.PARTIAL_FILLED: "PartialFilled",
    OrderState.CANCELLED: "Cancelled",
    OrderState.INVALID: "Invalid",
}

_ORDER_EVENT_TYPE_NAMES = {
    OrderEventType.SUBMIT: "Submit",
    OrderEventType.FILL: "Fill",
    OrderEventType.CANCEL: "Cancel",
    OrderEventType.PARTIAL_CANCEL: "PartialCancel",
    OrderEventType.CANCEL_REPLACE: "CancelReplace",
    OrderEventType.MODIFY_PRICE: "ModifyPrice",
    OrderEventType.MODIFY_QUANTITY: "ModifyQuantity",
}