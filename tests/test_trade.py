import json

import pytest

from libob.errors import LibError
from libob.meta_info import OrderMetaInfo, TradeMetaInfo
from libob.order import LimitOrder, MarketOrder
from libob.order_utils import Side
from libob.trade import Trade


def _orders():
    buy_meta = OrderMetaInfo("AAPL", "NASDAQ", "buyer", "BY")
    sell_meta = OrderMetaInfo("MSFT", "NYSE", "seller", "SL")
    buy = LimitOrder(7, 1, Side.BUY, 10, 100.5, buy_meta)
    sell = MarketOrder(9, 2, Side.SELL, 10, sell_meta)
    return buy, sell


def test_default_trade_fields():
    trade = Trade()
    assert trade.id == 0
    assert trade.price == 0.0
    assert trade.is_buy_limit_order is True
    assert trade.is_sell_limit_order is True
    assert trade.is_buy_initiated is True
    assert trade.symbol == ""
    assert trade.exchange_id == ""


def test_negative_price_raises():
    with pytest.raises(LibError):
        Trade(1, 2, 3, 4, 5, -1.0, True, True, True)


def test_to_json_exact_format():
    trade = Trade(1, 2, 3, 4, 5, 10.5, True, False, True, TradeMetaInfo("AAPL", "NASDAQ"))
    assert trade.to_json() == (
        '{"Id":1,"Timestamp":2,"BuyId":3,"SellId":4,"Quantity":5,"Price":10.5,'
        '"IsBuyLimitOrder":1,"IsSellLimitOrder":0,"IsBuyInitiated":1,'
        '"Symbol":"AAPL","ExchangeId":"NASDAQ"}'
    )
    assert str(trade) == trade.to_json()


def test_to_json_is_valid_json_round_trip():
    trade = Trade(11, 22, 33, 44, 55, 12.25, False, True, False)
    data = json.loads(trade.to_json())
    assert data["Id"] == 11
    assert data["BuyId"] == 33
    assert data["SellId"] == 44
    assert data["Quantity"] == 55
    assert data["Price"] == 12.25
    assert data["IsBuyLimitOrder"] == 0
    assert data["IsSellLimitOrder"] == 1
    assert data["Symbol"] == ""


def test_from_orders_buy_initiated_takes_buy_meta():
    buy, sell = _orders()
    trade = Trade.from_orders(3, 4, 10, 100.5, True, buy, sell)
    assert trade.buy_id == buy.id
    assert trade.sell_id == sell.id
    assert trade.is_buy_limit_order is True
    assert trade.is_sell_limit_order is False
    assert trade.symbol == "AAPL"
    assert trade.exchange_id == "NASDAQ"


def test_from_orders_sell_initiated_takes_sell_meta():
    buy, sell = _orders()
    trade = Trade.from_orders(3, 4, 10, 100.5, False, buy, sell)
    assert trade.is_buy_initiated is False
    assert trade.symbol == "MSFT"
    assert trade.exchange_id == "NYSE"


def test_from_orders_negative_price_raises():
    buy, sell = _orders()
    with pytest.raises(LibError):
        Trade.from_orders(3, 4, 10, -0.5, True, buy, sell)


def test_clone_is_independent_and_shares_meta():
    meta = TradeMetaInfo("AAPL", "NASDAQ")
    trade = Trade(1, 2, 3, 4, 5, 10.5, True, True, True, meta)
    copy = trade.clone()
    assert copy == trade
    assert copy is not trade
    assert copy.meta_info is meta
    copy.quantity = 99
    assert trade.quantity == 5
    assert copy.to_json() != trade.to_json()