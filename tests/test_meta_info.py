import json

from libob.meta_info import OrderMetaInfo, TradeMetaInfo
from libob.strings import hash_string


def test_trade_meta_info_json():
    info = TradeMetaInfo("AAPL", "XNAS")
    assert info.to_json() == '{"Symbol":"AAPL","ExchangeId":"XNAS"}'
    assert str(info) == info.to_json()


def test_trade_meta_info_char_raw_is_padded_with_zeros():
    info = TradeMetaInfo("AAPL", "XNAS")
    assert info.symbol_char_raw == b"AAPL0000"
    assert info.exchange_id_char_raw == b"XNAS0000"


def test_char_raw_truncates_long_values():
    info = TradeMetaInfo("ABCDEFGHIJ", "EXCH")
    assert info.symbol_char_raw == b"ABCDEFGH"
    assert len(info.exchange_id_char_raw) == 8


def test_char_raw_follows_assignment():
    info = TradeMetaInfo("AAPL", "XNAS")
    info.symbol = "MSFT"
    assert info.symbol_char_raw.startswith(b"MSFT")


def test_trade_meta_info_clone_is_independent():
    info = TradeMetaInfo("AAPL", "XNAS")
    copy = info.clone()
    copy.symbol = "MSFT"
    assert info.symbol == "AAPL"
    assert copy == TradeMetaInfo("MSFT", "XNAS")


def test_order_meta_info_json_keys():
    info = OrderMetaInfo("AAPL", "XNAS", "agent-1", "MPID")
    parsed = json.loads(info.to_json())
    assert parsed == {"Symbol": "AAPL", "ExchangeId": "XNAS", "getAgentId": "agent-1"}


def test_order_meta_info_hash_and_participant():
    info = OrderMetaInfo("AAPL", "XNAS", "agent-1", "MP")
    assert info.agent_id_hash == hash_string("agent-1")
    assert info.market_participant_char_raw == b"MP00"


def test_agent_hash_tracks_agent_id():
    info = OrderMetaInfo("AAPL", "XNAS", "a", "MPID")
    before = info.agent_id_hash
    info.agent_id = "b"
    assert info.agent_id_hash == hash_string("b")
    assert info.agent_id_hash != before


def test_order_meta_info_clone_keeps_type_and_fields():
    info = OrderMetaInfo("AAPL", "XNAS", "agent-1", "MPID")
    copy = info.clone()
    assert isinstance(copy, OrderMetaInfo)
    assert copy == info
    copy.agent_id = "other"
    assert info.agent_id == "agent-1"