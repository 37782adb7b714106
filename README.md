# libob

Building blocks for simulating a limit order book market in pure Python.
Python 3.10 or later is needed. The package has no third-party dependencies.

## What is in it

**Market objects**

- `libob.order_utils`: the enums `Side`, `OrderType`, `OrderState` and
  `OrderEventType`. `str()` gives their display names (`"Buy"`, `"Limit"`,
  `"PartialFilled"`, `"CancelReplace"`, ...; `"Null"` for the null members and for
  `OrderEventType.BROKEN_TRADE`).
- `libob.order`: `OrderBase`, `LimitOrder` and `MarketOrder`. A limit order keeps a
  decimal `price` and a fixed-point `int_price` in ten-thousandths. Orders have
  `is_buy()`, `is_limit_order()`, `is_alive()`, `reduce_quantity_by()`,
  `check_state()`, `cancel()`, `clone()`, `execute_order_event()` and `to_json()`.
  A limit or market order with `Side.NULL_SIDE`, or a limit order with a negative
  price, raises `LibError`.
- `libob.order_event`: `OrderSubmitEvent`, `OrderFillEvent`, `OrderModifyPriceEvent`,
  `OrderModifyQuantityEvent`, `OrderCancelEvent`, `OrderPartialCancelEvent`,
  `OrderCancelAndReplaceEvent` and `BrokenTradeEvent`, all built on `OrderEventBase`.
  `apply_to(order)` changes a `LimitOrder` or `MarketOrder`. An event that has no
  effect on that kind of order raises `LibError`. Examples are a price or quantity
  change applied to a market order, a submit event, or a broken-trade event.
  `is_submit()`, `is_order_operation()`, `clone()` and `to_json()` are available on
  every event.
- `libob.trade`: `Trade`, a dataclass recording a match between a buy and a sell
  order. `Trade.from_orders(...)` builds one from the two orders and takes the meta
  information from the order that initiated it. A negative price raises `LibError`.
- `libob.meta_info`: `TradeMetaInfo` (symbol, exchange id) and `OrderMetaInfo`
  (adds agent id and market participant id). They also give fixed-width byte forms
  padded with `'0'`: 8 bytes for symbol and exchange id, 4 for the participant. The
  agent id is also available as a 64-bit FNV-1a hash.

**Utilities**

- `libob.errors`: `LibError` and `lib_assert(condition, message)`.
- `libob.maths`: `round_price_to_tick`, `double_price_to_int`, `int_price_to_double`
  (default multiplier 10000), `is_nan`, and the constants `NAN`, `POS_INF`, `NEG_INF`.
- `libob.strings`: `string_to_char_raw`, `pack_string` (big-endian) and
  `hash_string` (FNV-1a, 64-bit, optionally truncated).
- `libob.counter`: `IdHandler` (consecutive ids from 0, with an optional log),
  `TimestampHandler` (a logical clock driven by `tick()`), and `time_operation(func)`,
  which returns the elapsed microseconds.
- `libob.vectors`: `range_by_step(a, b, step)` and `range_by_count(a, b, n)`.
- `libob.statistics`: uniform random draws (`random_uniform01`, `random_uniform`,
  `random_int`, `draw_random_element`, `draw_index_with_relative_probabilities`),
  `vector_stats` (size, mean, population variance, standard deviation as a
  `VectorStats`), and `TimeSeriesCollector`, a sample store that can be bounded with
  `max_history`. With `deterministic=True`, draws come from a per-thread generator
  seeded with 42.
- `libob.logger`: `Logger` writes lines of the form `[timestamp] LEVEL message` to the
  console, to a file, or to both. Levels come from `LogLevel`. `Logger` supports
  `set_silent`, `set_log_file` and `close`, and it can be used as a context manager.
- `libob.banner`: `print_lib_ob_banner`, `print_debug_banner` and
  `print_line_separator`.

## Example

```python
from libob.counter import IdHandler, TimestampHandler
from libob.maths import round_price_to_tick
from libob.order import LimitOrder
from libob.order_event import OrderCancelEvent, OrderFillEvent
from libob.order_utils import OrderState, Side

order_ids = IdHandler()
event_ids = IdHandler()
clock = TimestampHandler()

order = LimitOrder(order_ids.generate_id(), clock.tick(), Side.BUY, 100,
                   round_price_to_tick(99.987, 0.01))

order.execute_order_event(OrderFillEvent(event_ids.generate_id(), order.id, clock.tick(), 40, 99.99))
assert order.quantity == 60
assert order.order_state is OrderState.PARTIAL_FILLED

order.execute_order_event(OrderCancelEvent(event_ids.generate_id(), order.id, clock.tick()))
assert order.order_state is OrderState.CANCELLED

print(order.to_json())
```

## What it does not do

The package is a set of data types and helpers only. It does not include:

- a matching engine or an order book that holds resting orders;
- a component that tracks active orders and submits events on a client's behalf;
- parsers or writers for market data files;
- a command-line program.

Orders and events change only when you apply events to them yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```