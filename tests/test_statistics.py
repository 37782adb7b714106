import math

import pytest

from libob.errors import LibError
from libob.statistics import (
    TimeSeriesCollector,
    VectorStats,
    draw_index_with_relative_probabilities,
    draw_random_element,
    random_int,
    random_uniform,
    random_uniform01,
    vector_stats,
)


def test_vector_stats_str_format():
    stats = VectorStats(size=2, mean=1.5, variance=0.25, stddev=0.5)
    assert str(stats) == '{"size":2,"mean":1.5,"variance":0.25,"stddev":0.5}'


def test_vector_stats_constant_values():
    stats = vector_stats([7, 7, 7])
    assert stats.size == 3
    assert stats.mean == 7.0
    assert stats.variance == 0.0
    assert stats.stddev == 0.0


def test_vector_stats_invariants():
    values = [1.0, 2.0, 4.0, 8.0, 3.5]
    stats = vector_stats(values)
    assert stats.size == len(values)
    assert min(values) <= stats.mean <= max(values)
    assert math.isclose(stats.stddev ** 2, stats.variance)


def test_vector_stats_symmetric_sample():
    stats = vector_stats([1, 3])
    assert stats.mean == 2.0
    assert stats.variance == 1.0


def test_vector_stats_empty_raises():
    with pytest.raises(LibError):
        vector_stats([])


def test_collector_keeps_order_unbounded():
    collector = TimeSeriesCollector()
    for value in range(5):
        collector.add_sample(value)
    assert collector.samples == (0, 1, 2, 3, 4)
    assert len(collector) == 5
    assert collector.last_sample() == 4


def test_collector_drops_oldest_beyond_limit():
    collector = TimeSeriesCollector(max_history=3)
    for value in range(5):
        collector.add_sample(value)
    assert collector.samples == (2, 3, 4)
    assert list(collector) == [2, 3, 4]


def test_collector_clear_and_empty_last_sample():
    collector = TimeSeriesCollector()
    collector.add_sample("a")
    collector.clear()
    assert len(collector) == 0
    assert collector.last_sample() is None


def test_collector_negative_history_rejected():
    with pytest.raises(ValueError):
        TimeSeriesCollector(max_history=-1)


@pytest.mark.parametrize("deterministic", [True, False])
def test_random_uniform01_range(deterministic):
    draws = [random_uniform01(deterministic) for _ in range(200)]
    assert all(0.0 <= d < 1.0 for d in draws)


def test_random_uniform_range():
    draws = [random_uniform(-2.0, 3.0, True) for _ in range(200)]
    assert all(-2.0 <= d < 3.0 for d in draws)


def test_random_int_range_covers_bounds():
    draws = {random_int(1, 3, True) for _ in range(500)}
    assert draws == {1, 2, 3}


def test_random_int_single_value():
    assert random_int(5, 5) == 5


def test_draw_random_element_membership():
    items = ["x", "y", "z"]
    assert all(draw_random_element(items, True) in items for _ in range(50))


def test_draw_random_element_from_set():
    items = {10, 20}
    assert draw_random_element(items) in items


def test_draw_random_element_empty_raises():
    with pytest.raises(LibError):
        draw_random_element([])


def test_draw_index_only_positive_weight():
    assert all(draw_index_with_relative_probabilities([0, 1, 0], True) == 1 for _ in range(50))


def test_draw_index_within_bounds():
    weights = [0.2, 0.5, 0.3]
    draws = {draw_index_with_relative_probabilities(weights) for _ in range(300)}
    assert draws <= {0, 1, 2}


@pytest.mark.parametrize("weights", [[], [1.0, -0.5], [0.0, 0.0]])
def test_draw_index_invalid_weights(weights):
    with pytest.raises(LibError):
        draw_index_with_relative_probabilities(weights)