"""Sampling helpers, descriptive statistics and a bounded time-series store."""

from __future__ import annotations

import itertools
import math
import random
import threading
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from libob.errors import LibError

__all__ = [
    "VectorStats",
    "TimeSeriesCollector",
    "random_uniform01",
    "random_uniform",
    "random_int",
    "draw_random_element",
    "draw_index_with_relative_probabilities",
    "vector_stats",
]

T = TypeVar("T")

_DETERMINISTIC_SEED = 42
_rng_state = threading.local()


def _engine(deterministic: bool) -> random.Random:
    """Return this thread's random engine, seeded with 42 when deterministic."""
    name = "deterministic" if deterministic else "entropy"
    engine = getattr(_rng_state, name, None)
    if engine is None:
        engine = random.Random(_DETERMINISTIC_SEED) if deterministic else random.Random()
        setattr(_rng_state, name, engine)
    return engine


@dataclass(frozen=True)
class VectorStats:
    """Size, mean, population variance and standard deviation of a sample."""

    size: int
    mean: float
    variance: float
    stddev: float

    def __str__(self) -> str:
        return (
            f'{{"size":{self.size},"mean":{self.mean:g},'
            f'"variance":{self.variance:g},"stddev":{self.stddev:g}}}'
        )


class TimeSeriesCollector(Generic[T]):
    """Keeps samples in arrival order, dropping the oldest beyond ``max_history``.

    A ``max_history`` of zero means the history is unbounded.
    """

    def __init__(self, max_history: int = 0) -> None:
        self._samples: deque[T] = deque()
        self.max_history = max_history

    @property
    def max_history(self) -> int:
        return self._max_history

    @max_history.setter
    def max_history(self, value: int) -> None:
        if value < 0:
            raise ValueError("max_history cannot be negative")
        self._max_history = value

    @property
    def samples(self) -> tuple[T, ...]:
        """The stored samples, oldest first."""
        return tuple(self._samples)

    def add_sample(self, sample: T) -> None:
        """Append ``sample``, evicting the oldest one if over the limit."""
        self._samples.append(sample)
        if self._max_history > 0 and len(self._samples) > self._max_history:
            self._samples.popleft()

    def last_sample(self) -> T | None:
        """The most recent sample, or None if there is none."""
        return self._samples[-1] if self._samples else None

    def clear(self) -> None:
        """Drop all samples."""
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[T]:
        return iter(self._samples)


def random_uniform01(deterministic: bool = False) -> float:
    """A uniform draw from [0, 1)."""
    return _engine(deterministic).random()


def random_uniform(a: float, b: float, deterministic: bool = False) -> float:
    """A uniform draw from [a, b)."""
    return a + (b - a) * random_uniform01(deterministic)


def random_int(a: int, b: int, deterministic: bool = False) -> int:
    """A uniform integer draw from the closed range [a, b]."""
    u = random_uniform01(deterministic)
    result = int(a + math.floor(u * (b - a + 1)))
    return min(result, b)


def draw_random_element(items: Iterable[T], deterministic: bool = False) -> T:
    """Return one element of ``items`` chosen uniformly at random."""
    collection = items if isinstance(items, (Sequence, set, frozenset, dict)) else list(items)
    if not collection:
        raise LibError("[drawRandomElement] Empty vector.")
    index = random_int(0, len(collection) - 1, deterministic)
    if isinstance(collection, Sequence):
        return collection[index]
    return next(itertools.islice(iter(collection), index, None))


def draw_index_with_relative_probabilities(
    probabilities: Sequence[float], deterministic: bool = False
) -> int:
    """Draw an index with chance proportional to its non-negative weight."""
    if not probabilities:
        raise LibError("[drawIndexWithRelativeProbability] Empty probabilities vector.")
    if any(p < 0.0 for p in probabilities):
        raise LibError("[drawIndexWithRelativeProbability] Probabilities must be non-negative.")
    total = math.fsum(probabilities)
    if total == 0.0:
        raise LibError("[drawIndexWithRelativeProbability] Sum of probabilities is zero.")
    u = random_uniform01(deterministic)
    cumulative = 0.0
    last_positive = 0
    for index, p in enumerate(probabilities):
        if p > 0.0:
            last_positive = index
        cumulative += p / total
        if u <= cumulative:
            return index
    # Rounding can leave the cumulative sum just under one.
    return last_positive


def vector_stats(values: Iterable[float]) -> VectorStats:
    """Mean, population variance and standard deviation of ``values``."""
    data = [float(v) for v in values]
    if not data:
        raise LibError("[getVectorStats] Empty vector.")
    size = len(data)
    mean = sum(data) / size
    variance = sum((d - mean) * (d - mean) for d in data) / size
    return VectorStats(size=size, mean=mean, variance=variance, stddev=math.sqrt(variance))