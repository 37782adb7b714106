"""Identifier and timestamp generators, and an operation timer."""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass, field
from typing import Callable

__all__ = ["IdHandler", "TimestampHandler", "time_operation"]


@dataclass
class IdHandler:
    """Hands out consecutive integer ids starting from zero."""

    id_log_enabled: bool = False
    current_id: int = 0
    id_log: list[int] = field(default_factory=list)

    def generate_id(self) -> int:
        """Return the next id, recording it if logging is enabled."""
        new_id = self.current_id
        if self.id_log_enabled:
            self.id_log.append(new_id)
        self.current_id += 1
        return new_id

    def reset(self) -> None:
        """Restart ids from zero and clear the log."""
        self.current_id = 0
        self.id_log.clear()

    def clone(self) -> IdHandler:
        """Return an independent copy."""
        return copy.deepcopy(self)


@dataclass
class TimestampHandler:
    """A simple logical clock that advances in integer units."""

    current_timestamp: int = 0

    def tick(self, elapsed: int = 1) -> int:
        """Advance the clock by ``elapsed`` units and return the new time."""
        self.current_timestamp += elapsed
        return self.current_timestamp

    def reset(self) -> None:
        """Set the clock back to zero."""
        self.current_timestamp = 0

    def clone(self) -> TimestampHandler:
        """Return an independent copy."""
        return copy.copy(self)


def time_operation(func: Callable[[], object]) -> int:
    """Run ``func`` and return the elapsed wall time in whole microseconds."""
    start = time.perf_counter_ns()
    func()
    return (time.perf_counter_ns() - start) // 1000