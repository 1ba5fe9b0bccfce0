"""Wall-clock measurement around solver runs."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Timing:
    started_ns: int
    elapsed_ns: int = 0

    @property
    def seconds(self) -> float:
        # Millisecond resolution.
        return self.elapsed_ns // 1_000_000 / 1000


@contextmanager
def measure() -> Iterator[Timing]:
    timing = Timing(started_ns=time.perf_counter_ns())
    try:
        yield timing
    finally:
        timing.elapsed_ns = time.perf_counter_ns() - timing.started_ns
