"""
Monotonic nanosecond timing for calculations and file writes.
"""

import time
from dataclasses import dataclass
from typing import Optional

NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class TimingRecord:
    """Start/end pair of perf_counter_ns() readings"""
    start_ns: int = 0
    end_ns: int = 0

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ns / NANOS_PER_SECOND

    def format_seconds(self, decimals: int = 6) -> str:
        return f"{self.elapsed_seconds:.{decimals}f}"


class Stopwatch:
    """
    Context manager that times the enclosed block.

    Usage:
        with Stopwatch() as watch:
            do_work()
        watch.record.elapsed_ns
    """

    def __init__(self):
        self._start: Optional[int] = None
        self.record = TimingRecord()

    def __enter__(self) -> 'Stopwatch':
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        end = time.perf_counter_ns()
        self.record = TimingRecord(start_ns=self._start, end_ns=end)
        return False
