"""
Fibonacci calculator: validates the request, dispatches to the selected
algorithm and times the whole call.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .algorithm_config import get_algorithm_info
from .algorithms import get_algorithm
from .bigint import decimal_digits
from .errors import InvalidArgumentFormat, NegativeIndex
from .timing import Stopwatch, TimingRecord

logger = logging.getLogger(__name__)


@dataclass
class CalculationResult:
    """Value of F(n) together with how long it took"""
    n: int
    version: int
    value: int
    timing: TimingRecord = field(default_factory=TimingRecord)

    @property
    def algorithm(self) -> str:
        return get_algorithm_info(self.version)["name"]

    @property
    def digits(self) -> int:
        return decimal_digits(self.value)


def _require_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentFormat(name, value)
    return value


class FibonacciCalculator:
    def __init__(self):
        """Initialize calculator with an empty timing slot"""
        self.last_timing = TimingRecord()
        self.last_result: Optional[CalculationResult] = None

    @property
    def calculation_time(self) -> int:
        """Nanoseconds taken by the most recent calculation (0 if none)"""
        return self.last_timing.elapsed_ns

    def compute(self, n: int, version: int) -> CalculationResult:
        """
        Compute F(n) with a specific algorithm.

        The stopwatch wraps the entire call, so for the recursive version
        it covers the whole recursion tree.

        Args:
            n: Non-negative index
            version: Algorithm number, one of [1, 2, 3, 4]

        Returns:
            CalculationResult with the value and its TimingRecord

        Raises:
            InvalidArgumentFormat: If n or version is not an int
            NegativeIndex: If n < 0
            InvalidAlgorithmVersion: If version is not a known algorithm
        """
        n = _require_int("n", n)
        version = _require_int("version", version)
        if n < 0:
            raise NegativeIndex(n)

        algorithm = get_algorithm(version)
        logger.debug(f"Computing F({n}) with algorithm {version} ({algorithm.__name__})")

        with Stopwatch() as watch:
            value = algorithm(n)

        result = CalculationResult(n=n, version=version, value=value, timing=watch.record)
        self.last_timing = watch.record
        self.last_result = result

        logger.debug(f"F({n}) computed in {watch.record.elapsed_ns} ns ({value.bit_length()} bits)")
        return result


def fibonacci(n: int, version: int = 4) -> int:
    """Shortcut returning only the value of F(n)"""
    return FibonacciCalculator().compute(n, version).value
