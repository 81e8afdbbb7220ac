"""
Benchmark runner comparing the Fibonacci algorithms against each other.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, Iterable

import numpy as np
from tqdm import tqdm

from .algorithm_config import (
    DEFAULT_DIVERGENCE_LIMIT,
    DEFAULT_REPEATS,
    REFERENCE_VERSION,
    get_algorithm_info,
    is_practical,
    valid_versions,
)
from .algorithms import fib_closed_form, fib_fast_doubling
from .calculator import FibonacciCalculator
from .errors import ClosedFormOverflow

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmTiming:
    """Timings of one algorithm for a single n"""
    version: int
    name: str
    value: int
    samples: List[float]
    matches_reference: bool
    statistics: Dict[str, float] = field(default_factory=dict)


@dataclass
class BenchmarkReport:
    """Complete comparison of the algorithms for one n"""
    n: int
    repeats: int
    reference_value: int
    timings: List[AlgorithmTiming]
    skipped: Dict[int, str]
    processing_time: float

    @property
    def exact_results_agree(self) -> bool:
        """True when every exact algorithm that ran produced the reference value"""
        return all(t.matches_reference for t in self.timings
                   if get_algorithm_info(t.version)["exact"])

    def fastest(self) -> Optional[AlgorithmTiming]:
        if not self.timings:
            return None
        return min(self.timings, key=lambda t: t.statistics['median'])


def timing_statistics(samples: Iterable[float]) -> Dict[str, float]:
    """
    Summary statistics for a list of timings in seconds.

    Args:
        samples: Elapsed times

    Returns:
        Dictionary with mean, median, std, min and max (empty for no samples)
    """
    values = np.asarray(list(samples), dtype=float)
    if values.size == 0:
        return {}

    return {
        'mean': float(np.mean(values)),
        'median': float(np.median(values)),
        'std': float(np.std(values)),
        'min': float(np.min(values)),
        'max': float(np.max(values))
    }


def compare_algorithms(n: int,
                       versions: Optional[List[int]] = None,
                       repeats: int = DEFAULT_REPEATS,
                       progress: bool = False) -> BenchmarkReport:
    """
    Run each algorithm on the same n and compare timings and results.

    Algorithms whose practical limit is below n are skipped rather than
    run, as is the closed form when it overflows.

    Args:
        n: Index to compute
        versions: Algorithm numbers to run (default: all)
        repeats: Runs per algorithm
        progress: Show a tqdm progress bar

    Returns:
        BenchmarkReport with per-algorithm statistics
    """
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    if versions is None:
        versions = valid_versions()

    start_time = time.time()
    calculator = FibonacciCalculator()
    reference = calculator.compute(n, REFERENCE_VERSION).value

    timings = []
    skipped = {}

    for version in tqdm(versions, desc="Benchmarking algorithms", disable=not progress):
        info = get_algorithm_info(version)

        if not is_practical(version, n):
            skipped[version] = f"n={n} exceeds practical limit {info['max_practical_n']}"
            logger.info(f"Skipping {info['name']}: {skipped[version]}")
            continue

        samples = []
        try:
            for _ in range(repeats):
                result = calculator.compute(n, version)
                samples.append(result.timing.elapsed_seconds)
        except ClosedFormOverflow as e:
            skipped[version] = e.message
            logger.info(f"Skipping {info['name']}: {e.message}")
            continue

        timings.append(AlgorithmTiming(
            version=version,
            name=info['name'],
            value=result.value,
            samples=samples,
            matches_reference=result.value == reference,
            statistics=timing_statistics(samples)
        ))

    return BenchmarkReport(
        n=n,
        repeats=repeats,
        reference_value=reference,
        timings=timings,
        skipped=skipped,
        processing_time=time.time() - start_time
    )


def sweep_points(n: int, points: int) -> List[int]:
    """Evenly spaced distinct indices from 0 to n inclusive"""
    if points < 2:
        return [n]
    return sorted(set(int(x) for x in np.linspace(0, n, points)))


def sweep(version: int, ns: Iterable[int], progress: bool = False) -> List[Tuple[int, float]]:
    """
    Time one algorithm over several indices.

    Args:
        version: Algorithm number
        ns: Indices to compute
        progress: Show a tqdm progress bar

    Returns:
        List of (n, elapsed seconds) pairs
    """
    calculator = FibonacciCalculator()
    name = get_algorithm_info(version)['name']
    series = []

    for n in tqdm(list(ns), desc=f"Sweeping {name}", disable=not progress):
        result = calculator.compute(n, version)
        series.append((n, result.timing.elapsed_seconds))

    return series


def find_closed_form_divergence(limit: int = DEFAULT_DIVERGENCE_LIMIT,
                                start: int = 0) -> Optional[int]:
    """
    Find the first n where the closed form stops matching the exact value.

    Args:
        limit: Largest n to check (inclusive)
        start: First n to check

    Returns:
        First diverging n, or None if all of [start, limit] match
    """
    if start < 0:
        raise ValueError("start must be non-negative")

    a, b = fib_fast_doubling(start), fib_fast_doubling(start + 1)

    for n in range(start, limit + 1):
        try:
            approx = fib_closed_form(n)
        except ClosedFormOverflow:
            logger.info(f"Closed form overflows at n={n}")
            return n

        if approx != a:
            logger.info(f"Closed form diverges at n={n}: {approx} != {a}")
            return n
        a, b = b, a + b

    return None
