"""Algorithm configuration module.

Keeps the ALGORITHM_INFO table and the command line defaults in one place so
the calculator, the benchmark runner and the CLI all agree on them.

Every algorithm entry has:
 - name: short identifier used in reports
 - description: one line explanation
 - time_complexity / space_complexity: informal cost
 - exact: False when the result may be off because of floating point
 - max_practical_n: largest n worth running (None means unbounded)
"""

from __future__ import annotations

from typing import Dict, Any, List

from .algorithms import ALGORITHMS, get_algorithm

ALGORITHM_INFO: Dict[int, Dict[str, Any]] = {
    1: {
        "name": "recursive",
        "description": "Naive unmemoized recursion, bounded to a native 64-bit long.",
        "time_complexity": "O(phi^n)",
        "space_complexity": "O(n)",
        "exact": True,
        "max_practical_n": 35
    },
    2: {
        "name": "iterative",
        "description": "Sliding window of three big integers advanced once per step.",
        "time_complexity": "O(n)",
        "space_complexity": "O(1)",
        "exact": True,
        "max_practical_n": None
    },
    3: {
        "name": "closed-form",
        "description": "Binet's formula in double precision; approximate for large n.",
        "time_complexity": "O(1)",
        "space_complexity": "O(1)",
        "exact": False,
        "max_practical_n": 1474
    },
    4: {
        "name": "fast-doubling",
        "description": "F(2m) and F(2m+1) from F(m) and F(m+1), one bit of n at a time.",
        "time_complexity": "O(log n)",
        "space_complexity": "O(1)",
        "exact": True,
        "max_practical_n": None
    }
}

# Version whose result every other algorithm is checked against
REFERENCE_VERSION = 4

DEFAULT_OUTPUT_FILE = "out.txt"
TIME_DECIMALS = 6
DEFAULT_REPEATS = 3
DEFAULT_SWEEP_POINTS = 10
DEFAULT_DIVERGENCE_LIMIT = 1474


def valid_versions() -> List[int]:
    return sorted(ALGORITHMS)


def get_algorithm_info(version: int) -> Dict[str, Any]:
    """Return a copy of the metadata for version, or raise InvalidAlgorithmVersion"""
    get_algorithm(version)
    return dict(ALGORITHM_INFO[version])


def is_practical(version: int, n: int) -> bool:
    limit = get_algorithm_info(version)["max_practical_n"]
    return limit is None or n <= limit


__all__ = [
    "ALGORITHM_INFO",
    "REFERENCE_VERSION",
    "DEFAULT_OUTPUT_FILE",
    "TIME_DECIMALS",
    "DEFAULT_REPEATS",
    "DEFAULT_SWEEP_POINTS",
    "DEFAULT_DIVERGENCE_LIMIT",
    "valid_versions",
    "get_algorithm_info",
    "is_practical",
]
