"""
Four ways of computing the nth Fibonacci number, F(0) = 0, F(1) = 1.

All functions are pure and assume n >= 0; input validation and timing
live in core.calculator.
"""

import math
from typing import Callable, Dict

from .bigint import highest_one_bit, wrap_int64
from .errors import ClosedFormOverflow, InvalidAlgorithmVersion, RecursionDepthExceeded

SQRT5 = math.sqrt(5)
GOLDEN_RATIO = (1 + SQRT5) / 2


def fib_recursive(n: int) -> int:
    """
    Naive recursive approach.

    Exponential time, O(n) space for the recursion depth. The result is
    reduced to a signed 64-bit integer, so anything past F(92) wraps the
    way a native long does.

    Raises:
        RecursionDepthExceeded: If n is deeper than the recursion limit
    """
    try:
        return wrap_int64(_fib_recursive(n))
    except RecursionError as e:
        raise RecursionDepthExceeded(n) from e


def _fib_recursive(n: int) -> int:
    if n == 0:
        return 0
    elif n == 1:
        return 1
    return _fib_recursive(n - 1) + _fib_recursive(n - 2)


def fib_iterative(n: int) -> int:
    """
    Iterative approach with a three term window.

    O(n) big integer additions, O(1) extra space.
    """
    minus_two = 0
    minus_one = 1
    current = 1  # F(2)

    if n == 0:
        return minus_two
    elif n == 1:
        return minus_one

    for _ in range(3, n + 1):
        minus_two = minus_one
        minus_one = current
        current = minus_one + minus_two

    return current


def fib_closed_form(n: int) -> int:
    """
    Binet's formula evaluated in double precision.

    Approximate: rounding error grows with n and the truncated result
    stops matching the exact value somewhere past n = 70.

    Raises:
        ClosedFormOverflow: If phi ** n is outside the double range
    """
    try:
        value = (GOLDEN_RATIO ** n - (-GOLDEN_RATIO) ** -n) / SQRT5
    except OverflowError as e:
        raise ClosedFormOverflow(n) from e
    return int(value)


def fib_fast_doubling(n: int) -> int:
    """
    Fast doubling.

    O(log n) big integer multiplications. Scans the bits of n from the
    highest set bit down, keeping (a, b) = (F(m), F(m + 1)) where m is the
    prefix of n consumed so far.
    """
    a, b = 0, 1
    bit = highest_one_bit(n)

    while bit:
        # (F(m), F(m+1)) -> (F(2m), F(2m+1))
        c = a * ((b << 1) - a)
        d = a * a + b * b
        a, b = c, d

        if n & bit:
            a, b = b, a + b
        bit >>= 1

    return a


ALGORITHMS: Dict[int, Callable[[int], int]] = {
    1: fib_recursive,
    2: fib_iterative,
    3: fib_closed_form,
    4: fib_fast_doubling,
}


def get_algorithm(version: int) -> Callable[[int], int]:
    if isinstance(version, bool) or version not in ALGORITHMS:
        raise InvalidAlgorithmVersion(version, sorted(ALGORITHMS))
    return ALGORITHMS[version]
