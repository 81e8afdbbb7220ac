"""
Arbitrary-precision integer helpers.

Python's built-in int already provides exact add, subtract, multiply,
shift and compare for integers of any size, so it is used directly as the
big-integer primitive. This module adds the pieces around it that the
algorithms and the output layer need:

- bit scanning for fast doubling
- native 64-bit overflow emulation for the naive recursive variant
- decimal conversion that is not limited by CPython's int/str digit cap
"""

import math
from functools import lru_cache

INT64_BITS = 64
_INT64_MASK = (1 << INT64_BITS) - 1
_INT64_SIGN = 1 << (INT64_BITS - 1)

# Pieces at or below this many digits are converted with str()/int().
# Must stay well under sys.get_int_max_str_digits() (4300 by default).
SMALL_DIGITS = 1000
_SMALL_LIMIT = 10 ** SMALL_DIGITS

_LOG10_2 = math.log10(2)
LOG2_PHI = math.log2((1 + math.sqrt(5)) / 2)
LOG2_SQRT5 = math.log2(math.sqrt(5))


def highest_one_bit(n: int) -> int:
    """
    Return the value of the highest set bit of n.

    Args:
        n: Non-negative integer

    Returns:
        1 << (n.bit_length() - 1), or 0 when n is 0
    """
    if n < 0:
        raise ValueError("highest_one_bit requires a non-negative integer")
    if n == 0:
        return 0
    return 1 << (n.bit_length() - 1)


def wrap_int64(value: int) -> int:
    """Reduce value to a signed 64-bit two's complement integer"""
    value &= _INT64_MASK
    if value & _INT64_SIGN:
        value -= 1 << INT64_BITS
    return value


@lru_cache(maxsize=128)
def _pow10(exponent: int) -> int:
    return 10 ** exponent


def to_decimal(value: int) -> str:
    """
    Exact base-10 representation of an integer of any size.

    Large values are split around a power of ten and each half is
    converted separately, so the result never goes through a single
    str() call bigger than SMALL_DIGITS digits.

    Args:
        value: Integer to convert

    Returns:
        Decimal string, with a leading '-' for negative values
    """
    if value < 0:
        return "-" + to_decimal(-value)
    if value < _SMALL_LIMIT:
        return str(value)

    # lower bound on the digit count keeps the high part non-zero
    digits = int((value.bit_length() - 1) * _LOG10_2)
    half = digits // 2
    high, low = divmod(value, _pow10(half))
    return to_decimal(high) + to_decimal(low).zfill(half)


def parse_decimal(text: str) -> int:
    """
    Parse a decimal string produced by to_decimal().

    Args:
        text: Optional sign followed by ASCII digits; surrounding
            whitespace is ignored

    Returns:
        The parsed integer

    Raises:
        ValueError: If text is not a decimal integer
    """
    digits = text.strip()
    negative = digits.startswith("-")
    if digits[:1] in ("-", "+"):
        digits = digits[1:]

    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"Not a decimal integer: {text[:40]!r}")

    value = _parse_digits(digits)
    return -value if negative else value


def _parse_digits(digits: str) -> int:
    if len(digits) <= SMALL_DIGITS:
        return int(digits)
    half = len(digits) // 2
    return _parse_digits(digits[:-half]) * _pow10(half) + _parse_digits(digits[-half:])


def decimal_digits(value: int) -> int:
    """Number of decimal digits in abs(value)"""
    return len(to_decimal(abs(value)))


def expected_bit_length(n: int) -> int:
    """
    Predicted bit length of F(n) from Binet's growth rate.

    F(n) ~ phi**n / sqrt(5), so the bit length is about
    n * log2(phi) - log2(sqrt(5)) + 1. Off by at most one for small n.
    """
    if n <= 0:
        return 0
    return max(0, math.floor(n * LOG2_PHI - LOG2_SQRT5) + 1)
