"""
Test suite for the Fibonacci algorithms.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.algorithms import (
    ALGORITHMS,
    fib_closed_form,
    fib_fast_doubling,
    fib_iterative,
    fib_recursive,
    get_algorithm,
)
from core.algorithm_config import ALGORITHM_INFO, get_algorithm_info, valid_versions
from core.bigint import expected_bit_length
from core.errors import ClosedFormOverflow, FibonacciError, InvalidAlgorithmVersion, RecursionDepthExceeded

FIRST_TERMS = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610]


def reference_fib(n):
    """Plain two-variable loop used as a trusted reference"""
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


class TestBaseCases:

    @pytest.mark.parametrize("algorithm", list(ALGORITHMS.values()))
    def test_f0_and_f1(self, algorithm):
        """F(0) = 0 and F(1) = 1 for every variant"""
        assert algorithm(0) == 0
        assert algorithm(1) == 1

    def test_reference_helper(self):
        assert [reference_fib(i) for i in range(len(FIRST_TERMS))] == FIRST_TERMS


class TestRecursive:

    def test_first_terms(self):
        assert [fib_recursive(i) for i in range(len(FIRST_TERMS))] == FIRST_TERMS

    def test_matches_iterative(self):
        for n in range(2, 26):
            assert fib_recursive(n) == fib_iterative(n)

    def test_too_deep_is_reported(self):
        """Indices beyond the interpreter recursion limit raise a typed error"""
        with pytest.raises(RecursionDepthExceeded) as excinfo:
            fib_recursive(sys.getrecursionlimit() * 3)
        assert isinstance(excinfo.value, FibonacciError)
        assert excinfo.value.n == sys.getrecursionlimit() * 3


class TestIterative:

    def test_first_terms(self):
        assert [fib_iterative(i) for i in range(len(FIRST_TERMS))] == FIRST_TERMS

    def test_f2_uses_preloaded_window(self):
        assert fib_iterative(2) == 1
        assert fib_iterative(3) == 2

    def test_known_values(self):
        assert fib_iterative(10) == 55
        assert fib_iterative(50) == 12586269025
        assert fib_iterative(100) == 354224848179261915075

    def test_matches_reference_loop(self):
        for n in range(0, 300):
            assert fib_iterative(n) == reference_fib(n)


class TestFastDoubling:

    def test_first_terms(self):
        assert [fib_fast_doubling(i) for i in range(len(FIRST_TERMS))] == FIRST_TERMS

    def test_known_values(self):
        assert fib_fast_doubling(10) == 55
        assert fib_fast_doubling(50) == 12586269025
        assert fib_fast_doubling(100) == 354224848179261915075

    def test_identical_to_iterative(self):
        """Fast doubling and the iterative window agree for every n in range"""
        for n in range(0, 1500):
            assert fib_fast_doubling(n) == fib_iterative(n)

    @pytest.mark.parametrize("n", [2 ** 12, 2 ** 12 - 1, 2 ** 12 + 1, 9999, 20000])
    def test_identical_to_iterative_near_powers_of_two(self, n):
        assert fib_fast_doubling(n) == fib_iterative(n)

    def test_fibonacci_identities_at_large_n(self):
        """F(2m) = F(m) * (2F(m+1) - F(m)) and F(2m+1) = F(m)^2 + F(m+1)^2"""
        m = 12345
        fm, fm1 = fib_fast_doubling(m), fib_fast_doubling(m + 1)
        assert fib_fast_doubling(2 * m) == fm * (2 * fm1 - fm)
        assert fib_fast_doubling(2 * m + 1) == fm * fm + fm1 * fm1

    def test_bit_length_grows_linearly(self):
        for n in (10, 100, 1000, 10000, 100000):
            actual = fib_fast_doubling(n).bit_length()
            assert abs(actual - expected_bit_length(n)) <= 1


class TestClosedForm:

    def test_first_terms_close(self):
        for n, exact in enumerate(FIRST_TERMS):
            assert abs(fib_closed_form(n) - exact) <= 1

    def test_relative_error_small_up_to_70(self):
        for n in range(2, 71):
            exact = fib_iterative(n)
            approx = fib_closed_form(n)
            assert abs(approx - exact) <= max(1, exact * 1e-12)

    def test_large_n_is_approximate(self):
        """At n = 1000 the double only carries ~16 significant digits"""
        exact = fib_iterative(1000)
        approx = fib_closed_form(1000)
        assert approx != exact
        assert abs(approx - exact) / exact < 1e-10

    def test_overflow_reported(self):
        with pytest.raises(ClosedFormOverflow) as excinfo:
            fib_closed_form(1475)
        assert excinfo.value.n == 1475

    def test_last_representable_index(self):
        assert fib_closed_form(1474) > 0


class TestRegistry:

    def test_config_table_covers_registry(self):
        assert valid_versions() == sorted(ALGORITHMS)
        assert sorted(ALGORITHM_INFO) == sorted(ALGORITHMS)
        for version in ALGORITHMS:
            assert get_algorithm_info(version)["name"]

    def test_versions(self):
        assert sorted(ALGORITHMS) == [1, 2, 3, 4]
        assert get_algorithm(1) is fib_recursive
        assert get_algorithm(4) is fib_fast_doubling

    @pytest.mark.parametrize("version", [0, 5, -1, 100, True])
    def test_invalid_version(self, version):
        with pytest.raises(InvalidAlgorithmVersion):
            get_algorithm(version)
        with pytest.raises(InvalidAlgorithmVersion):
            get_algorithm_info(version)
