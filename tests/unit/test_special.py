__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_inference.exceptions import ParameterDomainError
from pysatl_inference.special import (
    MAX_EXACT_FACTORIAL,
    STIRLING_THRESHOLD,
    binomial_coefficient,
    erf,
    factorial,
    is_integral,
    log_binomial_coefficient,
    log_factorial,
)


class TestIsIntegral:
    @pytest.mark.parametrize("value", [0, 7, 3.0, np.int64(4), np.float64(2.0)])
    def test_accepts_integer_values(self, value):
        assert is_integral(value)

    @pytest.mark.parametrize("value", [2.5, True, "3", None, math.nan, math.inf])
    def test_rejects_everything_else(self, value):
        assert not is_integral(value)


class TestFactorial:
    @pytest.mark.parametrize("n, expected", [(0, 1.0), (1, 1.0), (5, 120.0), (10, 3628800.0)])
    def test_small_values(self, n, expected):
        assert factorial(n) == expected

    def test_integer_valued_float_is_accepted(self):
        assert factorial(6.0) == 720.0

    def test_saturates_to_inf(self):
        assert math.isfinite(factorial(MAX_EXACT_FACTORIAL))
        assert factorial(MAX_EXACT_FACTORIAL + 1) == math.inf

    @pytest.mark.parametrize("n", [-1, 2.5, True])
    def test_domain(self, n):
        with pytest.raises(ParameterDomainError, match="non-negative integer"):
            factorial(n)


class TestLogFactorial:
    @pytest.mark.parametrize("n", [0, 1, 2, 10, STIRLING_THRESHOLD])
    def test_exact_up_to_threshold(self, n):
        assert log_factorial(n) == pytest.approx(math.lgamma(n + 1), abs=1e-12)

    @pytest.mark.parametrize("n", [STIRLING_THRESHOLD + 1, 100, 1000])
    def test_stirling_above_threshold(self, n):
        # the truncated series is off by about 1 / (12 n)
        assert log_factorial(n) == pytest.approx(math.lgamma(n + 1), abs=1 / (12 * n) + 1e-9)

    def test_domain(self):
        with pytest.raises(ParameterDomainError):
            log_factorial(-3)


class TestBinomialCoefficient:
    @pytest.mark.parametrize(
        "n, k, expected",
        [(5, 0, 1.0), (5, 2, 10.0), (5, 5, 1.0), (52, 5, 2598960.0), (30, 15, 155117520.0)],
    )
    def test_values(self, n, k, expected):
        assert binomial_coefficient(n, k) == expected

    def test_symmetry(self):
        assert binomial_coefficient(40, 7) == binomial_coefficient(40, 33)

    @pytest.mark.parametrize("n, k", [(5, 6), (5, -1), (5.5, 2), (5, 1.5)])
    def test_outside_range_is_zero(self, n, k):
        assert binomial_coefficient(n, k) == 0.0

    def test_overflow_is_inf(self):
        assert binomial_coefficient(1100, 550) == math.inf


class TestLogBinomialCoefficient:
    @pytest.mark.parametrize("n, k", [(5, 2), (52, 5), (100, 50), (1100, 550)])
    def test_matches_lgamma(self, n, k):
        expected = math.lgamma(n + 1) - math.lgamma(k + 1) - math.lgamma(n - k + 1)
        assert log_binomial_coefficient(n, k) == pytest.approx(expected, rel=1e-10)

    def test_edges(self):
        assert log_binomial_coefficient(7, 0) == 0.0
        assert log_binomial_coefficient(7, 7) == 0.0

    @pytest.mark.parametrize("n, k", [(5, 6), (5, -1), (4.5, 1)])
    def test_outside_range_is_negative_inf(self, n, k):
        assert log_binomial_coefficient(n, k) == -math.inf


class TestErf:
    def test_zero(self):
        assert erf(0.0) == 0.0

    @pytest.mark.parametrize("x", np.linspace(-4.0, 4.0, 33))
    def test_matches_math_erf(self, x):
        assert abs(erf(float(x)) - math.erf(float(x))) < 2e-7

    @pytest.mark.parametrize("x", [0.1, 0.7, 1.3, 3.0])
    def test_odd(self, x):
        assert erf(-x) == -erf(x)

    def test_saturates(self):
        assert erf(10.0) == pytest.approx(1.0)
        assert erf(-10.0) == pytest.approx(-1.0)
