"""
Tests for Binomial Distribution Family

This module tests the binomial family: mass, cumulative and quantile
functions against SciPy, moments, validation and both sampling regimes.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_inference.exceptions import ParameterDomainError
from pysatl_inference.families.builtins.discrete.binomial import (
    binomial_cdf,
    binomial_pmf,
    binomial_quantile,
    sample_binomial,
)
from pysatl_inference.families.parametrizations import ParameterIssue
from pysatl_inference.types import CharacteristicName, FamilyName, UnivariateDiscrete
from tests.utils.mocks import SequenceRandom

from ..base import BaseDistributionTest


class TestBinomialFamily(BaseDistributionTest):
    """Test suite for Binomial distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.binomial_family = self.family(FamilyName.BINOMIAL)
        self.binomial_dist_example = self.binomial_family(n=20, p=0.3)

    def test_family_properties(self):
        assert self.binomial_family.name == FamilyName.BINOMIAL
        assert self.binomial_family.distr_type == UnivariateDiscrete
        assert self.binomial_family.parametrization_names == ["trialsProb"]
        assert self.binomial_dist_example.is_discrete

    def test_provides_pmf_instead_of_pdf(self):
        comp = self.binomial_dist_example.analytical_computations

        assert CharacteristicName.PMF in comp
        assert CharacteristicName.PDF not in comp

    @pytest.mark.parametrize(
        "params, match",
        [
            ({"n": -1, "p": 0.5}, "n is a non-negative integer"),
            ({"n": 2.5, "p": 0.5}, "n is a non-negative integer"),
            ({"n": 10, "p": 1.5}, "0 <= p <= 1"),
        ],
    )
    def test_parametrization_constraints(self, params, match):
        with pytest.raises(ParameterDomainError, match=match):
            self.binomial_family(**params)

    def test_parameter_issues_in_declaration_order(self):
        params = self.binomial_family.make_parameters(n=-3, p=-0.1)

        assert params.issues() == [
            ParameterIssue(param="n", message="Number of trials must be a non-negative integer"),
            ParameterIssue(param="p", message="Probability must be between 0 and 1"),
        ]

    def test_pmf_matches_scipy(self):
        ks = np.arange(-1, 22)
        actual = self.evaluate(self.binomial_dist_example.pdf, ks)

        self.assert_arrays_almost_equal(actual, binom.pmf(ks, 20, 0.3))

    def test_pmf_sums_to_one(self):
        total = sum(self.binomial_dist_example.pdf(k) for k in range(21))

        assert abs(total - 1.0) < self.CALCULATION_PRECISION

    def test_non_integer_has_no_mass(self):
        assert self.binomial_dist_example.pdf(2.5) == 0.0

    def test_cdf_matches_scipy(self):
        xs = np.array([-1.0, 0.0, 0.5, 3.0, 5.7, 10.0, 19.0, 20.0, 25.0])
        actual = self.evaluate(self.binomial_dist_example.cdf, xs)

        self.assert_arrays_almost_equal(actual, binom.cdf(xs, 20, 0.3))

    def test_cdf_is_non_decreasing(self):
        cdf = self.evaluate(self.binomial_dist_example.cdf, np.linspace(-2.0, 22.0, 97))

        assert np.all(np.diff(cdf) >= 0)
        assert (cdf[0], cdf[-1]) == (0.0, 1.0)

    def test_cdf_for_many_trials(self):
        assert binomial_cdf(5000, 10000, 0.5) == pytest.approx(binom.cdf(5000, 10000, 0.5))

    def test_ppf_matches_scipy(self):
        qs = np.array([0.05, 0.25, 0.5, 0.75, 0.95])
        actual = self.evaluate(self.binomial_dist_example.ppf, qs)

        self.assert_arrays_almost_equal(actual, binom.ppf(qs, 20, 0.3))

    def test_ppf_boundaries(self):
        assert self.binomial_dist_example.ppf(0.0) == 0.0
        assert self.binomial_dist_example.ppf(1.0) == 20.0

        with pytest.raises(ValueError, match="Probability must be in"):
            self.binomial_dist_example.ppf(1.01)

    def test_ppf_is_smallest_k_reaching_probability(self):
        for q in (0.1, 0.4, 0.8):
            k = self.binomial_dist_example.ppf(q)
            assert self.binomial_dist_example.cdf(k) >= q
            assert self.binomial_dist_example.cdf(k - 1) < q

    def test_stats(self):
        stats = self.binomial_dist_example.stats()

        assert stats.mean == pytest.approx(6.0)
        assert stats.variance == pytest.approx(4.2)
        assert stats.mode == 6.0
        assert stats.skewness == pytest.approx(0.4 / math.sqrt(4.2))

    def test_degenerate_skewness_is_zero(self):
        assert self.binomial_family(n=10, p=1.0).stats().skewness == 0.0
        assert self.binomial_family(n=0, p=0.5).stats().skewness == 0.0


class TestBinomialFunctions:
    def test_degenerate_probabilities(self):
        assert binomial_pmf(0, 5, 0.0) == 1.0
        assert binomial_pmf(1, 5, 0.0) == 0.0
        assert binomial_pmf(5, 5, 1.0) == 1.0
        assert binomial_cdf(2, 5, 0.0) == 1.0
        assert binomial_cdf(4, 5, 1.0) == 0.0
        assert binomial_cdf(5, 5, 1.0) == 1.0

    def test_invalid_parameters(self):
        with pytest.raises(ParameterDomainError, match="n >= 0 integer"):
            binomial_pmf(1, 2.5, 0.5)
        with pytest.raises(ParameterDomainError, match="0 <= p <= 1"):
            binomial_cdf(1, 10, -0.5)
        with pytest.raises(ParameterDomainError):
            binomial_quantile(0.5, -1, 0.5)

    def test_bernoulli_counting(self):
        rng = SequenceRandom([0.1, 0.9])

        assert sample_binomial(4, 0.5, rng) == 2
        assert rng.calls == 4

    def test_normal_approximation_above_limit(self):
        # Box-Muller with u1 = 0.5, u2 = 0 adds 10 * 1.1774 to the mean 200
        assert sample_binomial(400, 0.5, SequenceRandom([0.5, 0.0])) == 212

    def test_normal_approximation_is_clamped(self):
        # u1 = 0.01 gives z ~ 3.03, rounding to 201 before the clamp
        assert sample_binomial(200, 0.999, SequenceRandom([0.99, 0.0])) == 200

    def test_degenerate_sampling(self):
        rng = SequenceRandom([0.5])

        assert sample_binomial(0, 0.5, rng) == 0
        assert sample_binomial(7, 0.0, rng) == 0
        assert sample_binomial(7, 1.0, rng) == 7
        assert rng.calls == 0


class TestBinomialSampling(BaseDistributionTest):
    def test_sample_moments(self):
        dist = self.family(FamilyName.BINOMIAL)(n=20, p=0.3)
        sample = dist.sample(3000, np.random.default_rng(5))

        assert np.all(sample.array == np.round(sample.array))
        assert np.all((sample.array >= 0) & (sample.array <= 20))
        assert abs(float(np.mean(sample.array)) - 6.0) < 0.2
