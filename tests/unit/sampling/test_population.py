__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_inference.dispatch import DistributionSpec
from pysatl_inference.exceptions import ParameterDomainError, SamplingValidationError
from pysatl_inference.sampling import (
    PopulationConfig,
    PopulationDistribution,
    StratifiedSampling,
    create_strata,
    generate_population,
)


class TestPopulationConfig:
    def test_distribution_is_coerced(self):
        config = PopulationConfig(size=10, distribution="uniform")

        assert config.distribution is PopulationDistribution.UNIFORM

    def test_unknown_distribution(self):
        with pytest.raises(ValueError):
            PopulationConfig(size=10, distribution="poisson")

    @pytest.mark.parametrize(
        "distribution, expected",
        [
            ("normal", {"mu": 0.0, "sigma": 1.0}),
            ("uniform", {"a": 0.0, "b": 1.0}),
            ("exponential", {"lambda_": 1.0}),
            ("binomial", {"p": 0.5}),
        ],
    )
    def test_default_params(self, distribution, expected):
        assert PopulationConfig(5, distribution).resolved_params() == expected

    def test_overrides_are_merged(self):
        config = PopulationConfig(5, PopulationDistribution.NORMAL, {"sigma": 3.0})

        assert config.resolved_params() == {"mu": 0.0, "sigma": 3.0}

    def test_unknown_override_is_rejected(self):
        config = PopulationConfig(5, PopulationDistribution.EXPONENTIAL, {"lambda": 0.01})

        with pytest.raises(SamplingValidationError, match="Unknown parameter lambda"):
            config.resolved_params()
        with pytest.raises(SamplingValidationError, match="Unknown parameter lambda"):
            generate_population(config, np.random.default_rng(0))

    @pytest.mark.parametrize(
        "config, expected",
        [
            (PopulationConfig(5, "normal", {"mu": 50}), DistributionSpec.normal(50, 1.0)),
            (PopulationConfig(5, "uniform", {"b": 4}), DistributionSpec.uniform(0.0, 4)),
            (PopulationConfig(5, "exponential"), DistributionSpec.exponential(1.0)),
            (PopulationConfig(5, "binomial", {"p": 0.2}), DistributionSpec.binomial(1, 0.2)),
        ],
    )
    def test_spec(self, config, expected):
        assert config.spec() == expected


class TestGeneratePopulation:
    def test_size_and_type(self):
        population = generate_population(
            PopulationConfig(250, "normal", {"mu": 50, "sigma": 15}), np.random.default_rng(0)
        )

        assert population.shape == (250,)
        assert population.dtype == np.float64
        assert abs(float(np.mean(population)) - 50.0) < 4.0

    def test_binomial_population_holds_bernoulli_outcomes(self):
        population = generate_population(
            PopulationConfig(500, "binomial", {"p": 0.3}), np.random.default_rng(1)
        )

        assert set(np.unique(population).tolist()) <= {0.0, 1.0}
        assert 0.2 < float(np.mean(population)) < 0.4

    def test_uniform_population_stays_in_bounds(self):
        population = generate_population(
            PopulationConfig(300, "uniform", {"a": -2.0, "b": 2.0}), np.random.default_rng(2)
        )

        assert np.all((population >= -2.0) & (population < 2.0))

    def test_reproducible_with_same_seed(self):
        config = PopulationConfig(20, "exponential", {"lambda_": 0.5})

        np.testing.assert_array_equal(
            generate_population(config, np.random.default_rng(3)),
            generate_population(config, np.random.default_rng(3)),
        )

    @pytest.mark.parametrize("size", [0, -5, 2.5])
    def test_invalid_size(self, size):
        with pytest.raises(SamplingValidationError, match="Population size"):
            generate_population(PopulationConfig(size, "normal"))

    def test_invalid_params(self):
        with pytest.raises(ParameterDomainError):
            generate_population(PopulationConfig(10, "normal", {"sigma": -1.0}))


class TestCreateStrata:
    def test_sorted_chunks(self):
        population = np.array([7.0, 2.0, 9.0, 0.0, 5.0, 1.0, 8.0, 3.0, 6.0, 4.0])
        strata = create_strata(population, 3)

        assert [s.name for s in strata] == ["Stratum 1", "Stratum 2", "Stratum 3"]
        np.testing.assert_array_equal(strata[0].values, [0.0, 1.0, 2.0, 3.0])
        np.testing.assert_array_equal(strata[1].values, [4.0, 5.0, 6.0, 7.0])
        np.testing.assert_array_equal(strata[2].values, [8.0, 9.0])
        assert [s.proportion for s in strata] == pytest.approx([0.4, 0.4, 0.2])

    def test_more_strata_than_values_leaves_empty_strata(self):
        strata = create_strata([3.0, 1.0, 2.0], 5)

        assert [len(s) for s in strata] == [1, 1, 1, 0, 0]
        assert sum(s.proportion for s in strata) == pytest.approx(1.0)

    def test_strata_feed_stratified_sampling(self):
        strata = create_strata(np.arange(40, dtype=np.float64), 4)
        result = StratifiedSampling(8).sample(strata, np.random.default_rng(5))

        assert len(result) == 8
        assert sorted(int(v) // 10 for v in result.values) == [0, 0, 1, 1, 2, 2, 3, 3]

    def test_invalid_strata_count(self):
        with pytest.raises(SamplingValidationError, match="Number of strata"):
            create_strata([1.0, 2.0], 0)

    def test_empty_population(self):
        with pytest.raises(SamplingValidationError, match="Population cannot be empty"):
            create_strata([], 2)
