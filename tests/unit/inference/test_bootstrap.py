__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_inference.exceptions import SamplingValidationError
from pysatl_inference.inference import (
    BootstrapConfig,
    bootstrap,
    bootstrap_resample,
)
from tests.utils.mocks import SequenceRandom


class TestResample:
    def test_draws_with_replacement(self):
        resample = bootstrap_resample([1.0, 2.0, 3.0], SequenceRandom([0.0]))

        np.testing.assert_array_equal(resample, [1.0, 1.0, 1.0])

    def test_index_mapping(self):
        resample = bootstrap_resample([1.0, 2.0, 3.0], SequenceRandom([0.0, 0.5, 0.99]))

        np.testing.assert_array_equal(resample, [1.0, 2.0, 3.0])

    def test_keeps_sample_size(self):
        data = np.arange(50, dtype=np.float64)
        resample = bootstrap_resample(data, np.random.default_rng(0))

        assert resample.shape == (50,)
        assert set(resample.tolist()) <= set(data.tolist())

    def test_empty_sample(self):
        assert bootstrap_resample([]).size == 0


class TestBootstrapConfig:
    @pytest.mark.parametrize(
        "iterations, level, expected",
        [(100, 0.95, (2, 96)), (10, 0.9, (0, 8)), (1, 0.95, (0, 0)), (2, 0.95, (0, 0))],
    )
    def test_percentile_indices(self, iterations, level, expected):
        assert BootstrapConfig(iterations, level).percentile_indices() == expected

    @pytest.mark.parametrize("iterations", [0, -1, 2.5])
    def test_iterations(self, iterations):
        with pytest.raises(SamplingValidationError, match="Iterations must be a positive integer"):
            BootstrapConfig(iterations)

    def test_level(self):
        with pytest.raises(ValueError, match="Confidence level"):
            BootstrapConfig(10, 1.5)


class TestBootstrap:
    def setup_method(self):
        self.sample = np.random.default_rng(21).normal(10.0, 2.0, size=60)

    def test_result(self):
        result = bootstrap(self.sample, 400, rng=np.random.default_rng(5))

        assert result.bootstrap_statistics.shape == (400,)
        assert np.all(np.diff(result.bootstrap_statistics) >= 0)
        assert result.original_statistic == pytest.approx(float(np.mean(self.sample)))
        assert result.percentile_ci.point_estimate == result.original_statistic
        assert result.percentile_ci.confidence_level == 0.95
        assert result.percentile_ci.lower <= result.percentile_ci.upper
        assert result.percentile_ci.contains(result.original_statistic)

    def test_standard_error_is_close_to_analytic(self):
        result = bootstrap(self.sample, 1000, rng=np.random.default_rng(6))

        analytic = float(np.std(self.sample, ddof=1)) / np.sqrt(self.sample.size)
        assert result.standard_error == pytest.approx(analytic, rel=0.2)

    def test_margin_is_half_width(self):
        ci = bootstrap(self.sample, 200, rng=np.random.default_rng(8)).percentile_ci

        assert ci.margin_of_error == pytest.approx(ci.width / 2)

    def test_custom_statistic(self):
        result = bootstrap(self.sample, 100, statistic=np.median, rng=np.random.default_rng(1))

        assert result.original_statistic == pytest.approx(float(np.median(self.sample)))

    def test_constant_sample(self):
        result = bootstrap([4.0] * 12, 50, rng=np.random.default_rng(2))

        assert result.standard_error == 0.0
        assert result.percentile_ci.lower == result.percentile_ci.upper == 4.0

    def test_fixed_source_repeats_first_element(self):
        result = bootstrap([1.0, 2.0, 3.0], 3, rng=SequenceRandom([0.0]))

        np.testing.assert_array_equal(result.bootstrap_statistics, [1.0, 1.0, 1.0])
        assert result.original_statistic == 2.0
        assert (result.percentile_ci.lower, result.percentile_ci.upper) == (1.0, 1.0)

    def test_single_iteration(self):
        result = bootstrap(self.sample, 1, rng=np.random.default_rng(3))

        assert result.standard_error == 0.0
        assert result.percentile_ci.width == 0.0

    def test_empty_sample(self):
        with pytest.raises(SamplingValidationError, match="Sample cannot be empty"):
            bootstrap([], 10)


class TestBootstrapConvergence:
    def test_standard_error_settles_as_iterations_grow(self):
        sample = np.random.default_rng(17).normal(0.0, 1.0, size=20)
        # resampling uses the plug-in variance, i.e. ddof=0
        plug_in = float(np.std(sample)) / np.sqrt(sample.size)

        spreads = []
        for iterations in (10, 100, 1000, 10000):
            errors = [
                bootstrap(sample, iterations, rng=np.random.default_rng(seed)).standard_error
                for seed in range(6)
            ]
            spreads.append(float(np.std(errors)))
            if iterations == 10000:
                assert float(np.mean(errors)) == pytest.approx(plug_in, rel=0.03)

        assert spreads[-1] < spreads[1]
        assert spreads[-1] < spreads[0] / 5
