__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_inference.families.builtins.continuous.normal import standard_normal_quantile
from pysatl_inference.inference import (
    sample_size_for_mean,
    sample_size_for_power,
    sample_size_for_proportion,
    z_critical_value,
)


class TestSampleSizeForMean:
    def test_textbook_value(self):
        assert sample_size_for_mean(5.0, 15.0) == 35

    def test_formula(self):
        z = z_critical_value(1 - 0.99)
        assert sample_size_for_mean(2.0, 10.0, 0.99) == math.ceil((z * 10.0 / 2.0) ** 2)

    def test_smaller_margin_needs_more(self):
        assert sample_size_for_mean(1.0, 15.0) > sample_size_for_mean(5.0, 15.0)

    @pytest.mark.parametrize(
        "margin, sd, match",
        [
            (0.0, 1.0, "Margin of error must be positive"),
            (1.0, 0.0, "Population standard deviation must be positive"),
        ],
    )
    def test_domain(self, margin, sd, match):
        with pytest.raises(ValueError, match=match):
            sample_size_for_mean(margin, sd)


class TestSampleSizeForProportion:
    def test_formula_and_textbook_value(self):
        z = z_critical_value(0.05)
        size = sample_size_for_proportion(0.03)

        assert size == math.ceil(z * z * 0.25 / 0.03**2)
        assert abs(size - 1068) <= 1

    def test_half_is_most_conservative(self):
        assert sample_size_for_proportion(0.05, 0.5) > sample_size_for_proportion(0.05, 0.1)

    @pytest.mark.parametrize("p", [0.0, 1.0, 1.2])
    def test_proportion_domain(self, p):
        with pytest.raises(ValueError, match="Expected proportion must be between 0 and 1"):
            sample_size_for_proportion(0.05, p)

    def test_margin_domain(self):
        with pytest.raises(ValueError, match="Margin of error must be positive"):
            sample_size_for_proportion(-0.05)


class TestSampleSizeForPower:
    def test_textbook_value(self):
        assert sample_size_for_power(5.0, 10.0) == 63

    def test_formula(self):
        z_alpha = z_critical_value(0.01)
        z_beta = -standard_normal_quantile(1 - 0.9)
        expected = math.ceil(2 * ((z_alpha + z_beta) * 4.0 / 1.0) ** 2)

        assert sample_size_for_power(1.0, 4.0, power=0.9, alpha=0.01) == expected

    def test_more_power_needs_more(self):
        assert sample_size_for_power(5.0, 10.0, power=0.9) > sample_size_for_power(5.0, 10.0)

    @pytest.mark.parametrize(
        "effect, sd, power, match",
        [
            (0.0, 1.0, 0.8, "Effect size must be positive"),
            (1.0, -1.0, 0.8, "Standard deviation must be positive"),
            (1.0, 1.0, 1.0, "Power must be between 0 and 1"),
        ],
    )
    def test_domain(self, effect, sd, power, match):
        with pytest.raises(ValueError, match=match):
            sample_size_for_power(effect, sd, power)
