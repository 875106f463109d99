__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from scipy.stats import norm
from scipy.stats import t as student_t

from pysatl_inference.inference import (
    T_TO_Z_DEGREES_OF_FREEDOM,
    t_critical_value,
    z_critical_value,
)


class TestZCriticalValue:
    @pytest.mark.parametrize("alpha", [0.2, 0.1, 0.05, 0.01, 0.001])
    def test_matches_scipy(self, alpha):
        assert z_critical_value(alpha) == pytest.approx(norm.ppf(1 - alpha / 2), abs=5e-4)

    def test_is_positive(self):
        assert z_critical_value(0.9) > 0

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.5, 2.0])
    def test_domain(self, alpha):
        with pytest.raises(ValueError, match="Alpha must be between 0 and 1"):
            z_critical_value(alpha)


class TestTCriticalValue:
    @pytest.mark.parametrize("df", [5, 10, 30, 100, 500])
    @pytest.mark.parametrize("alpha", [0.1, 0.05])
    def test_matches_scipy(self, df, alpha):
        expected = student_t.ppf(1 - alpha / 2, df)
        assert t_critical_value(df, alpha) == pytest.approx(expected, rel=1e-2)

    @pytest.mark.parametrize("df", [10, 30, 100])
    def test_matches_scipy_at_one_percent(self, df):
        assert t_critical_value(df, 0.01) == pytest.approx(student_t.ppf(0.995, df), rel=1e-2)

    def test_exceeds_z(self):
        assert t_critical_value(T_TO_Z_DEGREES_OF_FREEDOM, 0.05) > z_critical_value(0.05)

    def test_large_df_uses_z(self):
        assert t_critical_value(T_TO_Z_DEGREES_OF_FREEDOM + 1, 0.05) == z_critical_value(0.05)

    def test_decreases_with_degrees_of_freedom(self):
        values = [t_critical_value(df, 0.05) for df in (2, 5, 10, 50, 200)]

        assert values == sorted(values, reverse=True)

    @pytest.mark.parametrize("df", [0, -3])
    def test_domain(self, df):
        with pytest.raises(ValueError, match="Degrees of freedom must be positive"):
            t_critical_value(df, 0.05)
