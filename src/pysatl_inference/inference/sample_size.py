"""
Sample-size planning.

All sizes are rounded up to the next integer.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_inference.families.builtins.continuous.normal import standard_normal_quantile

from .critical_values import z_critical_value
from .intervals import check_confidence_level


def sample_size_for_mean(
    margin_of_error: float, population_std_dev: float, confidence_level: float = 0.95
) -> int:
    """
    Sample size estimating a mean within ``margin_of_error``: ``(z sigma / E)^2``.

    Raises
    ------
    ValueError
        If the margin or standard deviation is not positive, or the
        confidence level is outside (0, 1).
    """
    if not margin_of_error > 0:
        raise ValueError("Margin of error must be positive")
    if not population_std_dev > 0:
        raise ValueError("Population standard deviation must be positive")
    check_confidence_level(confidence_level)

    z = z_critical_value(1 - confidence_level)
    return math.ceil((z * population_std_dev / margin_of_error) ** 2)


def sample_size_for_proportion(
    margin_of_error: float, expected_proportion: float = 0.5, confidence_level: float = 0.95
) -> int:
    """
    Sample size estimating a proportion within ``margin_of_error``:
    ``z^2 p (1 - p) / E^2``. ``p = 0.5`` gives the most conservative size.

    Raises
    ------
    ValueError
        If the margin is not positive, the proportion is outside (0, 1) or
        the confidence level is outside (0, 1).
    """
    if not margin_of_error > 0:
        raise ValueError("Margin of error must be positive")
    if not 0.0 < expected_proportion < 1.0:
        raise ValueError("Expected proportion must be between 0 and 1")
    check_confidence_level(confidence_level)

    z = z_critical_value(1 - confidence_level)
    p = expected_proportion
    return math.ceil(z * z * p * (1 - p) / margin_of_error**2)


def sample_size_for_power(
    effect_size: float, standard_deviation: float, power: float = 0.8, alpha: float = 0.05
) -> int:
    """
    Per-group size of a two-sample comparison of means:
    ``2 ((z_alpha + z_beta) sigma / delta)^2`` with a two-sided ``z_alpha``
    and one-sided ``z_beta = -Phi^-1(1 - power)``.

    Raises
    ------
    ValueError
        If the effect size or standard deviation is not positive, or power or
        alpha is outside (0, 1).
    """
    if not effect_size > 0:
        raise ValueError("Effect size must be positive")
    if not standard_deviation > 0:
        raise ValueError("Standard deviation must be positive")
    if not 0.0 < power < 1.0:
        raise ValueError("Power must be between 0 and 1")

    z_alpha = z_critical_value(alpha)
    z_beta = -standard_normal_quantile(1 - power)
    return math.ceil(2 * ((z_alpha + z_beta) * standard_deviation / effect_size) ** 2)
