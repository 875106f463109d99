"""
Confidence intervals for a mean and for a proportion.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

from .critical_values import t_critical_value, z_critical_value
from .standard_error import (
    finite_population_correction,
    standard_error_mean,
    standard_error_proportion,
)


def check_confidence_level(confidence_level: float) -> None:
    """Raise ``ValueError`` unless the level lies strictly between 0 and 1."""
    if not 0.0 < confidence_level < 1.0:
        raise ValueError("Confidence level must be between 0 and 1")


@dataclass(frozen=True, slots=True)
class ConfidenceInterval:
    """
    An inferential interval.

    Parameters
    ----------
    lower : float
    upper : float
    point_estimate : float
    margin_of_error : float
    confidence_level : float
        Nominal coverage in (0, 1).

    Raises
    ------
    ValueError
        If ``lower > upper`` or the confidence level is outside (0, 1).

    Notes
    -----
    Symmetric intervals contain their point estimate. Percentile bootstrap
    intervals need not, so containment is not enforced.
    """

    lower: float
    upper: float
    point_estimate: float
    margin_of_error: float
    confidence_level: float

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError("Lower bound must not exceed upper bound")
        check_confidence_level(self.confidence_level)

    @property
    def width(self) -> float:
        """Distance between the bounds."""
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        """Whether ``value`` lies in the closed interval."""
        return self.lower <= value <= self.upper


def confidence_interval_mean(
    sample_mean: float,
    sample_std_dev: float,
    sample_size: int,
    confidence_level: float = 0.95,
    population_size: int | None = None,
) -> ConfidenceInterval:
    """
    t-based confidence interval for a mean, ``mean +- t * SE`` with ``df = n - 1``.

    Parameters
    ----------
    sample_mean : float
    sample_std_dev : float
        Bessel-corrected sample standard deviation.
    sample_size : int
    confidence_level : float, default 0.95
    population_size : int, optional
        Size of the sampled finite population; when given, the standard
        error is multiplied by the finite population correction.

    Raises
    ------
    ValueError
        If ``sample_size <= 1`` or the confidence level is outside (0, 1).
    """
    if sample_size <= 1:
        raise ValueError("Sample size must be greater than 1")
    check_confidence_level(confidence_level)

    t = t_critical_value(sample_size - 1, 1 - confidence_level)
    se = standard_error_mean(sample_std_dev, sample_size)
    if population_size is not None:
        se *= finite_population_correction(sample_size, population_size)
    margin = t * se
    return ConfidenceInterval(
        lower=sample_mean - margin,
        upper=sample_mean + margin,
        point_estimate=sample_mean,
        margin_of_error=margin,
        confidence_level=confidence_level,
    )


def confidence_interval_proportion(
    successes: int, sample_size: int, confidence_level: float = 0.95
) -> ConfidenceInterval:
    """
    Normal-approximation (Wald) interval for a proportion, clamped to [0, 1].

    Raises
    ------
    ValueError
        If ``sample_size <= 0``, ``successes`` is outside ``[0, sample_size]``
        or the confidence level is outside (0, 1).
    """
    if sample_size <= 0:
        raise ValueError("Sample size must be positive")
    if not 0 <= successes <= sample_size:
        raise ValueError("Successes must be between 0 and sample size")
    check_confidence_level(confidence_level)

    proportion = successes / sample_size
    z = z_critical_value(1 - confidence_level)
    margin = z * standard_error_proportion(proportion, sample_size)
    return ConfidenceInterval(
        lower=max(0.0, proportion - margin),
        upper=min(1.0, proportion + margin),
        point_estimate=proportion,
        margin_of_error=margin,
        confidence_level=confidence_level,
    )
