"""
Bootstrap Resampling
====================

Nonparametric bootstrap of an arbitrary sample statistic.

Notes
-----
- Resamples are drawn with replacement and have the size of the original
  sample.
- The percentile interval reads the sorted resample statistics at
  ``floor((alpha / 2) B)`` and ``floor((1 - alpha / 2) B) - 1``, both clamped
  into ``[0, B - 1]``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_inference.exceptions import SamplingValidationError
from pysatl_inference.rng import resolve_rng, uniform_index
from pysatl_inference.sampling.statistics import mean
from pysatl_inference.special import is_integral

from .intervals import ConfidenceInterval, check_confidence_level

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_inference.types import NumericArray, RandomSource

logger = logging.getLogger(__name__)

type Statistic = Callable[[NumericArray], float]


def bootstrap_resample(sample: ArrayLike, rng: RandomSource | None = None) -> NumericArray:
    """
    Draw one resample with replacement, the same size as ``sample``.

    Returns an empty array for an empty sample.
    """
    data = np.asarray(sample, dtype=np.float64).reshape(-1)
    n = int(data.size)
    if n == 0:
        return data
    source = resolve_rng(rng)
    return data[[uniform_index(source, n) for _ in range(n)]]


@dataclass(frozen=True, slots=True)
class BootstrapConfig:
    """
    Resampling settings.

    Parameters
    ----------
    iterations : int
        Number of resamples ``B``.
    confidence_level : float, default 0.95
        Coverage of the percentile interval.
    """

    iterations: int
    confidence_level: float = 0.95

    def __post_init__(self) -> None:
        if not is_integral(self.iterations) or self.iterations <= 0:
            raise SamplingValidationError("Iterations must be a positive integer")
        check_confidence_level(self.confidence_level)

    def percentile_indices(self) -> tuple[int, int]:
        """Positions of the interval bounds in the sorted resample statistics."""
        b = int(self.iterations)
        alpha = 1 - self.confidence_level
        lower = min(max(math.floor(alpha / 2 * b), 0), b - 1)
        upper = min(max(math.floor((1 - alpha / 2) * b) - 1, 0), b - 1)
        return lower, max(upper, lower)


@dataclass(frozen=True, slots=True, eq=False)
class BootstrapResult:
    """
    Resampling-based estimate of a statistic's sampling distribution.

    Parameters
    ----------
    bootstrap_statistics : numpy.ndarray
        Statistic of each resample, sorted ascending; length ``B``.
    standard_error : float
        Standard deviation of ``bootstrap_statistics`` (divisor ``B - 1``;
        0 when ``B == 1``).
    percentile_ci : ConfidenceInterval
        Percentile interval with the original statistic as point estimate.
    original_statistic : float
        Statistic of the original sample.
    """

    bootstrap_statistics: NumericArray
    standard_error: float
    percentile_ci: ConfidenceInterval
    original_statistic: float


def bootstrap(
    sample: ArrayLike,
    iterations: int,
    statistic: Statistic = mean,
    confidence_level: float = 0.95,
    rng: RandomSource | None = None,
) -> BootstrapResult:
    """
    Bootstrap a statistic.

    Parameters
    ----------
    sample : ArrayLike
        Observed data.
    iterations : int
        Number of resamples.
    statistic : Callable[[numpy.ndarray], float], default :func:`mean`
        Statistic computed on the sample and on each resample.
    confidence_level : float, default 0.95
    rng : RandomSource, optional

    Returns
    -------
    BootstrapResult

    Raises
    ------
    SamplingValidationError
        If the sample is empty or ``iterations`` is not a positive integer.
    ValueError
        If the confidence level is outside (0, 1).
    """
    data = np.asarray(sample, dtype=np.float64).reshape(-1)
    if data.size == 0:
        raise SamplingValidationError("Sample cannot be empty")
    config = BootstrapConfig(iterations, confidence_level)

    source = resolve_rng(rng)
    original = float(statistic(data))
    b = int(config.iterations)
    logger.debug("Bootstrapping %d resamples of size %d", b, data.size)

    statistics = np.sort(
        np.array([statistic(bootstrap_resample(data, source)) for _ in range(b)], dtype=np.float64)
    )
    standard_error = float(np.std(statistics, ddof=1)) if b > 1 else 0.0

    lower_index, upper_index = config.percentile_indices()
    lower = float(statistics[lower_index])
    upper = float(statistics[upper_index])
    interval = ConfidenceInterval(
        lower=lower,
        upper=upper,
        point_estimate=original,
        margin_of_error=(upper - lower) / 2,
        confidence_level=config.confidence_level,
    )
    return BootstrapResult(
        bootstrap_statistics=statistics,
        standard_error=standard_error,
        percentile_ci=interval,
        original_statistic=original,
    )
