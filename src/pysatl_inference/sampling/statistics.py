"""
Sample Statistics
=================

Descriptive statistics shared by the sampling strategies and the inference
engine. Every function accepts any sequence of numbers and returns plain
floats; empty input yields zeros rather than NaN.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def _as_array(values: ArrayLike) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(-1)


def mean(values: ArrayLike) -> float:
    """Arithmetic mean, 0 for empty input."""
    data = _as_array(values)
    if data.size == 0:
        return 0.0
    return float(np.mean(data))


def standard_deviation(values: ArrayLike) -> float:
    """Sample standard deviation with Bessel's correction, 0 for fewer than 2 values."""
    data = _as_array(values)
    if data.size < 2:
        return 0.0
    return float(np.std(data, ddof=1))


def population_standard_deviation(values: ArrayLike) -> float:
    """Population standard deviation (divisor ``n``), 0 for empty input."""
    data = _as_array(values)
    if data.size == 0:
        return 0.0
    return float(np.std(data))


def standard_error_mean(sample_std_dev: float, sample_size: int) -> float:
    """
    Standard error of the mean ``s / sqrt(n)``.

    Returns 0 for a non-positive sample size.
    """
    if sample_size <= 0:
        return 0.0
    return sample_std_dev / math.sqrt(sample_size)


@dataclass(frozen=True, slots=True)
class SampleStatistics:
    """
    Summary of a sample.

    Parameters
    ----------
    n : int
    mean : float
    std_dev : float
        Bessel-corrected standard deviation.
    standard_error : float
    min : float
    max : float
    """

    n: int
    mean: float
    std_dev: float
    standard_error: float
    min: float
    max: float


def calculate_sample_statistics(values: ArrayLike) -> SampleStatistics:
    """
    Summarise a sample.

    Returns
    -------
    SampleStatistics
        All fields are zero for empty input.
    """
    data = _as_array(values)
    n = int(data.size)
    if n == 0:
        return SampleStatistics(n=0, mean=0.0, std_dev=0.0, standard_error=0.0, min=0.0, max=0.0)

    sd = standard_deviation(data)
    return SampleStatistics(
        n=n,
        mean=mean(data),
        std_dev=sd,
        standard_error=standard_error_mean(sd, n),
        min=float(data.min()),
        max=float(data.max()),
    )
