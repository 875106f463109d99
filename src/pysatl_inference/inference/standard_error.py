"""
Standard errors and the finite population correction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_inference.sampling.statistics import standard_error_mean


def standard_error_proportion(proportion: float, sample_size: int) -> float:
    """
    Standard error of a sample proportion ``sqrt(p (1 - p) / n)``.

    Returns 0 for a non-positive sample size.

    Raises
    ------
    ValueError
        If ``proportion`` is outside [0, 1].
    """
    if sample_size <= 0:
        return 0.0
    if not 0.0 <= proportion <= 1.0:
        raise ValueError("Proportion must be between 0 and 1")
    return math.sqrt(proportion * (1 - proportion) / sample_size)


def finite_population_correction(sample_size: int, population_size: int) -> float:
    """
    Correction factor ``sqrt((N - n) / (N - 1))`` for sampling without replacement.

    Returns 0 when ``N <= 1`` or ``n >= N``: a census has no sampling error.
    """
    if population_size <= 1 or sample_size >= population_size:
        return 0.0
    return math.sqrt((population_size - sample_size) / (population_size - 1))


__all__ = [
    "finite_population_correction",
    "standard_error_mean",
    "standard_error_proportion",
]
