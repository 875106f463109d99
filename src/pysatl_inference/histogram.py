"""
Histogram Binning
=================

Equal-width binning of a numeric sample.

Notes
-----
- The default bin count follows Sturges' rule ``ceil(log2(n) + 1)``,
  clamped to ``[MIN_STURGES_BINS, MAX_STURGES_BINS]``.
- Densities are normalised so that ``sum(density * width) == 1``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_inference.special import is_integral

if TYPE_CHECKING:
    from collections.abc import Iterable

MIN_STURGES_BINS = 3
MAX_STURGES_BINS = 30


@dataclass(frozen=True, slots=True)
class HistogramBin:
    """
    One interval of a binned sample.

    Parameters
    ----------
    start : float
        Left edge.
    end : float
        Right edge.
    count : int
        Number of values assigned to the bin.
    density : float
        ``count / (n * width)``.
    """

    start: float
    end: float
    count: int
    density: float


def sturges_bin_count(n: int) -> int:
    """Sturges' rule ``ceil(log2(n) + 1)`` clamped to the supported range."""
    k = math.ceil(math.log2(n) + 1)
    return min(max(k, MIN_STURGES_BINS), MAX_STURGES_BINS)


def create_histogram(data: Iterable[float], bin_count: int | None = None) -> list[HistogramBin]:
    """
    Bin a sample into equal-width intervals over ``[min, max]``.

    Parameters
    ----------
    data : Iterable[float]
        Sample values.
    bin_count : int, optional
        Number of bins; Sturges' rule when omitted.

    Returns
    -------
    list[HistogramBin]
        Bins ordered left to right. Empty for empty data; a single
        zero-width bin with density 1 when every value is identical.

    Raises
    ------
    ValueError
        If ``bin_count`` is not a positive integer.
    """
    if bin_count is not None and (not is_integral(bin_count) or bin_count <= 0):
        raise ValueError("Bin count must be a positive integer")

    values = np.asarray(list(data), dtype=np.float64)
    n = int(values.size)
    if n == 0:
        return []

    low = float(values.min())
    high = float(values.max())
    if low == high:
        return [HistogramBin(start=low, end=high, count=n, density=1.0)]

    k = sturges_bin_count(n) if bin_count is None else int(bin_count)
    width = (high - low) / k

    indices = np.floor((values - low) / width).astype(np.int64)
    # the maximum lands exactly on the right edge of the last bin
    indices = np.minimum(indices, k - 1)
    counts = np.bincount(indices, minlength=k)

    return [
        HistogramBin(
            start=low + i * width,
            end=low + (i + 1) * width,
            count=int(counts[i]),
            density=float(counts[i]) / (n * width),
        )
        for i in range(k)
    ]
