"""
Population Sampling Strategies
==============================

Four ways of drawing a sample from a finite population:

- :class:`SimpleRandomSampling`: uniform selection without replacement.
- :class:`StratifiedSampling`: independent simple random samples per
  stratum, proportional or equal allocation.
- :class:`SystematicSampling`: every k-th element from a (random) start.
- :class:`ClusterSampling`: whole contiguous clusters chosen at random.

Each strategy is a frozen configuration record validated on construction;
``sample`` checks the population-dependent constraints and returns a
:class:`SampleResult` whose indices refer to the original population
ordering. Function wrappers with the same names in snake case are provided
for one-off calls.

Notes
-----
- Invalid sizes raise :class:`~pysatl_inference.exceptions.SamplingValidationError`;
  a request is never truncated into a partial sample, except that
  stratified allocations are capped at each stratum's size.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_inference.exceptions import SamplingValidationError
from pysatl_inference.rng import resolve_rng, uniform_index
from pysatl_inference.special import is_integral

from .statistics import mean, standard_deviation, standard_error_mean

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import ArrayLike

    from pysatl_inference.types import IndexArray, NumericArray, RandomSource

logger = logging.getLogger(__name__)


def _require_positive_integer(value: int, message: str) -> int:
    if not is_integral(value) or value <= 0:
        raise SamplingValidationError(message)
    return int(value)


def _as_population(population: ArrayLike) -> NumericArray:
    return np.asarray(population, dtype=np.float64).reshape(-1)


def _draw_without_replacement(size: int, count: int, rng: RandomSource) -> list[int]:
    """Pick ``count`` distinct indices from ``range(size)`` out of a shrinking pool."""
    available = list(range(size))
    chosen: list[int] = []
    for _ in range(count):
        j = uniform_index(rng, len(available))
        chosen.append(available[j])
        available[j] = available[-1]
        available.pop()
    return chosen


@dataclass(frozen=True, slots=True, eq=False)
class SampleResult:
    """
    Output of a sampling strategy.

    Parameters
    ----------
    indices : numpy.ndarray
        Positions of the selected elements in the original population.
    values : numpy.ndarray
        Selected values, aligned with ``indices``.
    mean : float
    standard_deviation : float
        Bessel-corrected.
    standard_error : float
        ``standard_deviation / sqrt(len(values))``.

    Raises
    ------
    ValueError
        If ``indices`` and ``values`` differ in length.
    """

    indices: IndexArray
    values: NumericArray
    mean: float
    standard_deviation: float
    standard_error: float

    def __post_init__(self) -> None:
        if len(self.indices) != len(self.values):
            raise ValueError("Sample indices and values must have the same length")

    @classmethod
    def from_selection(cls, indices: Sequence[int], values: ArrayLike) -> SampleResult:
        """Build a result and its summary statistics from selected indices and values."""
        index_array = np.asarray(indices, dtype=np.int64)
        value_array = np.asarray(values, dtype=np.float64).reshape(-1)
        sd = standard_deviation(value_array)
        return cls(
            indices=index_array,
            values=value_array,
            mean=mean(value_array),
            standard_deviation=sd,
            standard_error=standard_error_mean(sd, int(value_array.size)),
        )

    def __len__(self) -> int:
        return len(self.indices)


@dataclass(frozen=True, slots=True, eq=False)
class StratumConfig:
    """
    One partition of a stratified population.

    Parameters
    ----------
    name : str
    proportion : float
        Share of the combined population held by this stratum.
    values : numpy.ndarray
        Member values.
    """

    name: str
    proportion: float
    values: NumericArray

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _as_population(self.values))

    def __len__(self) -> int:
        return int(self.values.size)


@dataclass(frozen=True, slots=True)
class SimpleRandomSampling:
    """
    Simple random sampling without replacement.

    Parameters
    ----------
    sample_size : int
        Number of elements to select.
    """

    sample_size: int

    def __post_init__(self) -> None:
        _require_positive_integer(self.sample_size, "Sample size must be a positive integer")

    def sample(self, population: ArrayLike, rng: RandomSource | None = None) -> SampleResult:
        """
        Select ``sample_size`` distinct elements uniformly at random.

        Raises
        ------
        SamplingValidationError
            If the sample size exceeds the population size.
        """
        data = _as_population(population)
        if self.sample_size > data.size:
            raise SamplingValidationError("Sample size cannot exceed population size")

        indices = _draw_without_replacement(int(data.size), int(self.sample_size), resolve_rng(rng))
        return SampleResult.from_selection(indices, data[indices])


@dataclass(frozen=True, slots=True)
class StratifiedSampling:
    """
    Stratified sampling over pre-partitioned strata.

    Parameters
    ----------
    total_sample_size : int
        Requested size of the combined sample.
    proportional : bool
        Allocate ``round(proportion * total)`` per stratum (at least one for
        a non-empty stratum); otherwise ``total // k`` per stratum with the
        remainder on the last one.
    """

    total_sample_size: int
    proportional: bool = True

    def __post_init__(self) -> None:
        _require_positive_integer(self.total_sample_size, "Sample size must be a positive integer")

    def allocate(self, strata: Sequence[StratumConfig]) -> list[int]:
        """
        Per-stratum sample sizes, each capped at the stratum size.

        Raises
        ------
        SamplingValidationError
            If there are no strata.
        """
        if not strata:
            raise SamplingValidationError("At least one stratum is required")

        total = int(self.total_sample_size)
        sizes: list[int] = []
        for i, stratum in enumerate(strata):
            if self.proportional:
                size = math.floor(stratum.proportion * total + 0.5)
                if size == 0 and len(stratum) > 0:
                    size = 1
            else:
                size = total // len(strata)
                if i == len(strata) - 1:
                    size += total % len(strata)
            sizes.append(min(size, len(stratum)))
        return sizes

    def sample(
        self, strata: Sequence[StratumConfig], rng: RandomSource | None = None
    ) -> SampleResult:
        """
        Sample each stratum independently and concatenate the results.

        Indices are offset by the sizes of the preceding strata so they refer
        to the concatenation of all strata in the given order.

        Raises
        ------
        SamplingValidationError
            If there are no strata or the total exceeds the combined
            population.
        """
        sizes = self.allocate(strata)
        combined = sum(len(stratum) for stratum in strata)
        if self.total_sample_size > combined:
            raise SamplingValidationError("Sample size cannot exceed population size")
        logger.debug("Stratified allocation %s over %d strata", sizes, len(strata))

        source = resolve_rng(rng)
        indices: list[int] = []
        values: list[NumericArray] = []
        offset = 0
        for stratum, size in zip(strata, sizes, strict=True):
            if size > 0:
                chosen = _draw_without_replacement(len(stratum), size, source)
                indices.extend(offset + i for i in chosen)
                values.append(stratum.values[chosen])
            offset += len(stratum)

        selected = np.concatenate(values) if values else np.empty(0, dtype=np.float64)
        return SampleResult.from_selection(indices, selected)


@dataclass(frozen=True, slots=True)
class SystematicSampling:
    """
    Systematic sampling: every ``k = N // n``-th element.

    Parameters
    ----------
    sample_size : int
    random_start : bool
        Draw the start offset uniformly from ``[0, k)``; start at 0 otherwise.
    """

    sample_size: int
    random_start: bool = True

    def __post_init__(self) -> None:
        _require_positive_integer(self.sample_size, "Sample size must be a positive integer")

    def sample(self, population: ArrayLike, rng: RandomSource | None = None) -> SampleResult:
        """
        Select every k-th element.

        Raises
        ------
        SamplingValidationError
            If the sample size exceeds the population size.
        """
        data = _as_population(population)
        size = int(data.size)
        if self.sample_size > size:
            raise SamplingValidationError("Sample size cannot exceed population size")

        k = size // int(self.sample_size)
        start = uniform_index(resolve_rng(rng), k) if self.random_start else 0
        indices = list(range(start, size, k))[: int(self.sample_size)]
        logger.debug("Systematic sample with interval %d starting at %d", k, start)
        return SampleResult.from_selection(indices, data[indices])


@dataclass(frozen=True, slots=True)
class ClusterSampling:
    """
    Cluster sampling over contiguous clusters.

    The population is cut into ``num_clusters`` runs of
    ``ceil(N / num_clusters)`` elements (the last ones may be shorter or
    empty); ``clusters_to_select`` of them are drawn without replacement and
    every member is included.

    Parameters
    ----------
    num_clusters : int
    clusters_to_select : int
    """

    num_clusters: int
    clusters_to_select: int

    def __post_init__(self) -> None:
        _require_positive_integer(self.num_clusters, "Number of clusters must be a positive integer")
        _require_positive_integer(
            self.clusters_to_select, "Clusters to select must be a positive integer"
        )
        if self.clusters_to_select > self.num_clusters:
            raise SamplingValidationError("Cannot select more clusters than available")

    def sample(self, population: ArrayLike, rng: RandomSource | None = None) -> SampleResult:
        """
        Select whole clusters.

        Raises
        ------
        SamplingValidationError
            If there are more clusters than population elements.
        """
        data = _as_population(population)
        size = int(data.size)
        if self.num_clusters > size:
            raise SamplingValidationError("Cannot have more clusters than population size")

        cluster_size = math.ceil(size / self.num_clusters)
        selected = _draw_without_replacement(
            int(self.num_clusters), int(self.clusters_to_select), resolve_rng(rng)
        )
        logger.debug("Selected clusters %s of size %d", selected, cluster_size)

        indices: list[int] = []
        for cluster in selected:
            indices.extend(range(cluster * cluster_size, min((cluster + 1) * cluster_size, size)))
        return SampleResult.from_selection(indices, data[indices])


def simple_random_sample(
    population: ArrayLike, sample_size: int, rng: RandomSource | None = None
) -> SampleResult:
    """Shortcut for ``SimpleRandomSampling(sample_size).sample(population, rng)``."""
    return SimpleRandomSampling(sample_size).sample(population, rng)


def stratified_sample(
    strata: Sequence[StratumConfig],
    total_sample_size: int,
    proportional: bool = True,
    rng: RandomSource | None = None,
) -> SampleResult:
    """Shortcut for :meth:`StratifiedSampling.sample`."""
    return StratifiedSampling(total_sample_size, proportional).sample(strata, rng)


def systematic_sample(
    population: ArrayLike,
    sample_size: int,
    random_start: bool = True,
    rng: RandomSource | None = None,
) -> SampleResult:
    """Shortcut for :meth:`SystematicSampling.sample`."""
    return SystematicSampling(sample_size, random_start).sample(population, rng)


def cluster_sample(
    population: ArrayLike,
    num_clusters: int,
    clusters_to_select: int,
    rng: RandomSource | None = None,
) -> SampleResult:
    """Shortcut for :meth:`ClusterSampling.sample`."""
    return ClusterSampling(num_clusters, clusters_to_select).sample(population, rng)
