"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families, and the closed-form moment record they
report.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_inference.distributions.distribution import Distribution
from pysatl_inference.families.registry import ParametricFamilyRegister
from pysatl_inference.types import CharacteristicName, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_inference.distributions.computation import AnalyticalComputation
    from pysatl_inference.distributions.sampling import ArraySample
    from pysatl_inference.distributions.strategies import SamplingStrategy
    from pysatl_inference.families.parametric_family import ParametricFamily
    from pysatl_inference.families.parametrizations import Parametrization
    from pysatl_inference.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        RandomSource,
    )


@dataclass(frozen=True, slots=True)
class DistributionStats:
    """
    Closed-form moments of a distribution.

    Parameters
    ----------
    mean : float
    variance : float
    std_dev : float
    mode : float, list[float] or None
        ``None`` when every point of the support is a mode (uniform).
    skewness : float
    """

    mean: float
    variance: float
    std_dev: float
    mode: float | list[float] | None
    skewness: float


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation and sampling.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : EuclideanDistributionType
        Type of this distribution.
    parametrization : Parametrization
        Validated parameter values for this distribution.
    """

    family_name: str
    _distribution_type: EuclideanDistributionType
    parametrization: Parametrization
    _analytical_cache: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = (
        field(default=None, init=False, repr=False, compare=False)
    )

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def is_discrete(self) -> bool:
        """Whether the distribution lives on the integers."""
        return self._distribution_type.kind == Kind.DISCRETE

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values as a dictionary."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parametrization.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parametrization)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance.
        """
        if self._analytical_cache is None:
            self._analytical_cache = self.family._build_analytical_computations(
                self.parametrization
            )
        return self._analytical_cache

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    def pdf(self, x: float) -> float:
        """Density for continuous families, mass for discrete ones."""
        name = CharacteristicName.PMF if self.is_discrete else CharacteristicName.PDF
        return float(self.calculate_characteristic(name, x))

    def cdf(self, x: float) -> float:
        """Cumulative probability ``P(X <= x)``."""
        return float(self.calculate_characteristic(CharacteristicName.CDF, x))

    def ppf(self, p: float) -> float:
        """Quantile function (inverse of :meth:`cdf`)."""
        return float(self.calculate_characteristic(CharacteristicName.PPF, p))

    def stats(self) -> DistributionStats:
        """
        Closed-form moments of this distribution.

        Returns
        -------
        DistributionStats
            Mean, variance, standard deviation, mode and skewness derived
            from the parameters only.
        """
        variance = float(self.calculate_characteristic(CharacteristicName.VAR, None))
        return DistributionStats(
            mean=float(self.calculate_characteristic(CharacteristicName.MEAN, None)),
            variance=variance,
            std_dev=math.sqrt(variance),
            mode=self.calculate_characteristic(CharacteristicName.MODE, None),
            skewness=float(self.calculate_characteristic(CharacteristicName.SKEW, None)),
        )

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> ArraySample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        rng : RandomSource, optional
            Source of uniform variates; a fresh NumPy generator if omitted.
        **options : Any
            Additional options for sampling.

        Returns
        -------
        ArraySample
            Generated samples.
        """
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)
