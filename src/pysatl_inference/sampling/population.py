"""
Synthetic populations for sampling experiments.

Populations are drawn from the distribution engine through
:mod:`pysatl_inference.dispatch`; a binomial population holds Bernoulli
0/1 outcomes.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from pysatl_inference.dispatch import DistributionSpec, generate_samples
from pysatl_inference.exceptions import SamplingValidationError
from pysatl_inference.special import is_integral

from .strategies import StratumConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from numpy.typing import ArrayLike

    from pysatl_inference.types import NumericArray, RandomSource

logger = logging.getLogger(__name__)


class PopulationDistribution(StrEnum):
    NORMAL = "normal"
    UNIFORM = "uniform"
    EXPONENTIAL = "exponential"
    BINOMIAL = "binomial"


_DEFAULT_PARAMS: dict[PopulationDistribution, dict[str, float]] = {
    PopulationDistribution.NORMAL: {"mu": 0.0, "sigma": 1.0},
    PopulationDistribution.UNIFORM: {"a": 0.0, "b": 1.0},
    PopulationDistribution.EXPONENTIAL: {"lambda_": 1.0},
    PopulationDistribution.BINOMIAL: {"p": 0.5},
}


@dataclass(frozen=True, slots=True)
class PopulationConfig:
    """
    Description of a synthetic population.

    Parameters
    ----------
    size : int
        Number of population elements.
    distribution : PopulationDistribution
        Generating distribution; plain strings are coerced.
    params : Mapping[str, float]
        Overrides of the defaults ``mu=0, sigma=1`` (normal), ``a=0, b=1``
        (uniform), ``lambda_=1`` (exponential) and ``p=0.5`` (binomial).
    """

    size: int
    distribution: PopulationDistribution
    params: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "distribution", PopulationDistribution(self.distribution))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def resolved_params(self) -> dict[str, float]:
        """
        Defaults for the distribution overlaid with the configured values.

        Raises
        ------
        SamplingValidationError
            If a configured name is not a parameter of the distribution.
        """
        defaults = _DEFAULT_PARAMS[self.distribution]
        for name in self.params:
            if name not in defaults:
                raise SamplingValidationError(
                    f"Unknown parameter {name} for {self.distribution} population"
                )
        return {**defaults, **self.params}

    def spec(self) -> DistributionSpec:
        """Distribution each population element is drawn from."""
        params = self.resolved_params()
        match self.distribution:
            case PopulationDistribution.NORMAL:
                return DistributionSpec.normal(params["mu"], params["sigma"])
            case PopulationDistribution.UNIFORM:
                return DistributionSpec.uniform(params["a"], params["b"])
            case PopulationDistribution.EXPONENTIAL:
                return DistributionSpec.exponential(params["lambda_"])
            case PopulationDistribution.BINOMIAL:
                return DistributionSpec.binomial(1, params["p"])
        raise ValueError(f"Unsupported population distribution {self.distribution}")


def generate_population(config: PopulationConfig, rng: RandomSource | None = None) -> NumericArray:
    """
    Draw ``config.size`` independent values.

    Raises
    ------
    SamplingValidationError
        If the size is not a positive integer.
    ParameterDomainError
        If the distribution parameters are invalid.
    """
    if not is_integral(config.size) or config.size <= 0:
        raise SamplingValidationError("Population size must be a positive integer")
    logger.debug("Generating %s population of size %d", config.distribution, config.size)
    return generate_samples(config.spec(), int(config.size), rng)


def create_strata(population: ArrayLike, num_strata: int) -> list[StratumConfig]:
    """
    Split a population into strata of consecutive sorted values.

    The sorted population is cut into ``num_strata`` chunks of
    ``ceil(N / num_strata)`` values (trailing chunks may be shorter or
    empty), named ``"Stratum 1"``, ``"Stratum 2"``, ...

    Raises
    ------
    SamplingValidationError
        If ``num_strata`` is not a positive integer or the population is
        empty.
    """
    if not is_integral(num_strata) or num_strata <= 0:
        raise SamplingValidationError("Number of strata must be a positive integer")
    ordered = np.sort(np.asarray(population, dtype=np.float64).reshape(-1))
    total = int(ordered.size)
    if total == 0:
        raise SamplingValidationError("Population cannot be empty")

    chunk = math.ceil(total / num_strata)
    strata: list[StratumConfig] = []
    for i in range(int(num_strata)):
        values = ordered[i * chunk : min((i + 1) * chunk, total)]
        strata.append(
            StratumConfig(name=f"Stratum {i + 1}", proportion=values.size / total, values=values)
        )
    return strata
