"""
Unified Distribution Dispatch
=============================

Single entry point for every operation on a tagged distribution
specification. A :class:`DistributionSpec` names a family and its parameter
values; the functions below resolve it through the family registry and
delegate to the family's analytical characteristics and sampling strategy.

Adding a family means registering it in
:func:`~pysatl_inference.families.configure_families_register` and adding
one arm to :func:`get_suggested_range`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import TYPE_CHECKING

from pysatl_inference.families.configuration import configure_families_register
from pysatl_inference.families.parametrizations import ParameterIssue
from pysatl_inference.families.registry import ParametricFamilyRegister
from pysatl_inference.types import FamilyName, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_inference.families.distribution import (
        DistributionStats,
        ParametricFamilyDistribution,
    )
    from pysatl_inference.families.parametric_family import ParametricFamily
    from pysatl_inference.types import NumericArray, RandomSource


def _family(name: str) -> ParametricFamily:
    configure_families_register()
    return ParametricFamilyRegister.get(name)


@dataclass(frozen=True, slots=True)
class DistributionSpec:
    """
    A family tag together with its parameter values.

    Parameters
    ----------
    family : FamilyName
        Family tag; plain strings are coerced.
    params : Mapping[str, float]
        Parameter values keyed by parameter name.
    parametrization : str, optional
        Parametrization the values belong to (defaults to the family base).

    Notes
    -----
    Construction does not validate parameter values; use
    :func:`validate_params` for non-throwing checks. Every operation
    validates eagerly and raises
    :class:`~pysatl_inference.exceptions.ParameterDomainError`.
    """

    family: FamilyName
    params: Mapping[str, float] = field(default_factory=dict)
    parametrization: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", FamilyName(self.family))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def normal(cls, mu: float = 0.0, sigma: float = 1.0) -> DistributionSpec:
        return cls(FamilyName.NORMAL, {"mu": mu, "sigma": sigma})

    @classmethod
    def binomial(cls, n: int, p: float) -> DistributionSpec:
        return cls(FamilyName.BINOMIAL, {"n": n, "p": p})

    @classmethod
    def poisson(cls, lambda_: float) -> DistributionSpec:
        return cls(FamilyName.POISSON, {"lambda_": lambda_})

    @classmethod
    def exponential(cls, lambda_: float) -> DistributionSpec:
        return cls(FamilyName.EXPONENTIAL, {"lambda_": lambda_})

    @classmethod
    def uniform(cls, a: float = 0.0, b: float = 1.0) -> DistributionSpec:
        return cls(FamilyName.UNIFORM, {"a": a, "b": b})

    @property
    def is_discrete(self) -> bool:
        return is_discrete_distribution(self.family)

    def distribution(self) -> ParametricFamilyDistribution:
        """
        Build the validated distribution instance for this specification.

        Raises
        ------
        ParameterDomainError
            If the parameter values violate a family constraint.
        TypeError
            If parameter names do not match the parametrization.
        """
        return _family(self.family).distribution(self.parametrization, **self.params)


def is_discrete_distribution(family: FamilyName | str) -> bool:
    """Whether the family lives on the integers (binomial, Poisson)."""
    return _family(family).distr_type.kind == Kind.DISCRETE


def get_pdf(spec: DistributionSpec, x: float) -> float:
    """
    Density (continuous) or mass (discrete) at ``x``.

    For discrete families ``x`` is rounded half-up to the nearest integer
    first.
    """
    distribution = spec.distribution()
    if distribution.is_discrete and math.isfinite(x):
        x = math.floor(x + 0.5)
    return distribution.pdf(x)


def get_cdf(spec: DistributionSpec, x: float) -> float:
    """Cumulative probability ``P(X <= x)``."""
    return spec.distribution().cdf(x)


def get_quantile(spec: DistributionSpec, p: float) -> float:
    """
    Quantile function, the smallest ``x`` with ``cdf(x) >= p``.

    Raises
    ------
    ValueError
        If probability is outside [0, 1].
    """
    return spec.distribution().ppf(p)


def sample(spec: DistributionSpec, rng: RandomSource | None = None) -> float:
    """Draw a single value."""
    return float(spec.distribution().sample(1, rng).array[0])


def generate_samples(
    spec: DistributionSpec, n: int, rng: RandomSource | None = None
) -> NumericArray:
    """
    Draw ``n`` independent values.

    Returns
    -------
    numpy.ndarray
        1D float array of shape ``(n,)``.

    Raises
    ------
    SamplingValidationError
        If ``n`` is negative or not an integer.
    """
    return spec.distribution().sample(n, rng).array


def get_distribution_stats(spec: DistributionSpec) -> DistributionStats:
    """Closed-form mean, variance, standard deviation, mode and skewness."""
    return spec.distribution().stats()


def validate_params(spec: DistributionSpec) -> list[ParameterIssue]:
    """
    Collect parameter problems without raising.

    Returns
    -------
    list[ParameterIssue]
        ``(param, message)`` records suitable for form feedback; empty when
        the parameters are valid. Missing and unknown parameter names are
        reported before any constraint is checked.
    """
    family = _family(spec.family)
    name = spec.parametrization or family.base_parametrization_name
    expected = [f.name for f in fields(family.get_parametrization(name))]

    missing = [
        ParameterIssue(param, f"Parameter {param} is required")
        for param in expected
        if param not in spec.params
    ]
    unknown = [
        ParameterIssue(param, f"Unknown parameter {param}")
        for param in spec.params
        if param not in expected
    ]
    if missing or unknown:
        return missing + unknown

    parameters = family.make_parameters(name, **spec.params)
    return parameters.issues()


def is_valid_params(spec: DistributionSpec) -> bool:
    return not validate_params(spec)


def get_suggested_range(spec: DistributionSpec) -> tuple[float, float]:
    """
    X-axis range covering the bulk of the distribution.

    Returns
    -------
    tuple[float, float]
        ``(lower, upper)``: ``mean +- 4 sd`` for the normal family, the full
        support ``[0, n]`` for binomial, ``[0, mean + 4 sd]`` for Poisson
        (rounded up) and exponential, and ``[a, b]`` padded by 10% of its
        width on each side for uniform.
    """
    distribution = spec.distribution()
    stats = distribution.stats()
    base = distribution.base_parameters.parameters

    match spec.family:
        case FamilyName.NORMAL:
            return stats.mean - 4 * stats.std_dev, stats.mean + 4 * stats.std_dev
        case FamilyName.BINOMIAL:
            return 0.0, float(base["n"])
        case FamilyName.POISSON:
            return 0.0, float(math.ceil(stats.mean + 4 * stats.std_dev))
        case FamilyName.EXPONENTIAL:
            return 0.0, stats.mean + 4 * stats.std_dev
        case FamilyName.UNIFORM:
            padding = (base["b"] - base["a"]) * 0.1
            return base["a"] - padding, base["b"] + padding
    raise ValueError(f"No suggested range for family {spec.family}")


def get_discrete_x_values(spec: DistributionSpec) -> list[int]:
    """Integers spanning :func:`get_suggested_range`, starting at 0 or above."""
    lower, upper = get_suggested_range(spec)
    return list(range(max(0, math.floor(lower)), math.ceil(upper) + 1))


def probability_less_than_or_equal(spec: DistributionSpec, x: float) -> float:
    """``P(X <= x)``."""
    return get_cdf(spec, x)


def probability_less_than(spec: DistributionSpec, x: float) -> float:
    """``P(X < x)``; ``P(X <= x - 1)`` for discrete families."""
    if spec.is_discrete:
        return get_cdf(spec, x - 1)
    return get_cdf(spec, x)


def probability_greater_than_or_equal(spec: DistributionSpec, x: float) -> float:
    """``P(X >= x)``; ``1 - P(X <= x - 1)`` for discrete families."""
    if spec.is_discrete:
        return 1 - get_cdf(spec, x - 1)
    return 1 - get_cdf(spec, x)


def probability_greater_than(spec: DistributionSpec, x: float) -> float:
    """``P(X > x)``."""
    return 1 - get_cdf(spec, x)


def probability_between(spec: DistributionSpec, a: float, b: float) -> float:
    """
    ``P(a <= X <= b)``, zero when ``a > b``.

    Discrete families include the lower endpoint's mass by subtracting
    ``cdf(a - 1)``.
    """
    if a > b:
        return 0.0
    if spec.is_discrete:
        return get_cdf(spec, b) - get_cdf(spec, a - 1)
    return get_cdf(spec, b) - get_cdf(spec, a)


__all__ = [
    "DistributionSpec",
    "is_discrete_distribution",
    "get_pdf",
    "get_cdf",
    "get_quantile",
    "sample",
    "generate_samples",
    "get_distribution_stats",
    "validate_params",
    "is_valid_params",
    "get_suggested_range",
    "get_discrete_x_values",
    "probability_less_than_or_equal",
    "probability_less_than",
    "probability_greater_than_or_equal",
    "probability_greater_than",
    "probability_between",
]
