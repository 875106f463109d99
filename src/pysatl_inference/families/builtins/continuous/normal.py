"""
Normal distribution family implementation.

Contains the standard normal helpers used across the engine and the Normal
family with mean-std and mean-precision parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_inference.distributions.strategies import DirectSamplingStrategy
from pysatl_inference.exceptions import ParameterDomainError
from pysatl_inference.families.builtins._checks import check_probability
from pysatl_inference.families.parametric_family import ParametricFamily
from pysatl_inference.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_inference.families.registry import ParametricFamilyRegister
from pysatl_inference.rng import resolve_rng
from pysatl_inference.special import erf
from pysatl_inference.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_inference.types import RandomSource

SQRT_2 = math.sqrt(2.0)
SQRT_2_PI = math.sqrt(2.0 * math.pi)

# Abramowitz and Stegun 26.2.23, |error| < 4.5e-4
_Q_C = (2.515517, 0.802853, 0.010328)
_Q_D = (1.432788, 0.189269, 0.001308)


def standard_normal_pdf(z: float) -> float:
    """Standard normal density ``exp(-z^2 / 2) / sqrt(2 pi)``."""
    return math.exp(-0.5 * z * z) / SQRT_2_PI


def standard_normal_cdf(z: float) -> float:
    """Standard normal CDF ``0.5 * (1 + erf(z / sqrt(2)))``."""
    return 0.5 * (1.0 + erf(z / SQRT_2))


def standard_normal_quantile(p: float) -> float:
    """
    Inverse of the standard normal CDF.

    Uses the rational approximation 26.2.23 of Abramowitz and Stegun on the
    smaller tail ``q = min(p, 1 - p)`` and restores the sign afterwards.

    Parameters
    ----------
    p : float
        Probability.

    Returns
    -------
    float
        ``z`` with ``Phi(z) ~= p``; ``-inf`` for ``p <= 0`` and ``inf`` for
        ``p >= 1``.
    """
    if p <= 0:
        return -math.inf
    if p >= 1:
        return math.inf

    sign = -1.0 if p < 0.5 else 1.0
    q = p if p < 0.5 else 1.0 - p

    c0, c1, c2 = _Q_C
    d1, d2, d3 = _Q_D
    t = math.sqrt(-2.0 * math.log(q))
    c = t - (c0 + c1 * t + c2 * t * t) / (1.0 + d1 * t + d2 * t * t + d3 * t * t * t)
    return sign * c


def _check_sigma(sigma: float) -> None:
    if not sigma > 0:
        raise ParameterDomainError("Normal distribution requires sigma > 0")


def normal_pdf(x: float, mu: float, sigma: float) -> float:
    """Normal density ``phi((x - mu) / sigma) / sigma``."""
    _check_sigma(sigma)
    return standard_normal_pdf((x - mu) / sigma) / sigma


def normal_cdf(x: float, mu: float, sigma: float) -> float:
    """Normal CDF ``Phi((x - mu) / sigma)``."""
    _check_sigma(sigma)
    return standard_normal_cdf((x - mu) / sigma)


def normal_quantile(p: float, mu: float, sigma: float) -> float:
    """
    Normal quantile ``mu + sigma * Phi^-1(p)``.

    Raises
    ------
    ParameterDomainError
        If ``sigma <= 0``.
    ValueError
        If probability is outside [0, 1].
    """
    _check_sigma(sigma)
    check_probability(p)
    return mu + sigma * standard_normal_quantile(p)


def sample_normal(mu: float, sigma: float, rng: RandomSource | None = None) -> float:
    """
    Draw one normal variate with the Box-Muller transform.

    The first uniform is taken from ``(0, 1]`` so its logarithm is finite.
    """
    _check_sigma(sigma)
    source = resolve_rng(rng)
    u1 = 1.0 - source.random()
    u2 = source.random()
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
    return mu + sigma * z


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : float
            Point at which to evaluate the probability density function
        """
        parameters = cast(_MeanStd, parameters)
        return normal_pdf(x, parameters.mu, parameters.sigma)

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function for normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return normal_cdf(x, parameters.mu, parameters.sigma)

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function (inverse CDF) for normal distribution.

        Returns
        -------
        float
            Quantile corresponding to probability p.
            If p is 0 or 1, then the result is -inf and inf correspondingly
        """
        parameters = cast(_MeanStd, parameters)
        return normal_quantile(p, parameters.mu, parameters.sigma)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.sigma**2

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of normal distribution (equal to the mean)."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def skew_func(_1: Parametrization, _2: Any) -> int:
        """Skewness of normal distribution (always 0)."""
        return 0

    def draw(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_MeanStd, parameters)
        return sample_normal(parameters.mu, parameters.sigma, rng)

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SKEW: skew_func,
        },
        sampling_strategy=DirectSamplingStrategy(draw),
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(
            description="sigma > 0",
            param="sigma",
            message="Standard deviation must be positive",
        )
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0", param="tau", message="Precision must be positive")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma = math.sqrt(1 / self.tau)
            return _MeanStd(mu=self.mu, sigma=sigma)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Normal)
