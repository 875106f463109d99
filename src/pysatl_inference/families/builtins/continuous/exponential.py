"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

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
from pysatl_inference.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_inference.types import RandomSource


def _check_rate(lambda_: float) -> None:
    if not lambda_ > 0:
        raise ParameterDomainError("Exponential distribution requires lambda > 0")


def exponential_pdf(x: float, lambda_: float) -> float:
    """Exponential density ``lambda * exp(-lambda * x)`` for ``x >= 0``, else 0."""
    _check_rate(lambda_)
    if x < 0:
        return 0.0
    return lambda_ * math.exp(-lambda_ * x)


def exponential_cdf(x: float, lambda_: float) -> float:
    """Exponential CDF ``1 - exp(-lambda * x)`` for ``x >= 0``, else 0."""
    _check_rate(lambda_)
    if x < 0:
        return 0.0
    return 1.0 - math.exp(-lambda_ * x)


def exponential_quantile(p: float, lambda_: float) -> float:
    """
    Exponential quantile.

    Parameters
    ----------
    p : float
        Probability from [0, 1]
    lambda_ : float
        Rate parameter

    Returns
    -------
    float
        - For p = 0: returns 0.0
        - For p = 1: returns inf
        - For p in (0, 1): returns -ln(1-p)/λ

    Raises
    ------
    ParameterDomainError
        If ``lambda_ <= 0``.
    ValueError
        If probability is outside [0, 1]
    """
    _check_rate(lambda_)
    check_probability(p)
    if p == 0:
        return 0.0
    if p == 1:
        return math.inf
    return -math.log1p(-p) / lambda_


def sample_exponential(lambda_: float, rng: RandomSource | None = None) -> float:
    """Draw one exponential variate by inverse transform."""
    _check_rate(lambda_)
    return exponential_quantile(resolve_rng(rng).random(), lambda_)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    The exponential distribution is memoryless and is widely used in reliability
    engineering, queuing theory, and survival analysis.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : float
            Point at which to evaluate the probability density function
        """
        parameters = cast(_Rate, parameters)
        return exponential_pdf(x, parameters.lambda_)

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function for exponential distribution."""
        parameters = cast(_Rate, parameters)
        return exponential_cdf(x, parameters.lambda_)

    def ppf(parameters: Parametrization, p: float) -> float:
        """Percent point function (inverse CDF) for exponential distribution."""
        parameters = cast(_Rate, parameters)
        return exponential_quantile(p, parameters.lambda_)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / (parameters.lambda_**2)

    def mode_func(_1: Parametrization, _2: Any) -> float:
        """Mode of exponential distribution (always 0)."""
        return 0.0

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of exponential distribution (always 2)."""
        return 2.0

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SKEW: skew_func,
        },
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ) of the distribution
        """

        lambda_: float

        @constraint(
            description="lambda_ > 0",
            param="lambda_",
            message="Rate parameter must be positive",
        )
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        beta: float

        @constraint(
            description="beta > 0",
            param="beta",
            message="Scale parameter must be positive",
        )
        def check_beta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return _Rate(lambda_=1.0 / self.beta)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Exponential)
