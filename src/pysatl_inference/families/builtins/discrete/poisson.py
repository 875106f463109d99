"""
Poisson distribution family implementation.

Contains the Poisson family with the rate parameterization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
import warnings
from typing import TYPE_CHECKING, cast

from pysatl_inference.distributions.strategies import DirectSamplingStrategy
from pysatl_inference.exceptions import ParameterDomainError
from pysatl_inference.families.builtins._checks import check_probability
from pysatl_inference.families.builtins.continuous.normal import sample_normal
from pysatl_inference.families.parametric_family import ParametricFamily
from pysatl_inference.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_inference.families.registry import ParametricFamilyRegister
from pysatl_inference.rng import resolve_rng
from pysatl_inference.special import is_integral, log_factorial
from pysatl_inference.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_inference.types import RandomSource

POISSON_KNUTH_LIMIT = 30
"""Largest rate sampled with Knuth's multiplicative algorithm."""

POISSON_QUANTILE_MAX_STEPS = 1000
"""Upper bound on the forward search in :func:`poisson_quantile`."""


def _check_rate(lambda_: float) -> None:
    if not lambda_ >= 0:
        raise ParameterDomainError("Poisson distribution requires lambda >= 0")


def _pmf(k: int, lambda_: float) -> float:
    if k < 0:
        return 0.0
    if lambda_ == 0:
        return 1.0 if k == 0 else 0.0
    return math.exp(k * math.log(lambda_) - lambda_ - log_factorial(k))


def poisson_pmf(k: float, lambda_: float) -> float:
    """
    Poisson probability mass ``P(X = k)``.

    Evaluated as ``exp(k ln(lambda) - lambda - ln(k!))``. Non-integer ``k``
    has zero mass.

    Raises
    ------
    ParameterDomainError
        If ``lambda_ < 0``.
    """
    _check_rate(lambda_)
    if not is_integral(k):
        return 0.0
    return _pmf(int(k), lambda_)


def poisson_cdf(x: float, lambda_: float) -> float:
    """
    Poisson CDF, the running PMF sum up to ``floor(x)`` clamped to 1.

    Summation stops early once past the mode and the current term no longer
    changes the sum in double precision, so the loop is bounded for any
    finite ``x``; ``x = inf`` returns 1 directly.
    """
    _check_rate(lambda_)
    if x < 0:
        return 0.0
    if lambda_ == 0 or math.isinf(x):
        return 1.0

    total = 0.0
    for k in range(math.floor(x) + 1):
        term = _pmf(k, lambda_)
        total += term
        if k > lambda_ and term <= total * sys.float_info.epsilon:
            break
    return min(total, 1.0)


def poisson_quantile(q: float, lambda_: float) -> float:
    """
    Smallest ``k`` with ``cdf(k) >= q``, found by linear forward search.

    The search checks ``k = 0 .. POISSON_QUANTILE_MAX_STEPS`` inclusive. When
    the cap is reached before the target probability a
    :class:`RuntimeWarning` is issued and ``inf`` is returned.

    Raises
    ------
    ParameterDomainError
        If ``lambda_ < 0``.
    ValueError
        If probability is outside [0, 1]
    """
    _check_rate(lambda_)
    check_probability(q)
    if q == 0 or lambda_ == 0:
        return 0.0
    if q == 1:
        return math.inf

    cumulative = 0.0
    for k in range(POISSON_QUANTILE_MAX_STEPS + 1):
        cumulative += _pmf(k, lambda_)
        if cumulative >= q:
            return float(k)

    warnings.warn(
        f"Poisson quantile search for p={q} with lambda={lambda_} stopped after "
        f"{POISSON_QUANTILE_MAX_STEPS} steps; returning inf.",
        RuntimeWarning,
        stacklevel=2,
    )
    return math.inf


def sample_poisson(lambda_: float, rng: RandomSource | None = None) -> int:
    """
    Draw one Poisson variate.

    Knuth's multiplicative algorithm for ``lambda <= 30``; above that a
    rounded normal draw with mean and variance ``lambda``, clamped at 0.
    """
    _check_rate(lambda_)
    if lambda_ == 0:
        return 0

    source = resolve_rng(rng)
    if lambda_ <= POISSON_KNUTH_LIMIT:
        limit = math.exp(-lambda_)
        k = 0
        product = source.random()
        while product > limit:
            k += 1
            product *= source.random()
        return k

    draw = math.floor(sample_normal(lambda_, math.sqrt(lambda_), source) + 0.5)
    return max(draw, 0)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at
    a constant average rate λ.

    Probability mass function:
        P(X = k) = λ^k * exp(-λ) / k!,  k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : float
            Point at which to evaluate the probability mass function
        """
        parameters = cast(_Rate, parameters)
        return poisson_pmf(x, parameters.lambda_)

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function for Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return poisson_cdf(x, parameters.lambda_)

    def ppf(parameters: Parametrization, q: float) -> float:
        """Quantile function for Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return poisson_quantile(q, parameters.lambda_)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of Poisson distribution, ``floor(lambda)``."""
        parameters = cast(_Rate, parameters)
        return float(math.floor(parameters.lambda_))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of Poisson distribution (0 for ``lambda = 0``)."""
        parameters = cast(_Rate, parameters)
        if parameters.lambda_ == 0:
            return 0.0
        return 1.0 / math.sqrt(parameters.lambda_)

    def draw(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_Rate, parameters)
        return float(sample_poisson(parameters.lambda_, rng))

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SKEW: skew_func,
        },
        sampling_strategy=DirectSamplingStrategy(draw),
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Expected number of events (λ)
        """

        lambda_: float

        @constraint(
            description="lambda_ >= 0",
            param="lambda_",
            message="Rate parameter must be non-negative",
        )
        def check_lambda_non_negative(self) -> bool:
            """Check that rate parameter is non-negative."""
            return self.lambda_ >= 0

    ParametricFamilyRegister.register(Poisson)
