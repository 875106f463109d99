"""
Binomial distribution family implementation.

Contains the Binomial family with the trials-probability parameterization.
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
from pysatl_inference.families.builtins.continuous.normal import sample_normal
from pysatl_inference.families.parametric_family import ParametricFamily
from pysatl_inference.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_inference.families.registry import ParametricFamilyRegister
from pysatl_inference.rng import resolve_rng
from pysatl_inference.special import is_integral, log_binomial_coefficient
from pysatl_inference.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_inference.types import RandomSource

BINOMIAL_DIRECT_SIMULATION_LIMIT = 100
"""Largest ``n`` sampled by counting Bernoulli trials."""


def _check_params(n: float, p: float) -> int:
    if not is_integral(n) or n < 0:
        raise ParameterDomainError("Binomial distribution requires n >= 0 integer")
    if not 0.0 <= p <= 1.0:
        raise ParameterDomainError("Binomial distribution requires 0 <= p <= 1")
    return int(n)


def _pmf(k: int, n: int, p: float) -> float:
    if k < 0 or k > n:
        return 0.0
    if p == 0:
        return 1.0 if k == 0 else 0.0
    if p == 1:
        return 1.0 if k == n else 0.0
    log_pmf = log_binomial_coefficient(n, k) + k * math.log(p) + (n - k) * math.log1p(-p)
    return math.exp(log_pmf)


def _cdf(k: int, n: int, p: float) -> float:
    if k < 0:
        return 0.0
    if k >= n:
        return 1.0
    if p == 0:
        return 1.0
    if p == 1:
        return 0.0

    # ln pmf(i + 1) = ln pmf(i) + ln(n - i) - ln(i + 1) + ln(p / (1 - p))
    log_odds = math.log(p) - math.log1p(-p)
    log_term = n * math.log1p(-p)
    total = math.exp(log_term)
    for i in range(k):
        log_term += math.log(n - i) - math.log(i + 1) + log_odds
        total += math.exp(log_term)
    return min(total, 1.0)


def binomial_pmf(k: float, n: float, p: float) -> float:
    """
    Binomial probability mass ``P(X = k)``.

    Evaluated in log space as ``ln C(n, k) + k ln p + (n - k) ln(1 - p)`` and
    exponentiated once. Non-integer ``k`` has zero mass.

    Raises
    ------
    ParameterDomainError
        If ``n`` is not a non-negative integer or ``p`` is outside [0, 1].
    """
    trials = _check_params(n, p)
    if not is_integral(k):
        return 0.0
    return _pmf(int(k), trials, p)


def binomial_cdf(x: float, n: float, p: float) -> float:
    """Binomial CDF, the running PMF sum up to ``floor(x)`` clamped to 1."""
    trials = _check_params(n, p)
    if x < 0:
        return 0.0
    if x >= trials:
        return 1.0
    return _cdf(math.floor(x), trials, p)


def binomial_quantile(q: float, n: float, p: float) -> float:
    """
    Smallest ``k`` in ``[0, n]`` with ``cdf(k) >= q``, found by binary search.

    Parameters
    ----------
    q : float
        Probability from [0, 1].
    n : int
        Number of trials.
    p : float
        Success probability.

    Raises
    ------
    ParameterDomainError
        If the parameters are outside their domain.
    ValueError
        If probability is outside [0, 1]
    """
    trials = _check_params(n, p)
    check_probability(q)
    if q == 0:
        return 0.0
    if q == 1:
        return float(trials)

    lo, hi = 0, trials
    while lo < hi:
        mid = (lo + hi) // 2
        if _cdf(mid, trials, p) >= q:
            hi = mid
        else:
            lo = mid + 1
    return float(lo)


def sample_binomial(n: float, p: float, rng: RandomSource | None = None) -> int:
    """
    Draw one binomial variate.

    Counts Bernoulli successes for ``n <= 100``; above that rounds a normal
    draw with the same mean and variance and clamps it to ``[0, n]``.
    """
    trials = _check_params(n, p)
    if trials == 0 or p == 0:
        return 0
    if p == 1:
        return trials

    source = resolve_rng(rng)
    if trials <= BINOMIAL_DIRECT_SIMULATION_LIMIT:
        return sum(1 for _ in range(trials) if source.random() < p)

    mu = trials * p
    sigma = math.sqrt(trials * p * (1 - p))
    draw = math.floor(sample_normal(mu, sigma, source) + 0.5)
    return min(max(draw, 0), trials)


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent Bernoulli trials with success
    probability p.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1-p)^(n-k),  k = 0, ..., n
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        """
        Probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        x : float
            Point at which to evaluate the probability mass function
        """
        parameters = cast(_TrialsProb, parameters)
        return binomial_pmf(x, parameters.n, parameters.p)

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function for binomial distribution."""
        parameters = cast(_TrialsProb, parameters)
        return binomial_cdf(x, parameters.n, parameters.p)

    def ppf(parameters: Parametrization, q: float) -> float:
        """Quantile function for binomial distribution."""
        parameters = cast(_TrialsProb, parameters)
        return binomial_quantile(q, parameters.n, parameters.p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of binomial distribution."""
        parameters = cast(_TrialsProb, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of binomial distribution."""
        parameters = cast(_TrialsProb, parameters)
        return parameters.n * parameters.p * (1 - parameters.p)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of binomial distribution, ``floor((n + 1) p)`` capped at ``n``."""
        parameters = cast(_TrialsProb, parameters)
        return float(min(math.floor((parameters.n + 1) * parameters.p), parameters.n))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of binomial distribution (0 for a degenerate one)."""
        parameters = cast(_TrialsProb, parameters)
        variance = parameters.n * parameters.p * (1 - parameters.p)
        if variance == 0:
            return 0.0
        return (1 - 2 * parameters.p) / math.sqrt(variance)

    def draw(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_TrialsProb, parameters)
        return float(sample_binomial(parameters.n, parameters.p, rng))

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["trialsProb"],
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
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="trialsProb")
    class _TrialsProb(Parametrization):
        """
        Trials-probability parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Probability of success in a single trial
        """

        n: int
        p: float

        @constraint(
            description="n is a non-negative integer",
            param="n",
            message="Number of trials must be a non-negative integer",
        )
        def check_n_non_negative_integer(self) -> bool:
            """Check that the number of trials is a non-negative integer."""
            return is_integral(self.n) and self.n >= 0

        @constraint(
            description="0 <= p <= 1",
            param="p",
            message="Probability must be between 0 and 1",
        )
        def check_p_in_unit_interval(self) -> bool:
            """Check that success probability lies in [0, 1]."""
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Binomial)
