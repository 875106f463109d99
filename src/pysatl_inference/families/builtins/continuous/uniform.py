"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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


def _check_bounds(a: float, b: float) -> None:
    if not a < b:
        raise ParameterDomainError("Uniform distribution requires a < b")


def uniform_pdf(x: float, a: float, b: float) -> float:
    """Uniform density ``1 / (b - a)`` on ``[a, b]``, 0 elsewhere."""
    _check_bounds(a, b)
    if x < a or x > b:
        return 0.0
    return 1.0 / (b - a)


def uniform_cdf(x: float, a: float, b: float) -> float:
    """Uniform CDF: 0 below ``a``, 1 above ``b``, linear in between."""
    _check_bounds(a, b)
    if x <= a:
        return 0.0
    if x >= b:
        return 1.0
    return (x - a) / (b - a)


def uniform_quantile(p: float, a: float, b: float) -> float:
    """
    Uniform quantile ``a + p * (b - a)``.

    Raises
    ------
    ParameterDomainError
        If ``a >= b``.
    ValueError
        If probability is outside [0, 1]
    """
    _check_bounds(a, b)
    check_probability(p)
    if p == 1:
        return b
    return a + p * (b - a)


def sample_uniform(a: float, b: float, rng: RandomSource | None = None) -> float:
    """Draw one uniform variate on ``[a, b)``."""
    _check_bounds(a, b)
    return uniform_quantile(resolve_rng(rng).random(), a, b)


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(b - a) for x in [a, b], 0 otherwise

    The uniform distribution is often used when there is no prior knowledge
    about the possible values of a variable, representing maximum uncertainty.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for uniform distribution.
            - For x < a: returns 0
            - For x > b: returns 0
            - For x in [a, b]: returns 1/(b - a)
        """
        parameters = cast(_Standard, parameters)
        return uniform_pdf(x, parameters.a, parameters.b)

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function for uniform distribution."""
        parameters = cast(_Standard, parameters)
        return uniform_cdf(x, parameters.a, parameters.b)

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function (inverse CDF) for uniform distribution.

        Returns
        -------
        float
            Quantile corresponding to probability p:
            - For p = 0: returns a
            - For p = 1: returns b
            - For p in (0, 1): returns a + p × (b - a)
        """
        parameters = cast(_Standard, parameters)
        return uniform_quantile(p, parameters.a, parameters.b)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.a + parameters.b) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.b - parameters.a) ** 2 / 12

    def mode_func(_1: Parametrization, _2: Any) -> None:
        """Every point of ``[a, b]`` is a mode, so no single mode is reported."""
        return None

    def skew_func(_1: Parametrization, _2: Any) -> int:
        """Skewness of uniform distribution (always 0)."""
        return 0

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
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
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        a : float
            Lower bound of the distribution
        b : float
            Upper bound of the distribution
        """

        a: float
        b: float

        @constraint(
            description="a < b",
            param="a",
            message="Lower bound must be less than upper bound",
        )
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.a < self.b

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (b - a)
        """

        mean: float
        width: float

        @constraint(description="width > 0", param="width", message="Width must be positive")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return _Standard(  # type: ignore[call-arg]
                a=self.mean - half_width,
                b=self.mean + half_width,
            )

    ParametricFamilyRegister.register(Uniform)
