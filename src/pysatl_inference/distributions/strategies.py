"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its implementations:

- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`InverseTransformSamplingStrategy`: draws ``(n,)`` samples by
  applying ``ppf`` to i.i.d. uniform variates.
- :class:`DirectSamplingStrategy`: draws ``(n,)`` samples with a family
  specific single-draw routine (Box-Muller, Knuth, Bernoulli trials).

Notes
-----
- Strategies are stateless; randomness comes from the ``rng`` argument,
  resolved once per call.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_inference.exceptions import SamplingValidationError
from pysatl_inference.rng import resolve_rng
from pysatl_inference.special import is_integral
from pysatl_inference.types import CharacteristicName, RandomSource

from .sampling import ArraySample

if TYPE_CHECKING:
    from pysatl_inference.families.parametrizations import Parametrization

    from .distribution import Distribution

type ScalarDraw = Callable[["Parametrization", RandomSource], float]


def _check_sample_count(n: int) -> int:
    if not is_integral(n) or n < 0:
        raise SamplingValidationError("Number of samples must be a non-negative integer")
    return int(n)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource | None = None, **options: Any
    ) -> ArraySample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``.

    Returns
    -------
    ArraySample
        A 1D sample of shape ``(n,)``.
    """

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        count = _check_sample_count(n)
        ppf = distr.query_method(CharacteristicName.PPF)
        source = resolve_rng(rng)
        vals = np.array([ppf(source.random(), **options) for _ in range(count)], dtype=np.float64)
        return ArraySample(vals)


class DirectSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler delegating each draw to a family routine.

    Parameters
    ----------
    draw : Callable[[Parametrization, RandomSource], float]
        Produces one variate from base parameters and a random source.
    """

    def __init__(self, draw: ScalarDraw) -> None:
        self._draw = draw

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        count = _check_sample_count(n)
        params = distr.base_parameters
        source = resolve_rng(rng)
        vals = np.array([self._draw(params, source) for _ in range(count)], dtype=np.float64)
        return ArraySample(vals)
