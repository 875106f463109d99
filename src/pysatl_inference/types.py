"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout the PySATL inference
engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    Concrete types describe the space a distribution lives on.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumericArray = NDArray[np.float64]
"""Type alias for floating point sample arrays."""

IndexArray = NDArray[np.int64]
"""Type alias for arrays of population indices."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""

@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform pseudo-random numbers.

    Any object with a ``random()`` method returning a float in ``[0, 1)``
    qualifies, in particular :class:`numpy.random.Generator` and
    :class:`random.Random`.
    """

    def random(self) -> float: ...


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Note
    ----------
    Discrete families provide ``PMF`` instead of ``PDF``.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    MODE = "mode"
    SKEW = "skewness"


class FamilyName(StrEnum):
    NORMAL = "normal"
    BINOMIAL = "binomial"
    POISSON = "poisson"
    EXPONENTIAL = "exponential"
    UNIFORM = "uniform"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "NumericArray",
    "IndexArray",
    "RandomSource",
    "CharacteristicName",
    "FamilyName",
]
