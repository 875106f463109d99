"""
Common helpers for built-in distribution family tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from pysatl_inference.families.configuration import configure_families_register
from pysatl_inference.families.parametric_family import ParametricFamily


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def family(name: str) -> ParametricFamily:
        """Fetch a configured built-in family."""
        return configure_families_register().get(name)

    @staticmethod
    def evaluate(func: Callable[[float], float], points: Iterable[float]) -> np.ndarray[Any, Any]:
        """Apply a scalar characteristic to each point."""
        return np.array([func(x) for x in points], dtype=np.float64)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Assert arrays agree to the given absolute precision."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))
