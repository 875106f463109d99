"""
Computation Primitives
======================

This module defines :class:`AnalyticalComputation`, the closed-form callable
a parametric family hands out for each of its characteristics once the
parameter values are bound.

Notes
-----
- All callables are intentionally **scalar** (``float -> float``) in the
  univariate case. Vectorization, if needed, should be handled outside or by
  the caller.
- ``**options`` are free-form and forwarded to the wrapped function.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_inference.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable, usually a family function with the parameters
        already bound.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
