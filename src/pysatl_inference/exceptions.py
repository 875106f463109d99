"""
Exceptions raised by the inference engine.

Both classes derive from :class:`ValueError`, so callers that only care
about "bad input" can keep catching the builtin.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ParameterDomainError(ValueError):
    """Distribution or special-function argument outside its domain."""


class SamplingValidationError(ValueError):
    """Invalid sampling request (sample size, strata, clusters, iterations)."""


__all__ = [
    "ParameterDomainError",
    "SamplingValidationError",
]
