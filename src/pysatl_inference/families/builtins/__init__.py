"""
Built-in distribution families for PySATL Inference.

This package contains implementations of the five statistical distribution
families that are available by default: normal, exponential and uniform
(continuous), binomial and Poisson (discrete).
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_inference.families.builtins.continuous import (
    configure_exponential_family,
    configure_normal_family,
    configure_uniform_family,
)
from pysatl_inference.families.builtins.discrete import (
    configure_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "configure_normal_family",
    "configure_binomial_family",
    "configure_poisson_family",
    "configure_exponential_family",
    "configure_uniform_family",
]
