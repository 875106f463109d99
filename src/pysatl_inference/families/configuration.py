"""
Distribution Families Configuration
====================================

This module defines and configures parametric distribution families for the
PySATL Inference library:

- Normal family: Gaussian distribution (mean-std, mean-precision).
- Binomial family: successes in n Bernoulli trials.
- Poisson family: event counts at a constant rate.
- Exponential family: waiting times (rate, scale).
- Uniform family: flat density on an interval (bounds, mean-width).

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each family supports multiple parameterizations with automatic conversions.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_inference.families.builtins import (
    configure_binomial_family,
    configure_exponential_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
)
from pysatl_inference.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and sampling strategies. It is
    called lazily by the dispatch layer, so explicit calls are only needed
    to inspect the registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_binomial_family()
    configure_poisson_family()
    configure_exponential_family()
    configure_uniform_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
