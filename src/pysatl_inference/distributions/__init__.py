"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Inference:

- distribution protocol (:mod:`.distribution`);
- analytical computation wrappers (:mod:`.computation`);
- array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample
from .strategies import (
    DirectSamplingStrategy,
    InverseTransformSamplingStrategy,
    SamplingStrategy,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    "DirectSamplingStrategy",
]
