"""
Sampling subpackage

Finite-population sampling for PySATL Inference:

- descriptive statistics (:mod:`.statistics`);
- simple random, stratified, systematic and cluster sampling
  (:mod:`.strategies`);
- synthetic populations and strata (:mod:`.population`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .population import (
    PopulationConfig,
    PopulationDistribution,
    create_strata,
    generate_population,
)
from .statistics import (
    SampleStatistics,
    calculate_sample_statistics,
    mean,
    population_standard_deviation,
    standard_deviation,
)
from .strategies import (
    ClusterSampling,
    SampleResult,
    SimpleRandomSampling,
    StratifiedSampling,
    StratumConfig,
    SystematicSampling,
    cluster_sample,
    simple_random_sample,
    stratified_sample,
    systematic_sample,
)

__all__ = [
    # statistics
    "SampleStatistics",
    "calculate_sample_statistics",
    "mean",
    "population_standard_deviation",
    "standard_deviation",
    # strategies
    "SampleResult",
    "StratumConfig",
    "SimpleRandomSampling",
    "StratifiedSampling",
    "SystematicSampling",
    "ClusterSampling",
    "simple_random_sample",
    "stratified_sample",
    "systematic_sample",
    "cluster_sample",
    # populations
    "PopulationConfig",
    "PopulationDistribution",
    "create_strata",
    "generate_population",
]
