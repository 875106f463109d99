"""
Ready-made distributions and sampling scenarios for exploration.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

from pysatl_inference.dispatch import DistributionSpec
from pysatl_inference.sampling.population import PopulationConfig, PopulationDistribution


@dataclass(frozen=True, slots=True)
class DistributionPreset:
    """A named distribution with a short description of where it arises."""

    id: str
    name: str
    description: str
    distribution: DistributionSpec
    use_case: str


@dataclass(frozen=True, slots=True)
class SamplingPreset:
    """A population together with a sample size and the question it answers."""

    id: str
    name: str
    description: str
    population_config: PopulationConfig
    sample_size: int
    scenario: str


DISTRIBUTION_PRESETS: tuple[DistributionPreset, ...] = (
    DistributionPreset(
        id="iq-scores",
        name="IQ Scores",
        description="IQ scores follow a normal distribution with mean 100 and std dev 15",
        distribution=DistributionSpec.normal(mu=100, sigma=15),
        use_case="Classic normal distribution example",
    ),
    DistributionPreset(
        id="standard-normal",
        name="Standard Normal",
        description="The standard normal distribution with μ=0 and σ=1",
        distribution=DistributionSpec.normal(mu=0, sigma=1),
        use_case="Reference for z-scores",
    ),
    DistributionPreset(
        id="coin-flips",
        name="Coin Flips (20)",
        description="20 fair coin flips, counting heads",
        distribution=DistributionSpec.binomial(n=20, p=0.5),
        use_case="Fair coin tossing",
    ),
    DistributionPreset(
        id="biased-die",
        name="Biased Die",
        description="60 rolls of a fair die, counting sixes",
        distribution=DistributionSpec.binomial(n=60, p=1 / 6),
        use_case="Success counting with low probability",
    ),
    DistributionPreset(
        id="quality-control",
        name="Quality Control",
        description="100 items with 2% defect rate",
        distribution=DistributionSpec.binomial(n=100, p=0.02),
        use_case="Manufacturing defect monitoring",
    ),
    DistributionPreset(
        id="server-requests",
        name="Server Requests",
        description="Average 10 requests per second",
        distribution=DistributionSpec.poisson(lambda_=10),
        use_case="Modeling arrival rates",
    ),
    DistributionPreset(
        id="rare-events",
        name="Rare Events",
        description="Average 2 events per time period",
        distribution=DistributionSpec.poisson(lambda_=2),
        use_case="Rare event counting",
    ),
    DistributionPreset(
        id="api-timeouts",
        name="API Timeouts",
        description="Time between failures with rate 0.5/hour",
        distribution=DistributionSpec.exponential(lambda_=0.5),
        use_case="Modeling wait times",
    ),
    DistributionPreset(
        id="component-lifetime",
        name="Component Lifetime",
        description="Component failure rate of 0.1/year",
        distribution=DistributionSpec.exponential(lambda_=0.1),
        use_case="Reliability engineering",
    ),
    DistributionPreset(
        id="random-numbers",
        name="Random Numbers",
        description="Uniform distribution between 0 and 1",
        distribution=DistributionSpec.uniform(a=0, b=1),
        use_case="Basic RNG simulation",
    ),
    DistributionPreset(
        id="dice-roll",
        name="Dice Roll",
        description="Single fair die (continuous approximation)",
        distribution=DistributionSpec.uniform(a=1, b=7),
        use_case="Uniform outcome selection",
    ),
)

SAMPLING_PRESETS: tuple[SamplingPreset, ...] = (
    SamplingPreset(
        id="user-survey",
        name="User Survey",
        description="Customer satisfaction survey with normal distribution",
        population_config=PopulationConfig(
            size=1000, distribution=PopulationDistribution.NORMAL, params={"mu": 50, "sigma": 15}
        ),
        sample_size=50,
        scenario="Estimate average satisfaction score from a subset of users",
    ),
    SamplingPreset(
        id="quality-inspection",
        name="Quality Inspection",
        description="Manufacturing defect rate estimation",
        population_config=PopulationConfig(
            size=10000, distribution=PopulationDistribution.BINOMIAL, params={"p": 0.02}
        ),
        sample_size=200,
        scenario="Estimate defect rate without inspecting every item",
    ),
    SamplingPreset(
        id="performance-benchmark",
        name="Performance Benchmark",
        description="API response times with exponential distribution",
        # mean response time of 100 ms
        population_config=PopulationConfig(
            size=5000, distribution=PopulationDistribution.EXPONENTIAL, params={"lambda_": 0.01}
        ),
        sample_size=100,
        scenario="Profile API performance by sampling requests",
    ),
    SamplingPreset(
        id="election-poll",
        name="Election Poll",
        description="Voter preference estimation",
        population_config=PopulationConfig(
            size=100000, distribution=PopulationDistribution.BINOMIAL, params={"p": 0.52}
        ),
        sample_size=1000,
        scenario="Estimate candidate support from a representative sample",
    ),
    SamplingPreset(
        id="ab-test",
        name="A/B Test",
        description="Website conversion rate experiment",
        population_config=PopulationConfig(
            size=50000, distribution=PopulationDistribution.BINOMIAL, params={"p": 0.05}
        ),
        sample_size=5000,
        scenario="Estimate conversion rate to detect small improvements",
    ),
)


def get_preset_by_id(preset_id: str) -> DistributionPreset | None:
    """Look up a distribution preset, ``None`` when the id is unknown."""
    return next((preset for preset in DISTRIBUTION_PRESETS if preset.id == preset_id), None)


def get_sampling_preset_by_id(preset_id: str) -> SamplingPreset | None:
    """Look up a sampling preset, ``None`` when the id is unknown."""
    return next((preset for preset in SAMPLING_PRESETS if preset.id == preset_id), None)
