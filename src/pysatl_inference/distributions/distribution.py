"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by sampling
strategies and by the unified dispatch layer.

Notes
-----
- Characteristic callables are scalar (``float -> float``).
- A distribution that cannot provide a characteristic analytically raises
  :class:`RuntimeError` from :meth:`Distribution.query_method`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_inference.distributions.computation import AnalyticalComputation
    from pysatl_inference.distributions.sampling import ArraySample
    from pysatl_inference.distributions.strategies import SamplingStrategy
    from pysatl_inference.families.parametrizations import Parametrization
    from pysatl_inference.types import (
        DistributionType,
        GenericCharacteristicName,
        RandomSource,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and the dispatch layer."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def base_parameters(self) -> Parametrization: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        try:
            return self.analytical_computations[characteristic_name]
        except KeyError as exc:
            raise RuntimeError(
                f"Distribution provides no analytical computation for '{characteristic_name}'."
            ) from exc

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> ArraySample:
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)
