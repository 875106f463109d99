from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_inference.families import ParametricFamily, Parametrization, constraint
from pysatl_inference.types import (
    CharacteristicName,
    GenericCharacteristicName,
    UnivariateContinuous,
)
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    """Builds a small two-parametrization family: ``base(value)`` and ``alt(inverse)``."""

    PDF: GenericCharacteristicName = CharacteristicName.PDF
    CDF: GenericCharacteristicName = CharacteristicName.CDF
    PPF: GenericCharacteristicName = CharacteristicName.PPF

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Scaled",
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: p.value * x},
                self.CDF: {"alt": lambda p, x: x / p.inverse, "base": lambda p, x: p.value * x},
                self.PPF: {"base": lambda p, q: q / p.value},
            }
        fam = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
            sampling_strategy=MockSamplingStrategy(),
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint("value > 0", param="value", message="Value must be positive")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            inverse: float

            @constraint("inverse > 0")
            def check_inverse_positive(self) -> bool:
                return self.inverse > 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=1 / self.inverse)  # type: ignore[call-arg]

        return fam
