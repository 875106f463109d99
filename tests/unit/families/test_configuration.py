"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of the built-in
distribution families in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_inference.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_inference.families.registry import ParametricFamilyRegister
from pysatl_inference.types import FamilyName, Kind


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_cached(self):
        assert configure_families_register() is self.registry

    def test_all_builtin_families_registered(self):
        assert ParametricFamilyRegister.list_registered_families() == [
            FamilyName.NORMAL,
            FamilyName.BINOMIAL,
            FamilyName.POISSON,
            FamilyName.EXPONENTIAL,
            FamilyName.UNIFORM,
        ]

    @pytest.mark.parametrize(
        "name, kind",
        [
            (FamilyName.NORMAL, Kind.CONTINUOUS),
            (FamilyName.BINOMIAL, Kind.DISCRETE),
            (FamilyName.POISSON, Kind.DISCRETE),
            (FamilyName.EXPONENTIAL, Kind.CONTINUOUS),
            (FamilyName.UNIFORM, Kind.CONTINUOUS),
        ],
    )
    def test_family_kinds(self, name, kind):
        assert self.registry.get(name).distr_type.kind == kind

    def test_reset_families_register(self):
        registry1 = configure_families_register()
        reset_families_register()
        registry2 = configure_families_register()

        assert registry1 is not registry2
        assert ParametricFamilyRegister.contains(FamilyName.NORMAL)

    def test_registry_singleton_pattern(self):
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_registry_get_family_method(self):
        normal_family = self.registry.get(FamilyName.NORMAL)
        assert normal_family.name == FamilyName.NORMAL

        with pytest.raises(ValueError):
            self.registry.get("NonExistentFamily")

    def test_family_lookup_accepts_plain_strings(self):
        assert self.registry.get("poisson") is self.registry.get(FamilyName.POISSON)
