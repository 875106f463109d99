"""
Inference subpackage

Standard errors, critical values, confidence intervals, bootstrap
resampling and sample-size planning.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .bootstrap import (
    BootstrapConfig,
    BootstrapResult,
    bootstrap,
    bootstrap_resample,
)
from .critical_values import T_TO_Z_DEGREES_OF_FREEDOM, t_critical_value, z_critical_value
from .intervals import (
    ConfidenceInterval,
    confidence_interval_mean,
    confidence_interval_proportion,
)
from .sample_size import (
    sample_size_for_mean,
    sample_size_for_power,
    sample_size_for_proportion,
)
from .standard_error import (
    finite_population_correction,
    standard_error_mean,
    standard_error_proportion,
)

__all__ = [
    # standard error
    "standard_error_mean",
    "standard_error_proportion",
    "finite_population_correction",
    # critical values
    "T_TO_Z_DEGREES_OF_FREEDOM",
    "z_critical_value",
    "t_critical_value",
    # intervals
    "ConfidenceInterval",
    "confidence_interval_mean",
    "confidence_interval_proportion",
    # bootstrap
    "BootstrapConfig",
    "BootstrapResult",
    "bootstrap",
    "bootstrap_resample",
    # planning
    "sample_size_for_mean",
    "sample_size_for_proportion",
    "sample_size_for_power",
]
