"""
PySATL Inference
================

Statistical distribution and inference engine: special functions, five
parametric distribution families behind a unified dispatch layer, histogram
binning, finite-population sampling strategies and an inference layer
(standard errors, critical values, confidence intervals, bootstrap,
sample-size planning).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .dispatch import *
from .dispatch import __all__ as _dispatch_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exceptions_all
from .families import *
from .families import __all__ as _family_all
from .histogram import HistogramBin, create_histogram
from .inference import *
from .inference import __all__ as _inference_all
from .sampling import *
from .sampling import __all__ as _sampling_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-inference")
__all__ = [
    "__version__",
    "HistogramBin",
    "create_histogram",
    *_dispatch_all,
    *_distr_all,
    *_exceptions_all,
    *_family_all,
    *_inference_all,
    *_sampling_all,
    *_types_all,
]

del _dispatch_all
del _distr_all
del _exceptions_all
del _family_all
del _inference_all
del _sampling_all
del _types_all
