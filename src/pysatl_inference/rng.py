"""
Random source resolution.

Every sampling entry point accepts an optional :class:`RandomSource`; this
module turns ``None`` into a fresh NumPy generator at the call boundary so
that no generator state is shared between callers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_inference.types import RandomSource


def resolve_rng(rng: RandomSource | None = None) -> RandomSource:
    """
    Return ``rng`` or a freshly seeded :func:`numpy.random.default_rng`.

    Parameters
    ----------
    rng : RandomSource, optional
        Caller supplied source of uniforms in ``[0, 1)``.

    Returns
    -------
    RandomSource
        Source to draw from for the duration of one call.
    """
    if rng is None:
        return np.random.default_rng()
    return rng


def uniform_index(rng: RandomSource, size: int) -> int:
    """Draw an index uniformly from ``range(size)``."""
    # rng.random() * size can round up to size for values just below 1.0
    return min(int(rng.random() * size), size - 1)
