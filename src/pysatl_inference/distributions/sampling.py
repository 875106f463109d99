"""
Sampling Containers
===================

This module defines the container returned by distribution sampling
strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_inference.types import NumericArray


class ArraySample:
    """
    Array-backed univariate sample container.

    Parameters
    ----------
    data : numpy.ndarray
        1D floating-point array of shape (n,).

    Attributes
    ----------
    data : numpy.ndarray
        Backing array containing the samples.

    Raises
    ------
    ValueError
        If data is not 1D.
    """

    data: NumericArray

    def __init__(self, data: NumericArray) -> None:
        if data.ndim != 1:
            raise ValueError("ArraySample expects 1D array of shape (n,).")
        self.data = np.asarray(data, dtype=np.float64)

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over sample values as Python floats."""
        for value in self.data:
            yield float(value)

    @property
    def array(self) -> NumericArray:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n,)."""
        return (len(self),)
