"""Argument checks shared by the built-in families."""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


def check_probability(p: float) -> None:
    """
    Reject probabilities outside ``[0, 1]`` (NaN included).

    Raises
    ------
    ValueError
        If probability is outside [0, 1].
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("Probability must be in [0, 1]")
