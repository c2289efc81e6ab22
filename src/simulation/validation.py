"""Argument checks run before any random draw."""

from __future__ import annotations

import math
import numbers

import numpy as np


class InvalidArgument(ValueError):
    """Raised when a generation parameter is out of its domain.

    Parameters
    ----------
    parameter : str
        Name of the offending argument.
    message : str
        Human readable reason.
    """

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")


def _is_positive_integer(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return int(value) > 0
    if isinstance(value, numbers.Real):
        value = float(value)
        return math.isfinite(value) and value > 0 and value.is_integer()
    return False


def validate_parameters(n, n_regions, B_activite, seed=None) -> tuple[int, int, float]:
    """Check the generation parameters and return them normalised.

    Returns
    -------
    tuple
        ``(n, n_regions, B_activite)`` as ``(int, int, float)``.

    Raises
    ------
    InvalidArgument
        If ``n`` or ``n_regions`` is not a positive integer, if
        ``B_activite`` is not a finite real number, or if ``seed`` is
        neither ``None``, an integer nor a ``numpy.random.Generator``.
    """
    if not _is_positive_integer(n):
        raise InvalidArgument("n", f"must be a positive integer, got {n!r}")
    if not _is_positive_integer(n_regions):
        raise InvalidArgument(
            "n_regions", f"must be a positive integer, got {n_regions!r}"
        )
    if (
        isinstance(B_activite, (bool, np.bool_))
        or not isinstance(B_activite, numbers.Real)
        or not math.isfinite(float(B_activite))
    ):
        raise InvalidArgument(
            "B_activite", f"must be a finite real number, got {B_activite!r}"
        )
    if seed is not None and not isinstance(seed, np.random.Generator):
        if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, numbers.Integral):
            raise InvalidArgument(
                "seed", f"must be None, an integer or a numpy Generator, got {seed!r}"
            )
        if int(seed) < 0:
            raise InvalidArgument("seed", f"must be non-negative, got {seed!r}")
    return int(n), int(n_regions), float(B_activite)
