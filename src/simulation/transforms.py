"""Small numeric helpers shared by the generation stages."""

from __future__ import annotations

import numpy as np


def expit(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


def bounded_score(
    linear_predictor: np.ndarray,
    low: float,
    high: float,
    decimals: int = 1,
) -> np.ndarray:
    """Round to ``decimals`` then clamp into ``[low, high]``."""
    return np.clip(np.round(linear_predictor, decimals), low, high)


def integer_score(
    linear_predictor: np.ndarray,
    low: float,
    high: float,
) -> np.ndarray:
    """:func:`bounded_score` truncated to whole points.

    Applied at draw time, so downstream formulas see the published value.
    """
    return np.trunc(bounded_score(linear_predictor, low, high))


def indicator(mask: np.ndarray) -> np.ndarray:
    """0/1 float indicator for a boolean mask."""
    return np.asarray(mask, dtype=bool).astype(float)
