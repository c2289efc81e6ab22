"""Socio-demographic and behavioural confounders.

Each variable follows the same recipe: a linear predictor over variables
already drawn, Gaussian noise (or a uniform draw against a bounded
probability for binary traits), then rounding and clamping into the
variable's domain. 0–10 scores are truncated to whole points when drawn.
Coefficients are design constants of the DGP.
"""

from __future__ import annotations

import numpy as np

from src.simulation.transforms import indicator, integer_score
from src.utils.config import CATEGORIES, MIN_INCOME, SCORE_RANGE

EDUCATION_LEVELS = CATEGORIES["Education"]

# Probabilities over (Primaire, Secondaire, Superieur)
EDUCATION_PROBS_YOUNG = np.array([0.1, 0.4, 0.5])
EDUCATION_PROBS_OLDER = np.array([0.3, 0.5, 0.2])
EDUCATION_URBAN_MULTIPLIER = np.array([0.8, 1.0, 1.3])
EDUCATION_AGE_THRESHOLD = 40


def education_probabilities(age: np.ndarray, is_urbain: np.ndarray) -> np.ndarray:
    """Row-normalised ``(n, 3)`` probability matrix for Education."""
    probs = np.where(
        (age < EDUCATION_AGE_THRESHOLD)[:, None],
        EDUCATION_PROBS_YOUNG,
        EDUCATION_PROBS_OLDER,
    )
    probs = np.where(
        is_urbain.astype(bool)[:, None],
        probs * EDUCATION_URBAN_MULTIPLIER,
        probs,
    )
    probs = probs / probs.sum(axis=1, keepdims=True)
    _check_probabilities(probs)
    return probs


def _check_probabilities(probs: np.ndarray) -> None:
    if not np.all(np.isfinite(probs)) or np.any(probs < 0):
        raise RuntimeError("Education probabilities must be finite and non-negative")
    if not np.allclose(probs.sum(axis=1), 1.0):
        raise RuntimeError("Education probabilities must sum to 1 on every row")


def draw_education(rng: np.random.Generator, data: dict) -> dict:
    """Per-row categorical draw by inverse CDF (one uniform per row)."""
    probs = education_probabilities(data["Age"], data["is_urbain"])
    cdf = np.cumsum(probs, axis=1)
    u = rng.random(len(probs))
    idx = (u[:, None] >= cdf[:, :-1]).sum(axis=1)
    education = np.asarray(EDUCATION_LEVELS, dtype=object)[idx]
    return {
        "Education": education,
        "is_secondaire": indicator(education == "Secondaire"),
        "is_superieur": indicator(education == "Superieur"),
    }


def draw_income(rng: np.random.Generator, data: dict) -> np.ndarray:
    """Family income in thousands of euros, floored at ``MIN_INCOME``."""
    n = len(data["Age"])
    income = np.round(
        25
        + 10 * data["is_secondaire"]
        + 25 * data["is_superieur"]
        + 8 * data["is_urbain"]
        + rng.normal(0, 8, n),
        1,
    )
    return np.maximum(income, MIN_INCOME)


def draw_smoking(rng: np.random.Generator, data: dict) -> dict:
    age = data["Age"]
    p_smoke = (
        0.25
        - 0.15 * data["is_superieur"]
        - 0.002 * data["RevenuFamilial"]
        + 0.003 * age * indicator(age < 50)
        - 0.001 * age * indicator(age >= 50)
    )
    p_smoke = np.clip(p_smoke, 0.05, 0.5)
    is_fumeur = rng.random(len(age)) < p_smoke
    return {
        "Tabagisme": np.where(is_fumeur, "Fumeur", "Non-fumeur").astype(object),
        "is_fumeur": indicator(is_fumeur),
        "is_non_fumeur": indicator(~is_fumeur),
    }


def draw_alcohol(rng: np.random.Generator, data: dict) -> dict:
    age = data["Age"]
    p_drink = (
        0.3
        + 0.1 * data["is_homme"]
        - 0.05 * indicator(age < 25)
        + 0.01 * (data["RevenuFamilial"] / 10)
    )
    p_drink = np.clip(p_drink, 0.05, 0.8)
    is_buveur = rng.random(len(age)) < p_drink
    return {
        "ConsommationAlcool": np.where(is_buveur, "Buveur", "Non-buveur").astype(object),
        "is_buveur": indicator(is_buveur),
    }


def draw_stress(rng: np.random.Generator, data: dict) -> np.ndarray:
    n = len(data["Age"])
    return integer_score(
        5
        + 1.2 * data["is_urbain"]
        - 0.8 * (data["RevenuFamilial"] / 50)
        + 0.5 * data["is_femme"]
        - 0.6 * data["is_superieur"]
        + rng.normal(0, 1.5, n),
        *SCORE_RANGE,
    )


def draw_social_support(rng: np.random.Generator, data: dict) -> np.ndarray:
    n = len(data["Age"])
    return integer_score(
        5
        + 0.5 * data["is_rural"]
        - 0.01 * data["Age"]
        + 0.3 * data["is_femme"]
        + rng.normal(0, 1.2, n),
        *SCORE_RANGE,
    )


def draw_physical_occupation(rng: np.random.Generator, data: dict) -> np.ndarray:
    n = len(data["Age"])
    return integer_score(
        3
        + 1.5 * data["is_rural"]
        + 0.5 * data["is_homme"]
        - 0.7 * data["is_superieur"]
        + rng.normal(0, 1.3, n),
        *SCORE_RANGE,
    )


def draw_care_access(rng: np.random.Generator, data: dict) -> np.ndarray:
    n = len(data["Age"])
    n_regions = len(data["region_levels"])
    return integer_score(
        5
        + 0.6 * (data["RevenuFamilial"] / 50)
        + 0.3 * data["is_urbain"]
        + 0.4 * (data["region_code"] / n_regions)
        + rng.normal(0, 1.0, n),
        *SCORE_RANGE,
    )


def draw_diet(rng: np.random.Generator, data: dict) -> np.ndarray:
    n = len(data["Age"])
    return integer_score(
        5
        + 1.2 * data["is_superieur"]
        + 0.5 * (data["RevenuFamilial"] / 50)
        + 0.3 * data["is_urbain"]
        + rng.normal(0, 1.2, n),
        *SCORE_RANGE,
    )
