"""Self-reported health score (the outcome)."""

from __future__ import annotations

import numpy as np

from src.utils.config import HEALTH_RANGE

LOCALE_EFFECTS = {"Urbain": 2.0, "Rural": -2.0}
REGION_EFFECT_SD = 8.0
NOISE_SD = 6.0
IMC_OPTIMUM = 23.0


def draw_region_effects(rng: np.random.Generator, n_regions: int) -> np.ndarray:
    """One Gaussian fixed effect per region, drawn once per call."""
    return rng.normal(0, REGION_EFFECT_SD, n_regions)


def health_score(
    rng: np.random.Generator,
    data: dict,
    B_activite: float,
    region_effects: np.ndarray,
) -> np.ndarray:
    """Combine causal effect, confounders, non-linearities and fixed effects.

    Parameters
    ----------
    data : dict
        Working arrays produced by the earlier stages.
    B_activite : float
        Direct causal effect of ActivitePhysique on ScoreSante.
    region_effects : array
        Output of :func:`draw_region_effects`, indexed by ``region_code - 1``.

    Returns
    -------
    np.ndarray
        ScoreSante clamped to ``HEALTH_RANGE`` and rounded to one decimal.
    """
    activity = data["ActivitePhysique"]
    age_c = data["Age"] - data["Age"].mean()
    activity_c = activity - activity.mean()
    locale = np.where(
        data["is_urbain"] == 1.0, LOCALE_EFFECTS["Urbain"], LOCALE_EFFECTS["Rural"]
    )
    epsilon = rng.normal(0, NOISE_SD, len(activity))

    score = (
        50
        + B_activite * activity
        + 3 * data["is_femme"]
        - 6 * data["is_fumeur"]
        + 0.15 * data["RevenuFamilial"]
        + 4 * data["is_secondaire"]
        + 7 * data["is_superieur"]
        # Quadratic age, U-shaped IMC
        - 0.15 * age_c
        - 0.008 * age_c**2
        - 0.3 * (data["IMC"] - IMC_OPTIMUM) ** 2
        + 1.8 * data["MotivationSante"]
        - 5 * data["EtatSanteChronique"]
        - 3 * data["is_buveur"]
        - 0.5 * data["StressPsychologique"]
        + 0.4 * data["SoutienSocial"]
        + 0.5 * data["QualiteSommeil"]
        + 0.2 * data["OccupationPhysique"]
        + 0.4 * data["AccesSoins"]
        + 0.3 * data["Alimentation"]
        # Interactions
        + 0.15 * activity_c * data["is_homme"]
        - 0.008 * activity * age_c
        - 0.5 * data["is_fumeur"] * age_c
        # Fixed effects
        + region_effects[data["region_code"] - 1]
        + locale
        + epsilon
    )
    return np.round(np.clip(score, *HEALTH_RANGE), 1)
