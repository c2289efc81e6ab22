"""Over-control variable, treatment, sleep, mediator and chronic illness."""

from __future__ import annotations

import numpy as np

from src.simulation.transforms import bounded_score, expit, integer_score
from src.utils.config import IMC_RANGE, SCORE_RANGE

# Activity value assumed before ActivitePhysique exists
PROVISIONAL_ACTIVITY = 5.0


def draw_motivation(rng: np.random.Generator, data: dict) -> np.ndarray:
    """MotivationSante: drives both activity and health (over-control)."""
    n = len(data["Age"])
    return integer_score(
        5
        + 2 * data["is_femme"]
        + 1.5 * data["is_superieur"]
        + 0.5 * data["is_non_fumeur"]
        + rng.normal(0, 1.5, n),
        *SCORE_RANGE,
    )


def draw_activity(rng: np.random.Generator, data: dict) -> np.ndarray:
    """ActivitePhysique, the treatment of interest."""
    n = len(data["Age"])
    return integer_score(
        2
        + 0.8 * data["MotivationSante"]
        + 1.2 * data["is_homme"]
        + 0.02 * data["RevenuFamilial"]
        + 0.8 * data["is_superieur"]
        + 1.5 * data["is_urbain"]
        - 0.03 * data["Age"]
        - 1.5 * data["is_fumeur"]
        - 0.8 * data["StressPsychologique"]
        + 0.5 * data["SoutienSocial"]
        + rng.normal(0, 1.2, n),
        *SCORE_RANGE,
    )


def draw_sleep(
    rng: np.random.Generator,
    data: dict,
    activity: np.ndarray | float,
) -> np.ndarray:
    """QualiteSommeil for a given activity level."""
    n = len(data["Age"])
    return integer_score(
        6
        - 0.03 * data["Age"]
        - 0.6 * data["StressPsychologique"]
        + 0.4 * np.asarray(activity, dtype=float)
        + rng.normal(0, 1.0, n),
        *SCORE_RANGE,
    )


def draw_provisional_sleep(rng: np.random.Generator, data: dict) -> np.ndarray:
    """First, throw-away sleep pass at ``PROVISIONAL_ACTIVITY``.

    Only its random draws matter: they keep the draw sequence of the later
    variables fixed. The value is replaced by :func:`draw_sleep` once
    ActivitePhysique is realised.
    """
    return draw_sleep(rng, data, PROVISIONAL_ACTIVITY)


def draw_bmi(rng: np.random.Generator, data: dict) -> np.ndarray:
    """IMC, the mediator on Activite → IMC → Santé."""
    n = len(data["Age"])
    return bounded_score(
        25
        - 0.8 * data["ActivitePhysique"]
        + 0.08 * data["Age"]
        - 1.2 * data["is_homme"]
        + 0.5 * data["is_fumeur"]
        - 0.05 * data["RevenuFamilial"]
        + 0.3 * data["Alimentation"]
        + rng.normal(0, 2.5, n),
        *IMC_RANGE,
    )


def chronic_probability(data: dict) -> np.ndarray:
    return expit(
        -3
        + 0.05 * data["Age"]
        + 0.7 * data["is_fumeur"]
        + 0.1 * data["IMC"]
        - 0.01 * data["RevenuFamilial"]
    )


def draw_chronic_condition(rng: np.random.Generator, data: dict) -> np.ndarray:
    return rng.binomial(1, chronic_probability(data))
