"""Synthetic activity → health dataset with a known causal effect."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from src.simulation import outcome, socio_behavioral, treatment
from src.simulation.assembly import assemble_table
from src.simulation.exogenous import draw_exogenous
from src.simulation.validation import validate_parameters
from src.utils.config import (
    DEFAULT_N_SAMPLES,
    N_REGIONS,
    RANDOM_SEED,
    TRUE_ACTIVITY_EFFECT,
)

logger = logging.getLogger(__name__)


def generate(
    n: int = DEFAULT_N_SAMPLES,
    n_regions: int = N_REGIONS,
    B_activite: float = TRUE_ACTIVITY_EFFECT,
    seed: int | np.random.Generator | None = RANDOM_SEED,
) -> pd.DataFrame:
    """Simulate a cross-sectional health survey with known causal structure.

    The data-generating process includes legitimate confounders, a mediator
    (``IMC``), an over-control variable (``MotivationSante``), a quadratic
    age effect, a U-shaped IMC effect, three interactions and region/locale
    fixed effects. The direct effect of ``ActivitePhysique`` on
    ``ScoreSante`` is exactly ``B_activite``.

    Parameters
    ----------
    n : int
        Number of observations; the table has exactly ``n`` rows.
    n_regions : int
        Number of regions (one fixed effect each).
    B_activite : float
        Causal coefficient of ActivitePhysique on ScoreSante.
    seed : int, Generator or None
        Seed for ``np.random.default_rng``. A ``Generator`` is used as-is
        and advanced by the call.

    Returns
    -------
    pd.DataFrame
        Columns in ``config.COLUMN_ORDER``. ``df.attrs`` holds the ground
        truth: ``B_activite``, ``n_regions``, ``region_effects`` and
        ``locale_effects``.

    Raises
    ------
    InvalidArgument
        If a parameter is outside its domain; nothing is drawn in that case.
    """
    n, n_regions, B_activite = validate_parameters(n, n_regions, B_activite, seed)
    rng = np.random.default_rng(seed)
    logger.info(
        "Generating %d observations (n_regions=%d, B_activite=%.3f)",
        n, n_regions, B_activite,
    )

    # ── Exogenous ──────────────────────────────────────────────────────────
    data = draw_exogenous(rng, n, n_regions)
    logger.debug("Exogenous variables drawn")

    # ── Socio-behavioural confounders ──────────────────────────────────────
    data.update(socio_behavioral.draw_education(rng, data))
    data["RevenuFamilial"] = socio_behavioral.draw_income(rng, data)
    data.update(socio_behavioral.draw_smoking(rng, data))
    data.update(socio_behavioral.draw_alcohol(rng, data))
    data["StressPsychologique"] = socio_behavioral.draw_stress(rng, data)
    data["SoutienSocial"] = socio_behavioral.draw_social_support(rng, data)

    # Provisional sleep pass, discarded once ActivitePhysique exists
    provisional_sleep = treatment.draw_provisional_sleep(rng, data)

    data["OccupationPhysique"] = socio_behavioral.draw_physical_occupation(rng, data)
    data["AccesSoins"] = socio_behavioral.draw_care_access(rng, data)
    data["Alimentation"] = socio_behavioral.draw_diet(rng, data)
    logger.debug("Socio-behavioural variables drawn")

    # ── Over-control, treatment, mediator ──────────────────────────────────
    data["MotivationSante"] = treatment.draw_motivation(rng, data)
    data["ActivitePhysique"] = treatment.draw_activity(rng, data)
    data["QualiteSommeil"] = treatment.draw_sleep(rng, data, data["ActivitePhysique"])
    logger.debug(
        "QualiteSommeil recomputed with realised activity (mean shift %.3f)",
        float(data["QualiteSommeil"].mean() - provisional_sleep.mean()),
    )
    del provisional_sleep
    data["IMC"] = treatment.draw_bmi(rng, data)
    data["EtatSanteChronique"] = treatment.draw_chronic_condition(rng, data)
    logger.debug("Treatment and mediator drawn")

    # ── Outcome ────────────────────────────────────────────────────────────
    region_effects = outcome.draw_region_effects(rng, n_regions)
    data["ScoreSante"] = outcome.health_score(rng, data, B_activite, region_effects)

    df = assemble_table(data, B_activite, region_effects, outcome.LOCALE_EFFECTS)
    logger.info(
        "Generated %d rows; mean ScoreSante=%.2f", len(df), df["ScoreSante"].mean()
    )
    return df
