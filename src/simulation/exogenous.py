"""Root variables with no upstream parents: Region, Milieu, Age, Sexe."""

from __future__ import annotations

import string

import numpy as np

from src.simulation.transforms import indicator
from src.utils.config import AGE_RANGE

YOUNG_SHARE = 0.3


def region_labels(n_regions: int) -> list[str]:
    """``regionA``, ``regionB``, … continuing ``regionAA`` after ``regionZ``."""
    labels = []
    for i in range(n_regions):
        suffix = ""
        k = i + 1
        while k > 0:
            k, rem = divmod(k - 1, 26)
            suffix = string.ascii_uppercase[rem] + suffix
        labels.append(f"region{suffix}")
    return labels


def mixture_split(n: int) -> tuple[int, int]:
    """Integer sizes of the (young, old) age components; they always sum to ``n``."""
    n_young = int(round(n * YOUNG_SHARE))
    return n_young, n - n_young


def draw_exogenous(rng: np.random.Generator, n: int, n_regions: int) -> dict:
    """Draw the exogenous variables and their explicit indicators."""
    levels = region_labels(n_regions)
    region_code = rng.integers(1, n_regions + 1, n)
    region = np.asarray(levels, dtype=object)[region_code - 1]

    milieu = rng.choice(["Urbain", "Rural"], size=n, p=[0.7, 0.3])

    # Two-component mixture: younger adults then older adults
    n_young, n_old = mixture_split(n)
    age = np.round(
        np.concatenate([rng.normal(35, 8, n_young), rng.normal(55, 12, n_old)])
    )
    age = np.clip(age, *AGE_RANGE)

    sexe = rng.choice(["Homme", "Femme"], size=n, p=[0.45, 0.55])

    return {
        "region_levels": levels,
        "Region": region,
        "region_code": region_code,
        "Milieu": milieu,
        "Age": age,
        "Sexe": sexe,
        "is_urbain": indicator(milieu == "Urbain"),
        "is_rural": indicator(milieu == "Rural"),
        "is_homme": indicator(sexe == "Homme"),
        "is_femme": indicator(sexe == "Femme"),
    }
