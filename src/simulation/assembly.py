"""Cast working arrays to their final types and build the output frame."""

from __future__ import annotations

import numpy as np
import pandas as pd

from src.utils.config import (
    CATEGORIES,
    COLUMN_ORDER,
    FLOAT_COLS,
    INTEGER_COLS,
    ORDERED_CATEGORICALS,
)


def assemble_table(
    data: dict,
    B_activite: float,
    region_effects: np.ndarray,
    locale_effects: dict[str, float],
) -> pd.DataFrame:
    """Build the DataFrame in ``COLUMN_ORDER``; no value is recomputed here.

    Integer scores are truncated toward zero (all are non-negative), the
    ground truth of the draw is attached to ``df.attrs``.
    """
    categories = dict(CATEGORIES, Region=list(data["region_levels"]))

    columns = {}
    for col in COLUMN_ORDER:
        values = data[col]
        if col in categories:
            columns[col] = pd.Categorical(
                values,
                categories=categories[col],
                ordered=col in ORDERED_CATEGORICALS,
            )
        elif col in INTEGER_COLS:
            columns[col] = np.trunc(values).astype(np.int64)
        elif col in FLOAT_COLS:
            columns[col] = np.asarray(values, dtype=np.float64)
        else:
            raise KeyError(f"No output type declared for column {col!r}")

    df = pd.DataFrame(columns, columns=COLUMN_ORDER)
    df.attrs["B_activite"] = float(B_activite)
    df.attrs["n_regions"] = len(data["region_levels"])
    df.attrs["region_effects"] = {
        label: float(effect)
        for label, effect in zip(data["region_levels"], region_effects)
    }
    df.attrs["locale_effects"] = dict(locale_effects)
    return df
