"""Descriptive summary of a simulated dataset."""

from __future__ import annotations

import pandas as pd

from src.utils.config import OUTCOME_COL, TREATMENT_COL


def summarize_data(df: pd.DataFrame) -> dict:
    """Read-only descriptive statistics.

    Returns
    -------
    dict
        ``n_rows``; ``numeric`` (``df.describe()`` of numeric columns);
        ``categorical`` (``{column: {level: share}}``); ``raw_correlation``
        between treatment and outcome; ``ground_truth`` copied from
        ``df.attrs``.
    """
    numeric = df.select_dtypes(include="number")
    categorical = {
        col: df[col].value_counts(normalize=True, sort=False).round(4).to_dict()
        for col in df.select_dtypes(include=["category", "object"]).columns
    }
    raw_corr = None
    if TREATMENT_COL in df.columns and OUTCOME_COL in df.columns and len(df) > 1:
        raw_corr = float(df[TREATMENT_COL].corr(df[OUTCOME_COL]))

    return {
        "n_rows": len(df),
        "numeric": numeric.describe().round(3),
        "categorical": categorical,
        "raw_correlation": raw_corr,
        "ground_truth": dict(df.attrs),
    }
