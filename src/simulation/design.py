"""Model-ready features for benchmarking estimators on the simulated data."""

from __future__ import annotations

import pandas as pd

from src.simulation.outcome import IMC_OPTIMUM
from src.utils.config import OUTCOME_COL, TREATMENT_COL


def encode_categoricals(df: pd.DataFrame) -> pd.DataFrame:
    """One‑hot encode every categorical column; numeric columns as‑is."""
    cat_cols = list(df.select_dtypes(include=["category", "object"]).columns)
    if not cat_cols:
        return df
    dummies = pd.get_dummies(df[cat_cols], prefix=cat_cols, drop_first=True, dtype=int)
    return pd.concat([df.drop(columns=cat_cols), dummies], axis=1)


def add_structural_terms(df: pd.DataFrame) -> pd.DataFrame:
    """Add the non-linear and interaction terms of the outcome equation.

    With these columns a linear regression of ScoreSante is correctly
    specified, so the coefficient on ActivitePhysique targets ``B_activite``.
    """
    df = df.copy()
    age_c = df["Age"] - df["Age"].mean()
    is_homme = (df["Sexe"] == "Homme").astype(int)
    is_fumeur = (df["Tabagisme"] == "Fumeur").astype(int)

    df["Age_c"] = age_c
    df["Age_c2"] = age_c**2
    df["IMC_dev2"] = (df["IMC"] - IMC_OPTIMUM) ** 2
    df["AP_x_Homme"] = df[TREATMENT_COL] * is_homme
    df["AP_x_Age_c"] = df[TREATMENT_COL] * age_c
    df["Fumeur_x_Age_c"] = is_fumeur * age_c
    return df.drop(columns=["Age"])


def build_design_matrix(
    df: pd.DataFrame,
    covariates: list[str] | None = None,
    structural: bool = True,
) -> pd.DataFrame:
    """Numeric feature matrix with the treatment as first column.

    Parameters
    ----------
    covariates : list[str] or None
        Columns to adjust for. ``None`` keeps every column except the
        outcome.
    structural : bool
        Add the terms from :func:`add_structural_terms`. These are built
        from Age, Sexe, Tabagisme and IMC whether or not they are listed
        in ``covariates``; ``Age`` itself is replaced by ``Age_c``.
    """
    if covariates is None:
        covariates = [c for c in df.columns if c not in (OUTCOME_COL, TREATMENT_COL)]
    covariates = [c for c in covariates if c not in (OUTCOME_COL, TREATMENT_COL)]
    missing = [c for c in covariates if c not in df.columns]
    if missing:
        raise KeyError(f"Unknown covariates: {missing}")

    X = df[[TREATMENT_COL] + covariates]
    if structural:
        needed = {"Age", "Sexe", "Tabagisme", "IMC"} - set(X.columns)
        X = add_structural_terms(pd.concat([X, df[sorted(needed)]], axis=1))
        X = X.drop(columns=[c for c in needed if c in X.columns])
    X = encode_categoricals(X)
    return X.astype(float)
