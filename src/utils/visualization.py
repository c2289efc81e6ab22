"""Shared plotting helpers for the simulated activity → health data."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from src.utils.config import CAUSAL_PARENTS, FIGURES_DIR, OUTCOME_COL, TREATMENT_COL


def plot_activity_health(
    df: pd.DataFrame,
    hue: str | None = "Sexe",
    save: bool = True,
    filename: str = "activite_sante.png",
) -> plt.Figure:
    """Mean ScoreSante per activity level, with the raw cloud behind it."""
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.scatter(
        df[TREATMENT_COL] + np.random.default_rng(0).uniform(-0.2, 0.2, len(df)),
        df[OUTCOME_COL],
        s=4,
        alpha=0.15,
        color="#999999",
    )
    sns.pointplot(
        data=df,
        x=TREATMENT_COL,
        y=OUTCOME_COL,
        hue=hue,
        native_scale=True,
        errorbar=("ci", 95),
        ax=ax,
    )
    true_effect = df.attrs.get("B_activite")
    title = "ScoreSante by ActivitePhysique"
    if true_effect is not None:
        title += f" (true direct effect = {true_effect})"
    ax.set_title(title)
    ax.set_xlabel("ActivitePhysique (0–10)")
    ax.set_ylabel("ScoreSante (0–100)")
    plt.tight_layout()
    if save:
        FIGURES_DIR.mkdir(parents=True, exist_ok=True)
        fig.savefig(FIGURES_DIR / filename, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return fig


def treatment_confounders(df: pd.DataFrame) -> list[str]:
    """Numeric direct causes of ActivitePhysique present in ``df``."""
    return [
        col
        for col in CAUSAL_PARENTS[TREATMENT_COL]
        if col in df.columns and pd.api.types.is_numeric_dtype(df[col])
    ]


def plot_confounder_balance(
    df: pd.DataFrame,
    covariates: list[str] | None = None,
    save: bool = True,
    filename: str = "confounder_balance.png",
) -> plt.Figure:
    """KDE plots of confounders for low vs high activity (split at the median).

    Shows the imbalance a naive ScoreSante ~ ActivitePhysique comparison
    ignores. Defaults to the numeric parents of ActivitePhysique.
    """
    if covariates is None:
        covariates = treatment_confounders(df)
    missing = [c for c in covariates if c not in df.columns]
    if missing:
        raise KeyError(f"Unknown covariates: {missing}")

    threshold = df[TREATMENT_COL].median()
    group = np.where(df[TREATMENT_COL] >= threshold, f"≥ {threshold:g}", f"< {threshold:g}")
    plot_df = df[covariates].assign(activity=group)

    n = len(covariates)
    cols = min(3, n)
    rows = (n + cols - 1) // cols
    fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 4 * rows))
    axes = np.atleast_1d(axes).flatten()

    for ax, cov in zip(axes, covariates):
        sns.kdeplot(data=plot_df, x=cov, hue="activity", ax=ax, fill=True, common_norm=False)
        ax.set_title(cov)

    for ax in axes[n:]:
        ax.set_visible(False)

    plt.suptitle(f"Confounders by {TREATMENT_COL} (median split)", fontsize=14)
    plt.tight_layout()
    if save:
        FIGURES_DIR.mkdir(parents=True, exist_ok=True)
        fig.savefig(FIGURES_DIR / filename, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return fig
