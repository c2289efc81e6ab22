"""Tests for the activity → health data generator."""

import numpy as np
import pandas as pd
import pytest

from src.simulation import InvalidArgument, generate
from src.utils.config import COLUMN_ORDER, CATEGORIES, INTEGER_COLS


@pytest.fixture(scope="module")
def df():
    """Shared synthetic dataset for the structural checks."""
    return generate(n=5000, n_regions=5, B_activite=2.5, seed=42)


# ── Shape & types ──────────────────────────────────────────────────────────────

class TestShape:
    def test_returns_dataframe(self, df):
        assert isinstance(df, pd.DataFrame)

    def test_column_order(self, df):
        assert list(df.columns) == COLUMN_ORDER
        assert len(df.columns) == 19

    def test_row_count(self, df):
        assert len(df) == 5000

    def test_no_missing_values(self, df):
        assert df.isna().sum().sum() == 0

    @pytest.mark.parametrize("n", [1, 2, 3, 7, 10, 333, 1001])
    def test_row_count_exact_for_awkward_sizes(self, n):
        assert len(generate(n=n, seed=0)) == n

    def test_integer_columns(self, df):
        for col in INTEGER_COLS:
            assert df[col].dtype == np.int64, col

    def test_float_columns(self, df):
        for col in ["ScoreSante", "RevenuFamilial", "IMC"]:
            assert df[col].dtype == np.float64, col

    def test_categorical_levels(self, df):
        for col, levels in CATEGORIES.items():
            assert isinstance(df[col].dtype, pd.CategoricalDtype), col
            assert list(df[col].cat.categories) == levels

    def test_education_is_ordered(self, df):
        assert df["Education"].cat.ordered


# ── Domains ────────────────────────────────────────────────────────────────────

class TestDomains:
    def test_age_range(self, df):
        assert df["Age"].between(18, 80).all()

    def test_health_score_range(self, df):
        assert df["ScoreSante"].between(0, 100).all()

    def test_health_score_one_decimal(self, df):
        assert np.allclose(df["ScoreSante"], df["ScoreSante"].round(1))

    def test_imc_range(self, df):
        assert df["IMC"].between(16, 45).all()

    def test_income_floor(self, df):
        assert (df["RevenuFamilial"] >= 15).all()

    @pytest.mark.parametrize(
        "col",
        [
            "ActivitePhysique",
            "MotivationSante",
            "StressPsychologique",
            "SoutienSocial",
            "QualiteSommeil",
            "OccupationPhysique",
            "AccesSoins",
            "Alimentation",
        ],
    )
    def test_scores_in_0_10(self, df, col):
        assert df[col].between(0, 10).all()

    def test_chronic_is_binary(self, df):
        assert set(df["EtatSanteChronique"].unique()).issubset({0, 1})

    def test_both_sexes_present(self, df):
        assert set(df["Sexe"].unique()) == {"Homme", "Femme"}


# ── Regions ────────────────────────────────────────────────────────────────────

class TestRegions:
    @pytest.mark.parametrize("n_regions", [1, 3, 5, 8])
    def test_level_count_matches(self, n_regions):
        out = generate(n=2000, n_regions=n_regions, seed=1)
        assert len(out["Region"].cat.categories) == n_regions
        assert out["Region"].nunique() == n_regions

    def test_labels(self, df):
        assert list(df["Region"].cat.categories) == [
            "regionA", "regionB", "regionC", "regionD", "regionE",
        ]

    def test_more_than_26_regions(self):
        out = generate(n=100, n_regions=28, seed=0)
        cats = list(out["Region"].cat.categories)
        assert cats[25:] == ["regionZ", "regionAA", "regionAB"]

    def test_one_effect_per_region(self, df):
        effects = df.attrs["region_effects"]
        assert list(effects) == list(df["Region"].cat.categories)


# ── Reproducibility ────────────────────────────────────────────────────────────

class TestReproducibility:
    def test_deterministic(self):
        df1 = generate(n=1000, n_regions=5, B_activite=2.5, seed=42)
        df2 = generate(n=1000, n_regions=5, B_activite=2.5, seed=42)
        pd.testing.assert_frame_equal(df1, df2)

    def test_first_row_stable(self):
        first = [generate(n=1000, seed=123).iloc[0] for _ in range(2)]
        pd.testing.assert_series_equal(first[0], first[1])

    def test_seed_changes_table(self):
        df1 = generate(n=1000, seed=1)
        df2 = generate(n=1000, seed=2)
        assert not df1.equals(df2)

    def test_accepts_generator(self):
        df1 = generate(n=500, seed=np.random.default_rng(7))
        df2 = generate(n=500, seed=7)
        pd.testing.assert_frame_equal(df1, df2)

    def test_no_global_state(self):
        np.random.seed(0)
        df1 = generate(n=300, seed=5)
        np.random.seed(99)
        df2 = generate(n=300, seed=5)
        pd.testing.assert_frame_equal(df1, df2)

    def test_effect_only_changes_outcome(self):
        df1 = generate(n=1000, B_activite=0.0, seed=3)
        df2 = generate(n=1000, B_activite=4.0, seed=3)
        others = [c for c in COLUMN_ORDER if c != "ScoreSante"]
        assert df1[others].equals(df2[others])
        assert not df1["ScoreSante"].equals(df2["ScoreSante"])


# ── Causal sensitivity ─────────────────────────────────────────────────────────

class TestCausalEffect:
    def test_ground_truth_attached(self, df):
        assert df.attrs["B_activite"] == 2.5
        assert df.attrs["n_regions"] == 5
        assert df.attrs["locale_effects"] == {"Urbain": 2.0, "Rural": -2.0}

    def test_mean_increases_with_effect(self):
        means = [
            generate(n=2000, B_activite=b, seed=11)["ScoreSante"].mean()
            for b in (-1.0, 0.0, 1.0, 2.5)
        ]
        assert all(a < b for a, b in zip(means, means[1:]))

    def test_score_rowwise_non_decreasing(self):
        low = generate(n=2000, B_activite=1.0, seed=11)["ScoreSante"]
        high = generate(n=2000, B_activite=2.0, seed=11)["ScoreSante"]
        assert (high >= low).all()


# ── Validation ─────────────────────────────────────────────────────────────────

class TestInvalidInput:
    @pytest.mark.parametrize(
        "kwargs, parameter",
        [
            ({"n": -5}, "n"),
            ({"n": 0}, "n"),
            ({"n": 3.5}, "n"),
            ({"n": "100"}, "n"),
            ({"n_regions": 0}, "n_regions"),
            ({"n_regions": 2.5}, "n_regions"),
            ({"B_activite": "x"}, "B_activite"),
            ({"B_activite": float("nan")}, "B_activite"),
            ({"seed": "abc"}, "seed"),
        ],
    )
    def test_raises(self, kwargs, parameter):
        with pytest.raises(InvalidArgument) as exc:
            generate(**kwargs)
        assert exc.value.parameter == parameter
        assert parameter in str(exc.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            generate(n=-5)

    def test_integral_float_accepted(self):
        assert len(generate(n=100.0, n_regions=2.0, seed=0)) == 100
