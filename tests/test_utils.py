"""Tests for the DAG, summary and plotting utilities."""

import matplotlib

matplotlib.use("Agg")

import pytest

from src.simulation import build_design_matrix, generate
from src.utils.config import (
    COLUMN_ORDER,
    GENERATION_ORDER,
    MEDIATOR_COL,
    OUTCOME_COL,
    OVERCONTROL_COL,
    TREATMENT_COL,
)
from src.utils.dag import CausalDAG
from src.utils.summary import summarize_data
from src.utils.visualization import (
    plot_activity_health,
    plot_confounder_balance,
    treatment_confounders,
)


@pytest.fixture(scope="module")
def dag():
    return CausalDAG.activity_health_dag()


@pytest.fixture(scope="module")
def df():
    return generate(n=800, seed=3)


# ── DAG ────────────────────────────────────────────────────────────────────────

class TestDAG:
    def test_nodes_are_columns(self, dag):
        assert set(dag.graph.nodes) == set(COLUMN_ORDER)

    def test_acyclic(self, dag):
        assert dag.is_acyclic()

    def test_generation_order_is_topological(self, dag):
        position = {node: i for i, node in enumerate(GENERATION_ORDER)}
        for parent, child in dag.graph.edges:
            assert position[parent] < position[child], (parent, child)

    def test_topological_order_complete(self, dag):
        order = dag.topological_order()
        assert len(order) == len(COLUMN_ORDER)
        assert order[-1] == OUTCOME_COL

    def test_mediator(self, dag):
        mediators = dag.mediators()
        assert MEDIATOR_COL in mediators
        assert "QualiteSommeil" in mediators
        assert OVERCONTROL_COL not in mediators

    def test_backdoor_excludes_post_treatment(self, dag):
        adj = dag.backdoor_variables()
        assert TREATMENT_COL not in adj
        assert MEDIATOR_COL not in adj
        assert "EtatSanteChronique" not in adj
        assert {"Age", "Sexe", OVERCONTROL_COL, "Region", "Milieu"} <= adj

    def test_backdoor_set_builds_design_matrix(self, dag, df):
        adj = sorted(dag.backdoor_variables())
        X = build_design_matrix(df, covariates=adj, structural=False)
        assert X.columns[0] == TREATMENT_COL
        for post_treatment in dag.descendants(TREATMENT_COL):
            assert not any(c.startswith(post_treatment) for c in X.columns), post_treatment
        assert any(c.startswith("Region_") for c in X.columns)
        assert "MotivationSante" in X.columns

    def test_plot_without_saving(self, dag):
        dag.plot(save=False)


# ── Summary ────────────────────────────────────────────────────────────────────

class TestSummary:
    def test_structure(self, df):
        summary = summarize_data(df)
        assert summary["n_rows"] == 800
        assert "ScoreSante" in summary["numeric"].columns
        assert set(summary["categorical"]["Sexe"]) == {"Homme", "Femme"}
        assert -1 <= summary["raw_correlation"] <= 1

    def test_shares_sum_to_one(self, df):
        shares = summarize_data(df)["categorical"]["Milieu"]
        assert sum(shares.values()) == pytest.approx(1.0, abs=1e-3)

    def test_ground_truth(self, df):
        truth = summarize_data(df)["ground_truth"]
        assert truth["B_activite"] == 2.5
        assert len(truth["region_effects"]) == 5

    def test_read_only(self, df):
        before = df.copy()
        summarize_data(df)
        assert df.equals(before)


# ── Plots ──────────────────────────────────────────────────────────────────────

class TestPlots:
    def test_activity_health(self, df):
        fig = plot_activity_health(df, save=False)
        assert fig.axes[0].get_xlabel().startswith("ActivitePhysique")

    def test_treatment_confounders_are_numeric_parents(self, df):
        assert treatment_confounders(df) == [
            "MotivationSante",
            "RevenuFamilial",
            "Age",
            "StressPsychologique",
            "SoutienSocial",
        ]

    def test_confounder_balance_defaults(self, df):
        fig = plot_confounder_balance(df, save=False)
        visible = [ax for ax in fig.axes if ax.get_visible()]
        assert [ax.get_title() for ax in visible] == treatment_confounders(df)

    def test_confounder_balance_subset(self, df):
        fig = plot_confounder_balance(df, ["Age", "IMC"], save=False)
        assert len(fig.axes) == 2

    def test_confounder_balance_unknown_column(self, df):
        with pytest.raises(KeyError):
            plot_confounder_balance(df, ["Nope"], save=False)
