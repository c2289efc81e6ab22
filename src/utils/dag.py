"""Causal DAG definition and utilities."""

from __future__ import annotations

import matplotlib.pyplot as plt
import networkx as nx

from src.utils.config import CAUSAL_PARENTS, FIGURES_DIR, OUTCOME_COL, TREATMENT_COL


class CausalDAG:
    """Lightweight wrapper around a ``networkx.DiGraph`` for causal analysis."""

    def __init__(self) -> None:
        self.graph = nx.DiGraph()

    # ── Build ──────────────────────────────────────────────────────────────
    def add_edges(self, edges: list[tuple[str, str]]) -> None:
        self.graph.add_edges_from(edges)

    @classmethod
    def from_parents(cls, parents: dict[str, list[str]]) -> "CausalDAG":
        dag = cls()
        dag.graph.add_nodes_from(parents)
        dag.add_edges([(p, child) for child, ps in parents.items() for p in ps])
        return dag

    @classmethod
    def activity_health_dag(cls) -> "CausalDAG":
        """DAG of the simulated activity → health data."""
        return cls.from_parents(CAUSAL_PARENTS)

    # ── Structure ──────────────────────────────────────────────────────────
    def parents(self, node: str) -> set[str]:
        return set(self.graph.predecessors(node))

    def descendants(self, node: str) -> set[str]:
        return nx.descendants(self.graph, node)

    def is_acyclic(self) -> bool:
        return nx.is_directed_acyclic_graph(self.graph)

    def topological_order(self) -> list[str]:
        return list(nx.topological_sort(self.graph))

    # ── Identification helpers ─────────────────────────────────────────────
    def backdoor_variables(
        self,
        treatment: str = TREATMENT_COL,
        outcome: str = OUTCOME_COL,
    ) -> set[str]:
        """Parent‑based adjustment set, excluding descendants of treatment."""
        post_treatment = self.descendants(treatment)
        return (self.parents(treatment) | self.parents(outcome)) - {treatment} - post_treatment

    def mediators(
        self,
        treatment: str = TREATMENT_COL,
        outcome: str = OUTCOME_COL,
    ) -> set[str]:
        """Variables on a directed path treatment → … → outcome."""
        return self.descendants(treatment) & nx.ancestors(self.graph, outcome)

    # ── Visualisation ──────────────────────────────────────────────────────
    def plot(self, save: bool = True, filename: str = "causal_dag.png") -> None:
        fig, ax = plt.subplots(figsize=(14, 10))
        pos = nx.spring_layout(self.graph, seed=0, k=2)
        colors = [
            "#C44E52" if node in (TREATMENT_COL, OUTCOME_COL) else "#4C72B0"
            for node in self.graph.nodes
        ]
        nx.draw_networkx(
            self.graph,
            pos,
            ax=ax,
            node_color=colors,
            font_color="white",
            font_size=7,
            font_weight="bold",
            node_size=2500,
            arrowsize=15,
            edge_color="#999999",
        )
        ax.set_title("Causal DAG — ActivitePhysique → ScoreSante", fontsize=14)
        plt.tight_layout()
        if save:
            FIGURES_DIR.mkdir(parents=True, exist_ok=True)
            fig.savefig(FIGURES_DIR / filename, dpi=150, bbox_inches="tight")
        plt.close(fig)
