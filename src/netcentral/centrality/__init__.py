"""Node centrality measures.

Every measure is a pure function of a ``Graph`` returning {node_id: score}.
``compute_centralities`` runs several at once and regroups the results per
node, which is the shape plotting code usually wants.
"""

from __future__ import annotations

from typing import Any, Iterable

from ..graph.model import Graph, NodeId
from .betweenness import betweenness
from .closeness import closeness
from .degree import degree
from .eigenvector import eigenvector


MEASURES = ("degree", "betweenness", "closeness", "eigenvector")


def compute_centralities(
    graph: Graph,
    measures: Iterable[str] = MEASURES,
    *,
    weighted_paths: bool = False,
    closeness_component: str | None = None,
    eigen_tol: float = 1e-6,
    eigen_max_iter: int = 1000,
) -> dict[NodeId, dict[str, float | None]]:
    """Return {node_id: {measure: score}} for the requested measures.

    ``weighted_paths`` applies to betweenness and closeness; degree and
    eigenvector always use edge weights. Nodes left out of a closeness run
    restricted to the largest component get ``None``.
    """
    wanted = list(dict.fromkeys(measures))
    unknown = [m for m in wanted if m not in MEASURES]
    if unknown:
        raise ValueError(f"Unknown measure(s): {', '.join(unknown)}. Choose from {', '.join(MEASURES)}")

    per_measure: dict[str, dict[NodeId, float]] = {}
    for m in wanted:
        if m == "degree":
            per_measure[m] = degree(graph)
        elif m == "betweenness":
            per_measure[m] = betweenness(graph, weighted=weighted_paths)
        elif m == "closeness":
            per_measure[m] = closeness(graph, weighted=weighted_paths, component=closeness_component)
        else:
            per_measure[m] = eigenvector(graph, tol=eigen_tol, max_iter=eigen_max_iter)

    return {nid: {m: per_measure[m].get(nid) for m in wanted} for nid in graph.nodes}


def rank(
    scores: dict[NodeId, dict[str, Any]],
    measure: str,
    *,
    top: int | None = None,
) -> list[tuple[NodeId, dict[str, Any]]]:
    """Sort nodes best-first by one measure; missing scores go last."""
    rows = sorted(
        scores.items(),
        key=lambda kv: (kv[1].get(measure) is None, -(kv[1].get(measure) or 0.0)),
    )
    return rows[:top] if top is not None else rows


__all__ = [
    "MEASURES",
    "betweenness",
    "closeness",
    "compute_centralities",
    "degree",
    "eigenvector",
    "rank",
]
