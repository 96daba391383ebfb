from __future__ import annotations

from ..graph.model import Graph, NodeId
from .paths import neighbor_fn, shortest_path_dag


def betweenness(
    graph: Graph,
    *,
    weighted: bool = False,
    normalized: bool = False,
) -> dict[NodeId, float]:
    """Brandes betweenness: share of shortest s-t paths that pass through each node.

    Unweighted graphs are searched breadth-first; with ``weighted`` the
    accumulated edge weights are treated as distances. Undirected scores sum
    over unordered pairs, directed scores over ordered pairs.
    """
    bc: dict[NodeId, float] = dict.fromkeys(graph.nodes, 0.0)
    n = len(bc)
    if n <= 2:
        return bc

    nbrs = neighbor_fn(graph, "out")
    for s in graph.nodes:
        order, preds, sigma = shortest_path_dag(nbrs, s, weighted=weighted)

        # Walk back from the farthest node, pushing dependency onto predecessors.
        delta = dict.fromkeys(order, 0.0)
        while order:
            w = order.pop()
            coeff = (1.0 + delta[w]) / sigma[w]
            for v in preds[w]:
                delta[v] += sigma[v] * coeff
            if w != s:
                bc[w] += delta[w]

    # Each unordered pair was counted from both ends.
    scale = 1.0 if graph.directed else 0.5
    if normalized:
        pairs = (n - 1) * (n - 2)
        scale /= pairs if graph.directed else pairs / 2
    return {k: v * scale for k, v in bc.items()}
