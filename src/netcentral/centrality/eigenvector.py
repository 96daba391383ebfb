from __future__ import annotations

import numpy as np

from ..errors import NonConvergenceError
from ..graph.formats import to_adjacency_matrix
from ..graph.model import Graph, NodeId


def eigenvector(
    graph: Graph,
    *,
    weighted: bool = True,
    tol: float = 1e-6,
    max_iter: int = 1000,
) -> dict[NodeId, float]:
    """Eigenvector centrality by power iteration, scaled so the top node scores 1.

    Iterates x <- x + A^T x, which has the same dominant eigenvector as A but
    does not oscillate on bipartite graphs. For directed graphs a node is
    central when central nodes point to it. Nodes without edges score 0.

    Converged means no score moved by more than ``tol`` in one step;
    otherwise ``NonConvergenceError`` is raised after ``max_iter`` steps.
    """
    a, labels = to_adjacency_matrix(graph, weighted=weighted)
    n = len(labels)
    if n == 0:
        return {}

    # Start isolated nodes at zero so they stay there.
    connected = (a.sum(axis=0) + a.sum(axis=1)) > 0
    x = connected.astype(np.float64)
    if not connected.any():
        return dict.fromkeys(labels, 0.0)

    # Largest weight becomes 1, so step sizes do not depend on weight units.
    at = (a / a.max()).T

    delta = float("inf")
    for _ in range(int(max_iter)):
        nxt = x + at @ x
        nxt /= nxt.max()
        delta = float(np.abs(nxt - x).max())
        x = nxt
        if delta < tol:
            return {nid: float(x[i]) for i, nid in enumerate(labels)}

    raise NonConvergenceError(
        f"Eigenvector centrality did not converge in {max_iter} iterations (last change {delta:.3g})",
        iterations=int(max_iter),
        delta=delta,
    )
