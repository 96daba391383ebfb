from __future__ import annotations

from ..graph.model import Graph, NodeId


def degree(
    graph: Graph,
    *,
    mode: str = "all",
    weighted: bool = True,
    normalized: bool = False,
) -> dict[NodeId, float]:
    """Count incident edges per node.

    Parallel edges count once each, and with ``weighted`` an edge of weight w
    counts w times. A self-loop touches its node twice. For directed graphs
    ``mode`` picks in-, out- or combined (in + out) degree.
    """
    if mode not in ("all", "in", "out"):
        raise ValueError(f"mode must be 'all', 'in' or 'out', got {mode!r}")

    deg: dict[NodeId, float] = dict.fromkeys(graph.nodes, 0)
    for e in graph.edges:
        w = e.weight if weighted else 1
        if not graph.directed or mode == "all":
            deg[e.source] += w
            deg[e.target] += w
        elif mode == "out":
            deg[e.source] += w
        else:
            deg[e.target] += w

    if normalized and len(deg) > 1:
        scale = 1.0 / (len(deg) - 1)
        deg = {k: v * scale for k, v in deg.items()}
    return deg
