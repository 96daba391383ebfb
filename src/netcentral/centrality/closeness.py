from __future__ import annotations

import warnings

from ..errors import DisconnectedGraphWarning
from ..graph.components import connected_components
from ..graph.model import Graph, NodeId
from .paths import bfs_distances, dijkstra_distances, neighbor_fn


COMPONENT_MODES = ("largest", "all")


def closeness(
    graph: Graph,
    *,
    weighted: bool = False,
    mode: str = "out",
    component: str | None = None,
) -> dict[NodeId, float]:
    """closeness(v) = (r - 1) / sum of distances from v to the r - 1 other nodes it reaches.

    A node that reaches nothing scores 0.0.

    On a disconnected graph the caller chooses what to do:

    - ``component="largest"`` scores only the largest connected component
      (as if the rest of the graph did not exist); other nodes are left out
      of the result.
    - ``component="all"`` scores every node over whatever it can reach.
    - ``component=None`` behaves like ``"all"`` but issues a
      ``DisconnectedGraphWarning`` so the choice is not made silently.
    """
    if component is not None and component not in COMPONENT_MODES:
        raise ValueError(f"component must be one of {COMPONENT_MODES} or None, got {component!r}")

    comps = connected_components(graph)
    if component == "largest":
        if len(comps) > 1:
            graph = graph.subgraph(comps[0])
    elif component is None and len(comps) > 1:
        warnings.warn(
            f"Graph has {len(comps)} components; closeness only counts reachable nodes. "
            "Pass component='largest' or component='all' to choose explicitly.",
            DisconnectedGraphWarning,
            stacklevel=2,
        )

    nbrs = neighbor_fn(graph, mode)
    search = dijkstra_distances if weighted else bfs_distances

    out: dict[NodeId, float] = {}
    for v in graph.nodes:
        dist = search(nbrs, v)
        total = sum(dist.values())
        reached = len(dist) - 1
        out[v] = reached / total if total > 0 else 0.0
    return out
