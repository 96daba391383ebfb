from __future__ import annotations

from collections import deque
from heapq import heappop, heappush
from itertools import count
from typing import Callable, Mapping

from ..graph.model import Graph, NodeId


Neighbors = Callable[[NodeId], Mapping[NodeId, float]]


def neighbor_fn(graph: Graph, mode: str = "out") -> Neighbors:
    """Pick which edges a shortest-path search may follow.

    ``out`` follows edge direction, ``in`` walks it backwards and ``all``
    ignores it (weights of opposite edges are summed). Undirected graphs give
    the same answer for every mode.
    """
    if mode not in ("out", "in", "all"):
        raise ValueError(f"mode must be 'out', 'in' or 'all', got {mode!r}")
    if not graph.directed or mode == "out":
        return graph.adjacency
    if mode == "in":
        return graph.in_adjacency

    def both(v: NodeId) -> Mapping[NodeId, float]:
        merged = dict(graph.adjacency(v))
        for w, wt in graph.in_adjacency(v).items():
            merged[w] = merged.get(w, 0) + wt
        return merged

    return both


def bfs_distances(nbrs: Neighbors, source: NodeId) -> dict[NodeId, float]:
    dist: dict[NodeId, float] = {source: 0}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w in nbrs(v):
            if w not in dist:
                dist[w] = dist[v] + 1
                queue.append(w)
    return dist


def dijkstra_distances(nbrs: Neighbors, source: NodeId) -> dict[NodeId, float]:
    dist: dict[NodeId, float] = {}
    seen: dict[NodeId, float] = {source: 0}
    c = count()  # node ids need not be orderable
    heap = [(0, next(c), source)]
    while heap:
        d, _, v = heappop(heap)
        if v in dist:
            continue
        dist[v] = d
        for w, cost in nbrs(v).items():
            vw = d + cost
            if w not in dist and (w not in seen or vw < seen[w]):
                seen[w] = vw
                heappush(heap, (vw, next(c), w))
    return dist


def shortest_path_dag(
    nbrs: Neighbors,
    source: NodeId,
    *,
    weighted: bool,
) -> tuple[list[NodeId], dict[NodeId, list[NodeId]], dict[NodeId, float]]:
    """Single-source shortest paths with path counts.

    Returns (order, preds, sigma): nodes in non-decreasing distance order,
    shortest-path predecessors of each reached node, and the number of
    shortest paths from ``source`` to each reached node. Self-loops are skipped.
    """
    order: list[NodeId] = []
    preds: dict[NodeId, list[NodeId]] = {source: []}
    sigma: dict[NodeId, float] = {source: 1.0}

    if not weighted:
        dist: dict[NodeId, int] = {source: 0}
        queue = deque([source])
        while queue:
            v = queue.popleft()
            order.append(v)
            for w in nbrs(v):
                if w == v:
                    continue
                if w not in dist:
                    dist[w] = dist[v] + 1
                    sigma[w] = 0.0
                    preds[w] = []
                    queue.append(w)
                if dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    preds[w].append(v)
        return order, preds, sigma

    done: set[NodeId] = set()
    seen: dict[NodeId, float] = {source: 0}
    c = count()
    heap = [(0, next(c), source)]
    while heap:
        d, _, v = heappop(heap)
        if v in done:
            continue
        done.add(v)
        order.append(v)
        for w, cost in nbrs(v).items():
            if w == v or w in done:
                continue
            vw = d + cost
            if w not in seen or vw < seen[w]:
                seen[w] = vw
                sigma[w] = sigma[v]
                preds[w] = [v]
                heappush(heap, (vw, next(c), w))
            elif vw == seen[w]:
                sigma[w] += sigma[v]
                preds[w].append(v)
    return order, preds, sigma
