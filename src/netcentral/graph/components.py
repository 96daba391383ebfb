from __future__ import annotations

from collections import deque

from .model import Graph, NodeId


def connected_components(graph: Graph) -> list[list[NodeId]]:
    """Return components under undirected reachability, largest first.

    Equal-sized components keep the order of their first node in the graph.
    """
    seen: set[NodeId] = set()
    comps: list[list[NodeId]] = []

    for start in graph.nodes:
        if start in seen:
            continue
        seen.add(start)
        comp = [start]
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for w in graph.neighbors(v):
                if w not in seen:
                    seen.add(w)
                    comp.append(w)
                    queue.append(w)
        comps.append(comp)

    # sorted() is stable, so ties keep discovery order.
    return sorted(comps, key=len, reverse=True)


def is_connected(graph: Graph) -> bool:
    # An empty graph counts as connected.
    return len(connected_components(graph)) <= 1


def largest_component(graph: Graph) -> list[NodeId]:
    comps = connected_components(graph)
    return comps[0] if comps else []


def largest_component_subgraph(graph: Graph) -> Graph:
    return graph.subgraph(largest_component(graph))
