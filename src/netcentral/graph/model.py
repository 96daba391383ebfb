from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping

from ..errors import DuplicateNodeError, InvalidEdgeError


NodeId = Hashable


@dataclass(frozen=True)
class Node:
    id: NodeId
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))


@dataclass(frozen=True)
class Edge:
    source: NodeId
    target: NodeId
    weight: float = 1
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))


def _check_weight(edge: Edge) -> None:
    w = edge.weight
    if isinstance(w, bool) or not isinstance(w, Real):
        raise InvalidEdgeError(f"Edge {edge.source!r} -> {edge.target!r} has non-numeric weight {w!r}")
    # Also rejects NaN.
    if not w > 0:
        raise InvalidEdgeError(f"Edge {edge.source!r} -> {edge.target!r} has non-positive weight {w!r}")


class Graph:
    """An immutable node/edge snapshot.

    Node order is the order nodes were supplied in; every result keyed by node
    follows it. Parallel edges are kept as separate records in ``edges`` and
    summed into a single weight in the adjacency views.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge], *, directed: bool = False):
        self._directed = bool(directed)

        self._nodes: dict[NodeId, Node] = {}
        for n in nodes:
            if n.id in self._nodes:
                raise DuplicateNodeError(f"Duplicate node id: {n.id!r}")
            self._nodes[n.id] = n

        self._out: dict[NodeId, dict[NodeId, float]] = {nid: {} for nid in self._nodes}
        if self.directed:
            self._in: dict[NodeId, dict[NodeId, float]] = {nid: {} for nid in self._nodes}
        else:
            self._in = self._out

        kept: list[Edge] = []
        for e in edges:
            for endpoint in (e.source, e.target):
                if endpoint not in self._nodes:
                    raise InvalidEdgeError(
                        f"Edge {e.source!r} -> {e.target!r} references unknown node {endpoint!r}"
                    )
            _check_weight(e)

            a, b = e.source, e.target
            self._out[a][b] = self._out[a].get(b, 0) + e.weight
            if self.directed:
                self._in[b][a] = self._in[b].get(a, 0) + e.weight
            elif a != b:
                self._out[b][a] = self._out[b].get(a, 0) + e.weight
            kept.append(e)

        self._edges: tuple[Edge, ...] = tuple(kept)

    @classmethod
    def from_records(
        cls,
        nodes: Iterable[Mapping[str, Any]],
        edges: Iterable[Mapping[str, Any]],
        *,
        directed: bool = False,
        node_key: str = "id",
        source_key: str = "source",
        target_key: str = "target",
        weight_key: str = "weight",
    ) -> "Graph":
        """Build a graph from mapping-of-records input.

        Keys other than the id/source/target/weight keys are kept as attributes.
        A missing or empty weight means 1.
        """
        node_objs: list[Node] = []
        for r in nodes:
            if node_key not in r:
                raise KeyError(f"Node record is missing {node_key!r}: {dict(r)!r}")
            attrs = {k: v for k, v in r.items() if k != node_key}
            node_objs.append(Node(id=r[node_key], attrs=attrs))

        edge_objs: list[Edge] = []
        for r in edges:
            if source_key not in r or target_key not in r:
                raise KeyError(f"Edge record needs {source_key!r} and {target_key!r}: {dict(r)!r}")
            w = r.get(weight_key)
            if w is None or w == "":
                w = 1
            attrs = {k: v for k, v in r.items() if k not in (source_key, target_key, weight_key)}
            edge_objs.append(Edge(source=r[source_key], target=r[target_key], weight=w, attrs=attrs))

        return cls(node_objs, edge_objs, directed=directed)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def nodes(self) -> tuple[NodeId, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    def node(self, node_id: NodeId) -> Node:
        return self._nodes[node_id]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"<Graph {kind} nodes={len(self._nodes)} edges={len(self._edges)}>"

    def number_of_edges(self) -> int:
        return len(self._edges)

    def total_weight(self) -> float:
        return sum(e.weight for e in self._edges)

    def adjacency(self, node_id: NodeId) -> Mapping[NodeId, float]:
        """Out-neighbours (or all neighbours when undirected) -> accumulated weight."""
        return MappingProxyType(self._out[node_id])

    def in_adjacency(self, node_id: NodeId) -> Mapping[NodeId, float]:
        return MappingProxyType(self._in[node_id])

    def neighbors(self, node_id: NodeId) -> set[NodeId]:
        """Neighbours under undirected reachability, ignoring self-loops."""
        out = set(self._out[node_id]) | set(self._in[node_id])
        out.discard(node_id)
        return out

    def edge_list(self) -> list[tuple[NodeId, NodeId, float]]:
        return [(e.source, e.target, e.weight) for e in self._edges]

    def subgraph(self, node_ids: Iterable[NodeId]) -> "Graph":
        """Induced subgraph; node order follows this graph, not ``node_ids``."""
        keep = set(node_ids)
        missing = keep - set(self._nodes)
        if missing:
            raise KeyError(f"Unknown node ids: {sorted(map(repr, missing))}")
        nodes = [n for nid, n in self._nodes.items() if nid in keep]
        edges = [e for e in self._edges if e.source in keep and e.target in keep]
        return Graph(nodes, edges, directed=self.directed)

    def edge_multiplicity(self) -> dict[tuple[NodeId, NodeId], int]:
        """Number of edge records per adjacent pair (unordered when undirected)."""
        counts: dict[tuple[NodeId, NodeId], int] = defaultdict(int)
        for e in self._edges:
            key = (e.source, e.target)
            if not self.directed and (e.target, e.source) in counts:
                key = (e.target, e.source)
            counts[key] += 1
        return dict(counts)
