"""Conversions between graphs and the matrix / edge-list layouts used for network data.

Three input layouts are common in practice:

- adjacency matrix: square, entry (i, j) is the tie strength from i to j
- incidence matrix: rows and columns are two kinds of entity (say authors and
  papers), entry (i, j) marks membership; this yields a two-mode graph
- edge list: one (source, target[, weight]) row per tie

Two-mode graphs mark each node with a boolean ``type`` attribute: False for
rows of the incidence matrix, True for columns.
"""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Any, Iterable, Sequence

import numpy as np

from ..errors import InvalidEdgeError
from .model import Edge, Graph, Node, NodeId


def _square(matrix: Any) -> np.ndarray:
    m = np.asarray(matrix)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {m.shape}")
    return m


def _labels(labels: Sequence[NodeId] | None, n: int, *, start: int = 0) -> list[NodeId]:
    if labels is None:
        return list(range(start, start + n))
    out = list(labels)
    if len(out) != n:
        raise ValueError(f"Expected {n} labels, got {len(out)}")
    return out


def from_adjacency_matrix(
    matrix: Any,
    labels: Sequence[NodeId] | None = None,
    *,
    directed: bool = False,
) -> Graph:
    """Build a graph from a square matrix; each non-zero entry becomes one weighted edge.

    Undirected input must be symmetric and is read from the upper triangle
    (diagonal included, as self-loops).
    """
    m = _square(matrix)
    n = m.shape[0]
    ids = _labels(labels, n)

    if not directed and not np.array_equal(m, m.T):
        raise ValueError("Undirected adjacency matrix must be symmetric")

    edges: list[Edge] = []
    for i in range(n):
        start = 0 if directed else i
        for j in range(start, n):
            w = m[i, j].item()
            if w == 0:
                continue
            edges.append(Edge(source=ids[i], target=ids[j], weight=w))

    return Graph([Node(id=i) for i in ids], edges, directed=directed)


def to_adjacency_matrix(graph: Graph, *, weighted: bool = True) -> tuple[np.ndarray, list[NodeId]]:
    """Return (A, labels) where A[i, j] is the accumulated weight from i to j."""
    labels = list(graph.nodes)
    index = {nid: i for i, nid in enumerate(labels)}
    a = np.zeros((len(labels), len(labels)), dtype=np.float64)
    for nid in labels:
        i = index[nid]
        for nbr, w in graph.adjacency(nid).items():
            a[i, index[nbr]] = float(w) if weighted else 1.0
    return a, labels


def from_incidence_matrix(
    matrix: Any,
    row_labels: Sequence[NodeId] | None = None,
    col_labels: Sequence[NodeId] | None = None,
) -> Graph:
    """Build a two-mode graph: one edge per non-zero (row, column) entry."""
    m = np.asarray(matrix)
    if m.ndim != 2:
        raise ValueError(f"Incidence matrix must be 2-D, got shape {m.shape}")
    n_rows, n_cols = m.shape
    rows = _labels(row_labels, n_rows)
    cols = _labels(col_labels, n_cols, start=n_rows)

    nodes = [Node(id=r, attrs={"type": False}) for r in rows]
    nodes += [Node(id=c, attrs={"type": True}) for c in cols]

    edges: list[Edge] = []
    for i in range(n_rows):
        for j in range(n_cols):
            w = m[i, j].item()
            if w == 0:
                continue
            edges.append(Edge(source=rows[i], target=cols[j], weight=w))

    return Graph(nodes, edges, directed=False)


def from_edge_list(pairs: Iterable[Sequence[Any]], *, directed: bool = False) -> Graph:
    """Build a graph from (a, b) or (a, b, weight) tuples; nodes appear in first-seen order."""
    seen: dict[NodeId, None] = {}
    edges: list[Edge] = []
    for p in pairs:
        if len(p) == 2:
            a, b = p
            w = 1
        elif len(p) == 3:
            a, b, w = p
        else:
            raise InvalidEdgeError(f"Edge tuple must have 2 or 3 items, got {tuple(p)!r}")
        seen.setdefault(a, None)
        seen.setdefault(b, None)
        edges.append(Edge(source=a, target=b, weight=w))
    return Graph([Node(id=nid) for nid in seen], edges, directed=directed)


def project_bipartite(graph: Graph, *, keep_type: bool = False) -> Graph:
    """One-mode projection of a two-mode graph.

    Keeps the nodes whose ``type`` attribute equals ``keep_type`` and links two
    of them once per partner they share; the edge weight is that count. With
    authors as rows and papers as columns, ``keep_type=False`` gives a
    co-authorship network.
    """
    types: dict[NodeId, bool] = {}
    for nid in graph.nodes:
        attrs = graph.node(nid).attrs
        if "type" not in attrs:
            raise ValueError(f"Node {nid!r} has no 'type' attribute; not a two-mode graph")
        types[nid] = bool(attrs["type"])

    order = {nid: i for i, nid in enumerate(graph.nodes)}
    shared: dict[tuple[NodeId, NodeId], int] = defaultdict(int)
    for partner, t in types.items():
        if t == keep_type:
            continue
        members = sorted((v for v in graph.neighbors(partner) if types[v] == keep_type), key=order.__getitem__)
        for a, b in combinations(members, 2):
            shared[(a, b)] += 1

    nodes = [graph.node(nid) for nid in graph.nodes if types[nid] == keep_type]
    edges = [Edge(source=a, target=b, weight=w) for (a, b), w in shared.items()]
    return Graph(nodes, edges, directed=False)
