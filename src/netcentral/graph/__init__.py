"""Graph model and construction helpers.

Graphs are built once from node/edge records (or a matrix / edge list) and
then treated as read-only snapshots by the centrality functions.
"""

from .components import connected_components, is_connected, largest_component, largest_component_subgraph
from .formats import (
    from_adjacency_matrix,
    from_edge_list,
    from_incidence_matrix,
    project_bipartite,
    to_adjacency_matrix,
)
from .model import Edge, Graph, Node, NodeId

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "NodeId",
    "connected_components",
    "from_adjacency_matrix",
    "from_edge_list",
    "from_incidence_matrix",
    "is_connected",
    "largest_component",
    "largest_component_subgraph",
    "project_bipartite",
    "to_adjacency_matrix",
]
