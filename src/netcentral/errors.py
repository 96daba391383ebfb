from __future__ import annotations


class GraphError(Exception):
    """Base class for graph construction and analysis errors."""


class InvalidEdgeError(GraphError):
    """An edge references an unknown node or carries an unusable weight."""


class DuplicateNodeError(GraphError):
    """Two nodes share the same identifier."""


class NonConvergenceError(GraphError):
    """Power iteration hit its iteration cap before the scores settled."""

    def __init__(self, message: str, *, iterations: int, delta: float):
        super().__init__(message)
        self.iterations = iterations
        self.delta = delta


class DisconnectedGraphWarning(UserWarning):
    """Closeness was requested on a disconnected graph without choosing a component mode."""
