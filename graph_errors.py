"""
Errors raised by graph containers.

Every error is a caller-correctable usage error; the graph is left unchanged
by the call that raised it. Constructor arguments are kept in ``args`` so the
errors survive pickling and copying.
"""

from typing import Any

ORIGIN = "origin"
DESTINATION = "destination"


class GraphError(Exception):
    """Base class for all graph container errors."""


class UnknownVertexError(GraphError, LookupError):
    """
    An operation referenced a vertex that is not in the graph.

    ``role`` tells which argument was at fault: "origin" or "destination".
    """

    def __init__(self, role: str, vertex: Any) -> None:
        if role not in (ORIGIN, DESTINATION):
            raise ValueError(f"role must be {ORIGIN!r} or {DESTINATION!r}, got {role!r}")
        super().__init__(role, vertex)
        self.role = role
        self.vertex = vertex

    def __str__(self) -> str:
        return f"{self.role} vertex {self.vertex!r} doesn't exist in the graph"


class DuplicateVertexError(GraphError, ValueError):
    """Vertex already exists and the graph does not allow replacing it."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"vertex {self.vertex!r} already exists in the graph"


class EdgeNotFoundError(GraphError, LookupError):
    """No edge origin -> destination exists."""

    def __init__(self, origin: Any, destination: Any) -> None:
        super().__init__(origin, destination)
        self.origin = origin
        self.destination = destination

    def __str__(self) -> str:
        return f"no edge {self.origin!r} -> {self.destination!r} in the graph"
