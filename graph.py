"""
Directed, weighted graph abstraction.

Vertices are any hashable values.
Edges are directed: u -> v carrying an arbitrary weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Iterable, Mapping, TypeVar

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")


class Graph(ABC, Generic[V, W]):
    """Read-only view of a directed, weighted graph."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: V) -> Mapping[V, W]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[V, W], empty if the vertex is unknown.
        """
        raise NotImplementedError
