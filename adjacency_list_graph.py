"""
Concrete directed, weighted graph container.

Implements the Graph interface using an adjacency-list representation and adds
the mutation and query API used by callers.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from graph import Graph, V, W
from graph_config import GraphConfig
from graph_errors import (
    DESTINATION,
    ORIGIN,
    DuplicateVertexError,
    EdgeNotFoundError,
    UnknownVertexError,
)
from vertex_policy import DuplicateVertexPolicy, get_duplicate_vertex_policy

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph[V, W]):
    """
    Directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    Enumeration order is vertex insertion order. Edges never dangle: both
    endpoints must exist when an edge is added, and removing a vertex removes
    every edge that touches it.
    """

    def __init__(self, policy: Optional[DuplicateVertexPolicy] = None) -> None:
        self._adj: Dict[V, Dict[V, W]] = {}
        self._policy = policy if policy is not None else get_duplicate_vertex_policy()

    @classmethod
    def from_config(cls, config: GraphConfig) -> AdjacencyListGraph[V, W]:
        """Create an empty graph using the policy from config."""
        return cls(policy=config.duplicate_vertex_policy)

    def __repr__(self) -> str:
        return (
            f"AdjacencyListGraph(V={self.vertex_count}, E={self.edge_count}, "
            f"policy={self._policy.value})"
        )

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._adj))

    @property
    def policy(self) -> DuplicateVertexPolicy:
        return self._policy

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the graph."""
        return sum(len(edges) for edges in self._adj.values())

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: V) -> AdjacencyListGraph[V, W]:
        """
        Add a vertex with no outgoing edges.

        An existing vertex is either rejected (STRICT) or removed together
        with its edges and re-inserted (REPLACE).
        """
        if vertex in self._adj:
            if self._policy is DuplicateVertexPolicy.STRICT:
                raise DuplicateVertexError(vertex)
            logger.debug("replacing vertex %r", vertex)
            self.remove_vertex(vertex)
        self._adj[vertex] = {}
        return self

    def add_edge(self, src: V, dst: V, weight: W) -> AdjacencyListGraph[V, W]:
        """
        Add or overwrite the directed edge src -> dst.

        Both vertices must already be in the graph.
        """
        edges = self._edges_from(src)
        if dst not in self._adj:
            raise UnknownVertexError(DESTINATION, dst)
        edges[dst] = weight
        return self

    def remove_edge(self, src: V, dst: V) -> bool:
        """
        Remove the directed edge src -> dst.

        Returns True if the edge existed, False if both vertices exist but are
        not connected.
        """
        edges = self._edges_from(src)
        if dst not in self._adj:
            raise UnknownVertexError(DESTINATION, dst)
        if dst not in edges:
            return False
        del edges[dst]
        return True

    def remove_vertex(self, vertex: V) -> bool:
        """
        Remove a vertex and ALL edges (inbound and outgoing) touching it.

        Returns False, changing nothing, if the vertex is not in the graph.
        """
        outgoing = self._adj.pop(vertex, None)
        if outgoing is None:
            return False
        inbound = 0
        for edges in self._adj.values():
            if vertex in edges:
                del edges[vertex]
                inbound += 1
        logger.debug(
            "removed vertex %r with %d outgoing and %d inbound edges",
            vertex,
            len(outgoing),
            inbound,
        )
        return True

    # --- Queries -------------------------------------------------------------

    def has(self, vertex: V) -> bool:
        return vertex in self._adj

    def find(self, predicate: Callable[[V], bool]) -> List[V]:
        """Return every vertex for which predicate is true, in graph order."""
        return [vertex for vertex in list(self._adj) if predicate(vertex)]

    def get_edges(self, vertex: V) -> List[Tuple[V, W]]:
        """Outgoing (destination, weight) pairs; empty for unknown vertices."""
        return list(self._adj.get(vertex, {}).items())

    def get_weight(self, src: V, dst: V) -> W:
        """
        Weight of the edge src -> dst.

        Input order matters: get_weight(a, b) and get_weight(b, a) are
        different edges.
        """
        edges = self._edges_from(src)
        if dst not in edges:
            raise EdgeNotFoundError(src, dst)
        return edges[dst]

    def get_all_vertices(self) -> List[V]:
        return list(self._adj)

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Iterable[V]:
        return self.get_all_vertices()

    def outgoing(self, vertex: V) -> Mapping[V, W]:
        return dict(self._adj.get(vertex, {}))  # copy

    # --- Internals -----------------------------------------------------------

    def _edges_from(self, src: V) -> Dict[V, W]:
        try:
            return self._adj[src]
        except KeyError:
            raise UnknownVertexError(ORIGIN, src) from None
