"""
Duplicate-vertex policy for graph containers.

Decides what add_vertex does when the vertex is already present.
"""

from enum import Enum


class DuplicateVertexPolicy(Enum):
    """
    Behaviour of add_vertex on an existing vertex.

    STRICT: raise DuplicateVertexError and leave the graph unchanged.
    REPLACE: remove the vertex (and all edges touching it), then re-insert it.
    """

    STRICT = "strict"
    REPLACE = "replace"

    @classmethod
    def parse(cls, name: str) -> "DuplicateVertexPolicy":
        """Look up a policy by enum name or value, ignoring case."""
        key = name.strip().lower()
        for policy in cls:
            if key in (policy.name.lower(), policy.value):
                return policy
        choices = ", ".join(p.value for p in cls)
        raise ValueError(f"unknown duplicate vertex policy {name!r} (expected one of: {choices})")


# Default used by graphs constructed without an explicit policy.
DUPLICATE_VERTEX_POLICY: DuplicateVertexPolicy = DuplicateVertexPolicy.STRICT


def set_duplicate_vertex_policy(policy: DuplicateVertexPolicy) -> None:
    """Set the default duplicate-vertex policy for graphs created afterwards."""
    global DUPLICATE_VERTEX_POLICY
    DUPLICATE_VERTEX_POLICY = policy


def get_duplicate_vertex_policy() -> DuplicateVertexPolicy:
    """Return the current default duplicate-vertex policy."""
    return DUPLICATE_VERTEX_POLICY
