"""
YAML configuration for graph containers.

Example file:

    duplicate_vertex_policy: replace
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from vertex_policy import DuplicateVertexPolicy, get_duplicate_vertex_policy


@dataclass(frozen=True)
class GraphConfig:
    duplicate_vertex_policy: DuplicateVertexPolicy = field(
        default_factory=get_duplicate_vertex_policy
    )


def parse_config(data: object) -> GraphConfig:
    """Build a GraphConfig from an already-parsed YAML document."""
    if data is None:
        return GraphConfig()
    if not isinstance(data, dict):
        raise ValueError(f"graph config must be a mapping, got {type(data).__name__}")
    policy_name = data.get("duplicate_vertex_policy")
    if policy_name is None:
        return GraphConfig()
    return GraphConfig(duplicate_vertex_policy=DuplicateVertexPolicy.parse(str(policy_name)))


def load_config(path: Path) -> GraphConfig:
    return parse_config(yaml.safe_load(path.read_text()))
