"""
Tests for the duplicate-vertex policy default and YAML graph config.
"""

from pathlib import Path

import pytest

import vertex_policy
from adjacency_list_graph import AdjacencyListGraph
from graph_config import GraphConfig, load_config, parse_config
from vertex_policy import DuplicateVertexPolicy, set_duplicate_vertex_policy


@pytest.fixture
def restore_default_policy():
    previous = vertex_policy.get_duplicate_vertex_policy()
    yield
    set_duplicate_vertex_policy(previous)


def test_default_policy_is_strict():
    assert vertex_policy.get_duplicate_vertex_policy() is DuplicateVertexPolicy.STRICT
    assert AdjacencyListGraph().policy is DuplicateVertexPolicy.STRICT


def test_set_default_policy_affects_new_graphs_only(restore_default_policy):
    before = AdjacencyListGraph()
    set_duplicate_vertex_policy(DuplicateVertexPolicy.REPLACE)
    after = AdjacencyListGraph()

    assert before.policy is DuplicateVertexPolicy.STRICT
    assert after.policy is DuplicateVertexPolicy.REPLACE

    after.add_vertex("x").add_vertex("x")
    assert after.vertex_count == 1


def test_policy_parse_accepts_names_and_values():
    assert DuplicateVertexPolicy.parse("strict") is DuplicateVertexPolicy.STRICT
    assert DuplicateVertexPolicy.parse("REPLACE") is DuplicateVertexPolicy.REPLACE
    assert DuplicateVertexPolicy.parse(" Replace ") is DuplicateVertexPolicy.REPLACE
    with pytest.raises(ValueError):
        DuplicateVertexPolicy.parse("merge")


def test_load_config_from_yaml(tmp_path: Path):
    path = tmp_path / "graph.yml"
    path.write_text("duplicate_vertex_policy: replace\n")

    cfg = load_config(path)
    assert cfg == GraphConfig(duplicate_vertex_policy=DuplicateVertexPolicy.REPLACE)

    g = AdjacencyListGraph.from_config(cfg)
    g.add_vertex(1).add_vertex(2).add_edge(1, 2, 0)
    g.add_vertex(1)
    assert g.edge_count == 0


def test_missing_policy_falls_back_to_default(tmp_path: Path, restore_default_policy):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path).duplicate_vertex_policy is DuplicateVertexPolicy.STRICT

    set_duplicate_vertex_policy(DuplicateVertexPolicy.REPLACE)
    assert parse_config({}).duplicate_vertex_policy is DuplicateVertexPolicy.REPLACE


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        parse_config(["strict"])
    with pytest.raises(ValueError):
        parse_config({"duplicate_vertex_policy": "sometimes"})
