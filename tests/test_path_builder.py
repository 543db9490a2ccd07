#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Tests for building reconciled paths and their edges.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from gfalace.lacing_core.data_structures import CombinedGraph, Edge, Node, OrientedStep
from gfalace.lacing_core.path_builder import build_path, build_paths, connect_steps
from gfalace.lacing_core.range_extraction import LocusKey
from gfalace.lacing_core.range_reconciler import ReconciledPath

KEY = LocusKey("s", "1", "c")


def _graph(node_count):
    graph = CombinedGraph()
    for node_id in range(1, node_count + 1):
        graph.add_node(Node(node_id, "A"))
    return graph


def _path(name, steps):
    return ReconciledPath(name=name, key=KEY, start=0, end=10, steps=list(steps))


class TestConnectSteps:
    """Test edge derivation from consecutive steps."""

    def test_consecutive_pairs_connected(self):
        graph = _graph(3)
        steps = [OrientedStep(1), OrientedStep(2, True), OrientedStep(3)]

        added = connect_steps(graph, steps)

        assert added == 2
        assert graph.edges == {
            Edge(OrientedStep(1), OrientedStep(2, True)),
            Edge(OrientedStep(2, True), OrientedStep(3)),
        }

    def test_existing_edge_not_duplicated(self):
        graph = _graph(2)
        graph.add_edge(Edge(OrientedStep(1), OrientedStep(2)))

        added = connect_steps(graph, [OrientedStep(1), OrientedStep(2)])

        assert added == 0
        assert graph.edge_count == 1

    def test_same_pair_twice_in_one_path(self):
        graph = _graph(2)
        steps = [OrientedStep(1), OrientedStep(2), OrientedStep(1), OrientedStep(2)]

        connect_steps(graph, steps)

        assert graph.edges == {
            Edge(OrientedStep(1), OrientedStep(2)),
            Edge(OrientedStep(2), OrientedStep(1)),
        }

    def test_single_step_no_edges(self):
        graph = _graph(1)
        assert connect_steps(graph, [OrientedStep(1)]) == 0
        assert graph.edge_count == 0


class TestBuildPaths:
    """Test path creation in the combined graph."""

    def test_path_created_with_steps(self):
        graph = _graph(3)
        steps = [OrientedStep(3), OrientedStep(1)]

        name = build_path(graph, _path("s#1#c", steps))

        assert name == "s#1#c"
        assert graph.paths["s#1#c"] == steps
        assert Edge(OrientedStep(3), OrientedStep(1)) in graph.edges

    def test_build_twice_idempotent_for_edges(self):
        graph = _graph(2)
        steps = [OrientedStep(1), OrientedStep(2)]

        build_paths(graph, [_path("s#1#c:0-10", steps), _path("s#2#c:0-10", steps)])

        assert graph.path_count == 2
        assert graph.edge_count == 1

    def test_duplicate_name_gets_suffix(self):
        graph = _graph(2)

        build_paths(graph, [
            _path("s#1#c:0-10", [OrientedStep(1)]),
            _path("s#1#c:0-10", [OrientedStep(2)]),
            _path("s#1#c:0-10", [OrientedStep(1)]),
        ])

        assert sorted(graph.paths) == ["s#1#c:0-10", "s#1#c:0-10_1", "s#1#c:0-10_2"]
        assert graph.paths["s#1#c:0-10_1"] == [OrientedStep(2)]

# GFALace v0.1.0
# Any usage is subject to this software's license.
