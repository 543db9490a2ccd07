#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Tests for node id translation and the combined graph.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from gfalace.errors import BlockStructureError
from gfalace.lacing_core.data_structures import (
    BlockGraph,
    CombinedGraph,
    Edge,
    Node,
    OrientedStep,
)
from gfalace.lacing_core.id_translation import translate_block


class TestTranslateBlock:
    """Test folding blocks into the combined graph."""

    def test_first_block_keeps_ids(self, block_factory):
        combined = CombinedGraph()
        block = block_factory("a", 3, links=[(1, 2), (2, 3)])

        translated = translate_block(combined, block, 0)

        assert translated.offset == 0
        assert sorted(combined.nodes) == [1, 2, 3]
        assert combined.edges == {
            Edge(OrientedStep(1), OrientedStep(2)),
            Edge(OrientedStep(2), OrientedStep(3)),
        }

    def test_offsets_are_running_node_totals(self, block_factory):
        """Each block is shifted by the number of nodes of all earlier blocks."""
        combined = CombinedGraph()
        sizes = [4, 1, 7, 2]

        offsets = [
            translate_block(combined, block_factory(f"b{i}", size), i).offset
            for i, size in enumerate(sizes)
        ]

        assert offsets == [0, 4, 5, 12]
        assert combined.node_count == sum(sizes)
        assert sorted(combined.nodes) == list(range(1, sum(sizes) + 1))

    def test_sequences_follow_their_nodes(self, block_factory):
        combined = CombinedGraph()
        translate_block(combined, block_factory("a", 2), 0)
        translate_block(combined, block_factory("b", 2), 1)

        # make_block gives node i the sequence 'A' * i
        assert combined.get_node_sequence(3) == "A"
        assert combined.get_node_sequence(4) == "AA"

    def test_paths_translated_not_added(self, block_factory):
        combined = CombinedGraph()
        translate_block(combined, block_factory("a", 5), 0)
        block = block_factory("b", 2, paths={"s#1#c:0-10": [OrientedStep(2, True), 1]})

        translated = translate_block(combined, block, 1)

        assert translated.paths == {"s#1#c:0-10": [OrientedStep(7, True), OrientedStep(6)]}
        assert combined.path_count == 0

    def test_edge_strands_preserved(self):
        combined = CombinedGraph()
        translate_block(combined, _block_with_nodes("a", 1), 0)
        block = _block_with_nodes("b", 2)
        block.add_edge(Edge(OrientedStep(1, True), OrientedStep(2, False)))

        translate_block(combined, block, 1)

        assert Edge(OrientedStep(2, True), OrientedStep(3, False)) in combined.edges

    def test_sparse_ids_rejected(self):
        block = BlockGraph(label="sparse")
        block.add_node(Node(1, "A"))
        block.add_node(Node(5, "C"))

        with pytest.raises(BlockStructureError):
            translate_block(CombinedGraph(), block, 0)

    def test_empty_block(self):
        combined = CombinedGraph()
        translated = translate_block(combined, BlockGraph(label="empty"), 0)

        assert translated.node_count == 0
        assert combined.node_count == 0


class TestCombinedGraph:
    """Test combined graph bookkeeping."""

    def test_edge_added_once(self):
        combined = CombinedGraph()
        edge = Edge(OrientedStep(1), OrientedStep(2, True))

        assert combined.add_edge(edge) is True
        assert combined.add_edge(Edge(OrientedStep(1), OrientedStep(2, True))) is False
        assert combined.edge_count == 1

    def test_orientation_distinguishes_edges(self):
        combined = CombinedGraph()
        combined.add_edge(Edge(OrientedStep(1), OrientedStep(2)))
        combined.add_edge(Edge(OrientedStep(1), OrientedStep(2, True)))
        combined.add_edge(Edge(OrientedStep(2), OrientedStep(1)))

        assert combined.edge_count == 3

    def test_duplicate_node_rejected(self):
        combined = CombinedGraph()
        combined.add_node(Node(1, "A"))

        with pytest.raises(BlockStructureError):
            combined.add_node(Node(1, "C"))

    def test_sorted_path_names_by_bytes(self):
        combined = CombinedGraph()
        for name in ["b", "B", "a#2", "a#10"]:
            combined.create_path(name)

        assert combined.sorted_path_names() == ["B", "a#10", "a#2", "b"]


def _block_with_nodes(label, count):
    block = BlockGraph(label=label)
    for node_id in range(1, count + 1):
        block.add_node(Node(node_id, "T"))
    return block

# GFALace v0.1.0
# Any usage is subject to this software's license.
