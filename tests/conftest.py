#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Pytest configuration and shared fixtures.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from gfalace.lacing_core.data_structures import BlockGraph, Edge, Node, OrientedStep


# Three blocks of one region. Sample HG002 haplotype 1 chains 0-100, 100-250,
# 250-300; haplotype 2 has a gap between 50 and 60; one path has no locus range.
BLOCK_A = (
    "H\tVN:Z:1.0\n"
    "S\t1\tACGT\n"
    "S\t2\tGG\n"
    "L\t1\t+\t2\t+\t0M\n"
    "P\tHG002#1#chr1:0-100\t1+,2+\t*\n"
    "P\tHG002#2#chr1:0-50\t1+\t*\n"
    "P\tunplaced_contig\t2+\t*\n"
)

BLOCK_B = (
    "H\tVN:Z:1.0\n"
    "S\t1\tTTA\n"
    "S\t2\tC\n"
    "S\t3\tGA\n"
    "L\t1\t+\t2\t+\t0M\n"
    "L\t2\t+\t3\t-\t0M\n"
    "P\tHG002#1#chr1:100-250\t1+,2+,3-\t*\n"
    "P\tHG002#2#chr1:60-120\t2+,3-\t*\n"
)

BLOCK_C = (
    "H\tVN:Z:1.0\n"
    "S\t1\tAAAA\n"
    "P\tHG002#1#chr1:250-300\t1+\t*\n"
)

LACED_ABC = (
    "H\tVN:Z:1.0\n"
    "S\t1\tACGT\n"
    "S\t2\tGG\n"
    "S\t3\tTTA\n"
    "S\t4\tC\n"
    "S\t5\tGA\n"
    "S\t6\tAAAA\n"
    "L\t1\t+\t2\t+\t0M\n"
    "L\t2\t+\t3\t+\t0M\n"
    "L\t3\t+\t4\t+\t0M\n"
    "L\t4\t+\t5\t-\t0M\n"
    "L\t5\t-\t6\t+\t0M\n"
    "P\tHG002#1#chr1\t1+,2+,3+,4+,5-,6+\t*\n"
    "P\tHG002#2#chr1:0-50\t1+\t*\n"
    "P\tHG002#2#chr1:60-120\t4+,5-\t*\n"
)


def make_block(label, node_count, paths=None, links=()):
    """
    Build a BlockGraph with nodes 1..node_count.

    paths maps a path name to a list of node ids (forward) or OrientedSteps;
    links are (from_id, to_id) forward pairs.
    """
    block = BlockGraph(label=label)
    for node_id in range(1, node_count + 1):
        block.add_node(Node(node_id, "A" * node_id))
    for from_id, to_id in links:
        block.add_edge(Edge(OrientedStep(from_id), OrientedStep(to_id)))
    for name, steps in (paths or {}).items():
        block.add_path(name, [
            step if isinstance(step, OrientedStep) else OrientedStep(step)
            for step in steps
        ])
    return block


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="gfalace_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def block_factory():
    """Factory building in-memory blocks, see make_block."""
    return make_block


@pytest.fixture
def block_texts():
    """GFA text of the three example blocks, in lacing order."""
    return [BLOCK_A, BLOCK_B, BLOCK_C]


@pytest.fixture
def laced_abc_text():
    """Expected GFA output of lacing the three example blocks."""
    return LACED_ABC


@pytest.fixture
def block_files(temp_output_dir):
    """Write the three example blocks and return their paths in lacing order."""
    paths = []
    for name, text in (("a.gfa", BLOCK_A), ("b.gfa", BLOCK_B), ("c.gfa", BLOCK_C)):
        path = temp_output_dir / name
        path.write_text(text)
        paths.append(path)
    return paths

# GFALace v0.1.0
# Any usage is subject to this software's license.
