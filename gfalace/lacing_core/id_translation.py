#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Node id translation - folds a block into the combined graph.

Every block owns the dense id range [1, m]. Folding block i shifts its ids
by the number of nodes already in the combined graph, so the blocks occupy
consecutive, non-overlapping id ranges in argument order.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from typing import Dict, List
import logging

from .data_structures import BlockGraph, CombinedGraph, Node, OrientedStep
from ..errors import BlockStructureError

logger = logging.getLogger(__name__)


@dataclass
class TranslatedBlock:
    """Paths of one block after translation, plus where the block landed."""
    index: int
    label: str
    offset: int
    node_count: int
    edge_count: int
    paths: Dict[str, List[OrientedStep]]


def translate_block(combined: CombinedGraph, block: BlockGraph, index: int) -> TranslatedBlock:
    """
    Shift a block's ids by the current combined node count and insert it.

    Nodes and edges are copied into the combined graph (edges deduplicated);
    paths are returned translated but are not added, since only the path
    builder may create paths.

    Args:
        combined: Combined graph, mutated in place
        block: Loaded block with node ids 1..m
        index: Position of the block in the input order

    Returns:
        TranslatedBlock carrying translated paths in file order

    Raises:
        BlockStructureError: If the block's ids are not the dense range 1..m
    """
    if not block.is_dense():
        raise BlockStructureError(
            f"{block.label}: segment ids must be the dense range 1..{block.node_count} "
            f"(found {min(block.nodes)}..{max(block.nodes)})"
        )

    offset = combined.node_count

    for node_id in sorted(block.nodes):
        combined.add_node(Node(node_id + offset, block.nodes[node_id].seq))

    for edge in block.edges:
        combined.add_edge(edge.shifted(offset))

    paths = {
        name: [step.shifted(offset) for step in steps]
        for name, steps in block.paths.items()
    }

    logger.info(
        f"Block {index} ({block.label}): {block.node_count} nodes, "
        f"{len(block.edges)} edges, {len(paths)} paths, id offset {offset}"
    )

    return TranslatedBlock(
        index=index,
        label=block.label,
        offset=offset,
        node_count=block.node_count,
        edge_count=len(block.edges),
        paths=paths,
    )

# GFALace v0.1.0
# Any usage is subject to this software's license.
