#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Lacing pipeline - folds blocks into one graph and rebuilds genome paths.

Blocks are processed strictly in input order: each block's id offset is
the combined node count after all earlier blocks, so loading and
translation stay sequential.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union
import logging

from .data_structures import BlockGraph, CombinedGraph
from .id_translation import TranslatedBlock, translate_block
from .path_builder import build_paths
from .range_extraction import RangeInfo, extract_ranges
from .range_reconciler import LocusReconciliation, OverlapReport, reconcile_ranges

logger = logging.getLogger(__name__)


@dataclass
class LaceResult:
    """Combined graph plus what happened while building it."""
    graph: CombinedGraph
    blocks: List[TranslatedBlock] = field(default_factory=list)
    loci: List[LocusReconciliation] = field(default_factory=list)
    dropped_paths: int = 0

    @property
    def overlaps(self) -> List[OverlapReport]:
        return [overlap for locus in self.loci for overlap in locus.overlaps]


class BlockLacer:
    """
    Accumulates blocks into a CombinedGraph and finishes with path lacing.

    Usage:
        lacer = BlockLacer()
        for block in blocks:
            lacer.add_block(block)
        result = lacer.finish()
    """

    def __init__(self, report_overlaps: bool = True):
        self.report_overlaps = report_overlaps
        self.graph = CombinedGraph()
        self.blocks: List[TranslatedBlock] = []
        self.ranges: List[RangeInfo] = []
        self.dropped_paths = 0
        self._finished = False

    def add_block(self, block: BlockGraph) -> TranslatedBlock:
        """Translate a block into the combined graph and collect its ranges."""
        if self._finished:
            raise RuntimeError("Cannot add blocks after finish()")

        translated = translate_block(self.graph, block, len(self.blocks))
        ranges = extract_ranges(translated)

        self.dropped_paths += len(translated.paths) - len(ranges)
        self.blocks.append(translated)
        self.ranges.extend(ranges)
        return translated

    def finish(self) -> LaceResult:
        """Reconcile all collected ranges and build the final paths."""
        if self._finished:
            raise RuntimeError("finish() already called")
        self._finished = True

        loci = reconcile_ranges(self.ranges, report_overlaps=self.report_overlaps)
        path_count = build_paths(
            self.graph, (path for locus in loci for path in locus.paths)
        )

        logger.info(
            f"Laced {len(self.blocks)} blocks: {self.graph.node_count} nodes, "
            f"{self.graph.edge_count} edges, {path_count} paths "
            f"({len(loci)} loci, {self.dropped_paths} paths without locus range)"
        )
        return LaceResult(
            graph=self.graph,
            blocks=self.blocks,
            loci=loci,
            dropped_paths=self.dropped_paths,
        )


def lace_block_graphs(blocks: Iterable[BlockGraph], report_overlaps: bool = True) -> LaceResult:
    """
    Lace already-loaded blocks, in iteration order.

    Args:
        blocks: Block graphs
        report_overlaps: Log a warning for each overlapping range pair

    Returns:
        LaceResult
    """
    lacer = BlockLacer(report_overlaps=report_overlaps)
    for block in blocks:
        lacer.add_block(block)
    return lacer.finish()


def lace_gfa_files(gfa_paths: Iterable[Union[str, Path]],
                   temp_dir: Optional[Union[str, Path]] = None,
                   report_overlaps: bool = True) -> LaceResult:
    """
    Load GFA blocks one at a time and lace them.

    Each block is released as soon as it has been folded in.

    Args:
        gfa_paths: GFA files (plain or gzip), in lacing order
        temp_dir: Directory for temporary decompressed copies
        report_overlaps: Log a warning for each overlapping range pair

    Returns:
        LaceResult
    """
    from ..io_utils.gfa_reader import load_block_graph

    lacer = BlockLacer(report_overlaps=report_overlaps)
    for gfa_path in gfa_paths:
        block = load_block_graph(gfa_path, temp_dir=temp_dir)
        lacer.add_block(block)
    return lacer.finish()

# GFALace v0.1.0
# Any usage is subject to this software's license.
