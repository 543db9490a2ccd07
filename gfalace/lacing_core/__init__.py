"""
GFALace v0.1.0

Lacing core - id translation, range extraction, range reconciliation and
path building over the combined graph.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .data_structures import (
    OrientedStep,
    Node,
    Edge,
    BlockGraph,
    CombinedGraph,
)
from .id_translation import TranslatedBlock, translate_block
from .range_extraction import LocusKey, RangeInfo, parse_path_name, extract_ranges
from .range_reconciler import (
    OverlapReport,
    ReconciledPath,
    LocusReconciliation,
    reconcile_locus,
    reconcile_ranges,
)
from .path_builder import build_path, build_paths, connect_steps
from .lace_engine import LaceResult, BlockLacer, lace_block_graphs, lace_gfa_files

__all__ = [
    # Graph model
    "OrientedStep",
    "Node",
    "Edge",
    "BlockGraph",
    "CombinedGraph",

    # Stages
    "TranslatedBlock",
    "translate_block",
    "LocusKey",
    "RangeInfo",
    "parse_path_name",
    "extract_ranges",
    "OverlapReport",
    "ReconciledPath",
    "LocusReconciliation",
    "reconcile_locus",
    "reconcile_ranges",
    "build_path",
    "build_paths",
    "connect_steps",

    # Pipeline
    "LaceResult",
    "BlockLacer",
    "lace_block_graphs",
    "lace_gfa_files",
]
