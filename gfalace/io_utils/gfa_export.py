#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

GFA Export - deterministic GFA v1 writer for the laced graph, GFA file
inspection, and lace statistics JSON.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import gzip
import io
import json
import logging
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from ..errors import GFAParseError
from ..lacing_core.data_structures import CombinedGraph, Edge, Node, OrientedStep
from .gfa_reader import is_gzipped

if TYPE_CHECKING:
    from ..lacing_core.lace_engine import LaceResult

logger = logging.getLogger(__name__)

GFA_VERSION = '1.0'


# ============================================================================
#                           GFA RECORDS
# ============================================================================

@dataclass
class GFASegment:
    """Represents a GFA S-line (segment)."""
    node_id: int
    sequence: str
    include_sequence: bool = True

    @classmethod
    def from_node(cls, node: Node, include_sequence: bool = True) -> GFASegment:
        return cls(node.id, node.seq, include_sequence)

    def to_gfa_line(self) -> str:
        """
        Convert to GFA S-line format.

        Format: S <id> <sequence>
        Without sequence: S <id> * LN:i:<length>
        """
        if self.include_sequence:
            return f"S\t{self.node_id}\t{self.sequence or '*'}"
        return f"S\t{self.node_id}\t*\tLN:i:{len(self.sequence)}"


@dataclass
class GFALink:
    """Represents a GFA L-line (link/edge)."""
    edge: Edge
    overlap: str = '0M'

    def to_gfa_line(self) -> str:
        """
        Convert to GFA L-line format.

        Format: L <from> <from_orient> <to> <to_orient> <overlap>
        """
        return (f"L\t{self.edge.from_id}\t{self.edge.from_step.orientation}\t"
                f"{self.edge.to_id}\t{self.edge.to_step.orientation}\t{self.overlap}")


@dataclass
class GFAPath:
    """Represents a GFA P-line (path)."""
    name: str
    steps: list[OrientedStep]

    def to_gfa_line(self) -> str:
        """
        Convert to GFA P-line format.

        Format: P <name> <id><orient>,<id><orient>,... *
        """
        step_str = ','.join(step.to_gfa_token() for step in self.steps) or '*'
        return f"P\t{self.name}\t{step_str}\t*"


# ============================================================================
#                       GFA EXPORT FUNCTIONS
# ============================================================================

def write_gfa(graph: CombinedGraph, handle: TextIO, include_sequence: bool = True) -> dict[str, int]:
    """
    Write the laced graph as GFA v1 to an open text handle.

    Ordering is fixed: header, segments by id, links by
    (from id, to id, from strand, to strand), paths by name bytes.

    Args:
        graph: Combined graph
        handle: Writable text handle
        include_sequence: If False, write '*' with an LN tag instead of bases

    Returns:
        Dict with 'segments', 'links' and 'paths' counts
    """
    handle.write(f"H\tVN:Z:{GFA_VERSION}\n")

    segments = 0
    for node in graph.sorted_nodes():
        handle.write(GFASegment.from_node(node, include_sequence).to_gfa_line() + "\n")
        segments += 1

    links = 0
    for edge in graph.sorted_edges():
        handle.write(GFALink(edge).to_gfa_line() + "\n")
        links += 1

    paths = 0
    for name in graph.sorted_path_names():
        handle.write(GFAPath(name, graph.paths[name]).to_gfa_line() + "\n")
        paths += 1

    return {'segments': segments, 'links': links, 'paths': paths}


def export_laced_graph_to_gfa(
    graph: CombinedGraph,
    output_path: str | Path,
    include_sequence: bool = True
) -> dict[str, int]:
    """
    Export the laced graph to a GFA file, overwriting any existing file.

    Output paths ending in .gz/.gzip are gzip-compressed with a zero
    header timestamp, so repeated runs stay byte-identical.

    Args:
        graph: Combined graph
        output_path: Destination file
        include_sequence: If False, write '*' with an LN tag instead of bases

    Returns:
        Dict with 'segments', 'links' and 'paths' counts

    Raises:
        OSError: If the destination cannot be created or written
    """
    output_path = Path(output_path)
    logger.info(f"Exporting laced graph to GFA: {output_path}")

    if is_gzipped(output_path):
        with open(output_path, 'wb') as raw, \
                gzip.GzipFile(filename='', mode='wb', fileobj=raw, mtime=0) as gz, \
                io.TextIOWrapper(gz, encoding='utf-8', newline='\n') as f:
            counts = write_gfa(graph, f, include_sequence)
    else:
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            counts = write_gfa(graph, f, include_sequence)

    logger.info(f"GFA export complete: {output_path}")
    logger.info(f"  Segments: {counts['segments']}")
    logger.info(f"  Links: {counts['links']}")
    logger.info(f"  Paths: {counts['paths']}")
    return counts


# ============================================================================
#                           UTILITY FUNCTIONS
# ============================================================================

def validate_gfa_file(gfa_path: str | Path) -> dict[str, Any]:
    """
    Validate a GFA file and return basic statistics.

    Args:
        gfa_path: Path to GFA file (can be gzipped)

    Returns:
        Dict with keys: 'segments', 'links', 'paths', 'version'
    """
    gfa_path = Path(gfa_path)
    stats: dict[str, Any] = {
        'segments': 0,
        'links': 0,
        'paths': 0,
        'version': None
    }

    opener = gzip.open if is_gzipped(gfa_path) else open
    try:
        with opener(gfa_path, 'rt', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue

                record_type = line.split('\t', 1)[0]
                if record_type == 'H':
                    if 'VN:Z:' in line:
                        stats['version'] = line.split('VN:Z:')[1].split()[0]
                elif record_type == 'S':
                    stats['segments'] += 1
                elif record_type == 'L':
                    stats['links'] += 1
                elif record_type == 'P':
                    stats['paths'] += 1
    except (EOFError, zlib.error) as e:
        raise GFAParseError(f"cannot decompress: {e}", gfa_path) from e

    return stats


def export_lace_stats(result: LaceResult, output_path: str | Path) -> dict[str, Any]:
    """
    Calculate and export lacing statistics to JSON.

    Args:
        result: Outcome of a lacing run
        output_path: Path to output JSON file

    Returns:
        Dictionary of statistics
    """
    output_path = Path(output_path)
    logger.info("Calculating lace statistics...")

    graph = result.graph
    stats: dict[str, Any] = {
        'num_blocks': len(result.blocks),
        'num_nodes': graph.node_count,
        'num_edges': graph.edge_count,
        'num_paths': graph.path_count,
        'num_loci': len(result.loci),
        'num_split_loci': sum(1 for locus in result.loci if locus.is_split),
        'num_overlaps': len(result.overlaps),
        'num_dropped_paths': result.dropped_paths,
        'total_sequence_length': graph.total_sequence_length(),
        'blocks': [
            {
                'label': block.label,
                'id_offset': block.offset,
                'nodes': block.node_count,
                'edges': block.edge_count,
                'paths': len(block.paths),
            }
            for block in result.blocks
        ],
        'overlaps': [
            {
                'locus': str(overlap.key),
                'first': [overlap.first.start, overlap.first.end, overlap.first.block_label],
                'second': [overlap.second.start, overlap.second.end, overlap.second.block_label],
            }
            for overlap in result.overlaps
        ],
    }

    with open(output_path, 'w') as f:
        json.dump(stats, f, indent=2)

    logger.info(f"Lace statistics exported to {output_path}")
    return stats

# GFALace v0.1.0
# Any usage is subject to this software's license.
