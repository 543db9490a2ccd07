#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

GFA block reader - loads one GFA v1 block (plain or gzip) into a BlockGraph.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip
import logging
import os
import shutil
import tempfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from ..errors import GFAParseError
from ..lacing_core.data_structures import BlockGraph, Edge, Node, OrientedStep, parse_node_id

logger = logging.getLogger(__name__)


# ============================================================================
#                           FILE UTILITIES
# ============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)
    return filepath.suffix in ('.gz', '.gzip')


@contextmanager
def decompressed_copy(filepath: Union[str, Path],
                      temp_dir: Optional[Union[str, Path]] = None) -> Iterator[Path]:
    """
    Decompress a gzip file into a temporary file for the duration of the block.

    The temporary file is removed on exit, also when the caller raises.

    Args:
        filepath: Path to a .gz file
        temp_dir: Directory for the temporary copy (system default if None)

    Yields:
        Path to the decompressed copy
    """
    filepath = Path(filepath)
    if temp_dir is not None:
        Path(temp_dir).mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(
        prefix=f"gfalace_{filepath.stem}_", suffix=".gfa",
        dir=str(temp_dir) if temp_dir is not None else None,
    )
    temp_path = Path(temp_name)
    try:
        try:
            with os.fdopen(fd, 'wb') as out, gzip.open(filepath, 'rb') as src:
                shutil.copyfileobj(src, out)
        except (EOFError, zlib.error) as e:
            raise GFAParseError(f"cannot decompress: {e}", filepath) from e
        logger.debug(f"Decompressed {filepath} to {temp_path}")
        yield temp_path
    finally:
        temp_path.unlink(missing_ok=True)
        logger.debug(f"Removed temporary file {temp_path}")


# ============================================================================
#                           GFA RECORD PARSING
# ============================================================================

def _parse_segment(parts: List[str], source: str, line_no: int) -> Node:
    # S <name> <sequence> [tags]
    if len(parts) < 3:
        raise GFAParseError("malformed S-line (expected name and sequence)", source, line_no)
    try:
        node_id = parse_node_id(parts[1])
    except ValueError as e:
        raise GFAParseError(str(e), source, line_no) from e
    sequence = parts[2] if parts[2] != '*' else ''
    return Node(node_id, sequence)


def _parse_orientation(flag: str, source: str, line_no: int) -> bool:
    if flag not in ('+', '-'):
        raise GFAParseError(f"invalid orientation {flag!r}", source, line_no)
    return flag == '-'


def _parse_link(parts: List[str], source: str, line_no: int) -> Edge:
    # L <from> <from_orient> <to> <to_orient> [overlap]
    if len(parts) < 5:
        raise GFAParseError("malformed L-line (expected 4 link fields)", source, line_no)
    try:
        from_id = parse_node_id(parts[1])
        to_id = parse_node_id(parts[3])
    except ValueError as e:
        raise GFAParseError(str(e), source, line_no) from e
    return Edge(
        OrientedStep(from_id, _parse_orientation(parts[2], source, line_no)),
        OrientedStep(to_id, _parse_orientation(parts[4], source, line_no)),
    )


def _parse_path(parts: List[str], source: str, line_no: int):
    # P <name> <step>,<step>,... [overlaps]
    if len(parts) < 3 or not parts[1]:
        raise GFAParseError("malformed P-line (expected name and steps)", source, line_no)
    name = parts[1]
    if parts[2] in ('', '*'):
        return name, []
    try:
        steps = [OrientedStep.from_gfa_token(token) for token in parts[2].split(',')]
    except ValueError as e:
        raise GFAParseError(f"path {name!r}: {e}", source, line_no) from e
    return name, steps


def parse_gfa_lines(handle: TextIO, label: str) -> BlockGraph:
    """
    Parse GFA v1 text into a BlockGraph.

    H lines and comments are skipped, as are W, C and unknown records.

    Args:
        handle: Open text handle
        label: Block label used in messages and diagnostics

    Returns:
        BlockGraph with references checked

    Raises:
        GFAParseError: On malformed S, L or P records
        BlockStructureError: On duplicate ids/names or dangling references
    """
    block = BlockGraph(label=label)
    skipped = 0

    for line_no, raw_line in enumerate(handle, 1):
        line = raw_line.rstrip('\r\n')
        if not line or line.startswith('#'):
            continue

        parts = line.split('\t')
        record_type = parts[0]

        if record_type == 'H':
            continue
        elif record_type == 'S':
            block.add_node(_parse_segment(parts, label, line_no))
        elif record_type == 'L':
            block.add_edge(_parse_link(parts, label, line_no))
        elif record_type == 'P':
            name, steps = _parse_path(parts, label, line_no)
            block.add_path(name, steps)
        else:
            skipped += 1

    if skipped:
        logger.debug(f"{label}: skipped {skipped} unsupported GFA records")

    block.check_references()
    return block


def load_block_graph(gfa_path: Union[str, Path],
                     temp_dir: Optional[Union[str, Path]] = None) -> BlockGraph:
    """
    Load one block from a GFA v1 file.

    Gzip inputs (.gz/.gzip) are decompressed to a temporary copy that only
    lives while the block is parsed.

    Args:
        gfa_path: Path to the GFA file
        temp_dir: Directory for temporary decompressed copies

    Returns:
        BlockGraph labelled with the file path

    Raises:
        FileNotFoundError: If gfa_path does not exist
        GFAParseError, BlockStructureError: On malformed content
    """
    gfa_path = Path(gfa_path)
    if not gfa_path.exists():
        raise FileNotFoundError(f"GFA file not found: {gfa_path}")

    label = str(gfa_path)
    logger.debug(f"Loading block from GFA: {gfa_path}")

    if is_gzipped(gfa_path):
        with decompressed_copy(gfa_path, temp_dir) as plain_path:
            with open(plain_path, 'r', encoding='utf-8') as f:
                return parse_gfa_lines(f, label)

    with open(gfa_path, 'r', encoding='utf-8') as f:
        return parse_gfa_lines(f, label)

# GFALace v0.1.0
# Any usage is subject to this software's license.
