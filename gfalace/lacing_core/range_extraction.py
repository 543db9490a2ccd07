#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Range extraction - turns block path names into locus keys and coordinates.

Path names follow the PanSN-style convention

    sample#haplotype#contig:start-end

with a half-open, 0-based range. Names that do not follow it are left out
of lacing without raising.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging
import re

from .data_structures import OrientedStep
from .id_translation import TranslatedBlock

logger = logging.getLogger(__name__)

_COORDINATE = re.compile(r'[0-9]+')


@dataclass(frozen=True, order=True)
class LocusKey:
    """Sample, haplotype and contig of a path fragment."""
    sample: str
    haplotype: str
    contig: str

    def __str__(self) -> str:
        return f"{self.sample}#{self.haplotype}#{self.contig}"

    def range_name(self, start: int, end: int) -> str:
        """Name of a sub-path covering [start, end) of this locus."""
        return f"{self}:{start}-{end}"


@dataclass(frozen=True)
class RangeInfo:
    """
    One block's contribution to a locus.

    Steps are already translated into the combined id space.
    """
    key: LocusKey
    start: int
    end: int
    block_index: int
    block_label: str
    path_order: int
    steps: Tuple[OrientedStep, ...]

    def sort_key(self) -> Tuple[int, int, int, int]:
        return (self.start, self.end, self.block_index, self.path_order)

    def is_contiguous_with(self, following: 'RangeInfo') -> bool:
        """True if following starts exactly where this range ends."""
        return self.end == following.start

    def overlaps(self, other: 'RangeInfo') -> bool:
        return self.start < other.end and other.start < self.end

    def describe(self) -> str:
        return f"[{self.start}, {self.end}) from {self.block_label}"


def parse_path_name(path_name: str) -> Optional[Tuple[LocusKey, int, int]]:
    """
    Parse 'sample#haplotype#contig:start-end'.

    Args:
        path_name: Path name from a P-line

    Returns:
        (LocusKey, start, end) or None if the name does not match

    Example:
        >>> parse_path_name('HG002#1#chr6:1000-2000')
        (LocusKey(sample='HG002', haplotype='1', contig='chr6'), 1000, 2000)
        >>> parse_path_name('foo#bar') is None
        True
    """
    fields = path_name.split('#')
    if len(fields) != 3:
        return None
    sample, haplotype, contig_range = fields

    if contig_range.count(':') != 1:
        return None
    contig, coordinates = contig_range.split(':')

    if coordinates.count('-') != 1:
        return None
    start_text, end_text = coordinates.split('-')

    if not _COORDINATE.fullmatch(start_text) or not _COORDINATE.fullmatch(end_text):
        return None

    return LocusKey(sample, haplotype, contig), int(start_text), int(end_text)


def extract_ranges(block: TranslatedBlock) -> List[RangeInfo]:
    """
    Build RangeInfo entries for every parseable path of a translated block.

    Paths with unparseable names or empty/inverted ranges are skipped.

    Args:
        block: Translated block

    Returns:
        RangeInfo list in the block's path order
    """
    ranges: List[RangeInfo] = []

    for path_order, (name, steps) in enumerate(block.paths.items()):
        parsed = parse_path_name(name)
        if parsed is None:
            logger.debug(f"{block.label}: path {name!r} has no locus range, excluded from lacing")
            continue

        key, start, end = parsed
        if end <= start:
            logger.debug(f"{block.label}: path {name!r} has an empty or inverted range, excluded")
            continue

        ranges.append(RangeInfo(
            key=key,
            start=start,
            end=end,
            block_index=block.index,
            block_label=block.label,
            path_order=path_order,
            steps=tuple(steps),
        ))

    return ranges

# GFALace v0.1.0
# Any usage is subject to this software's license.
