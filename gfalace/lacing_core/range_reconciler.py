#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Range reconciliation - decides how per-block path fragments are spliced.

For each locus the ranges are sorted and scanned pairwise. A locus whose
ranges chain end-to-start without gaps collapses into one path named by the
bare locus key. Otherwise the scan groups maximal contiguous runs, and each
run becomes a sub-path named 'key:start-end'. Overlapping neighbours are
reported and always break a run.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .data_structures import OrientedStep
from .range_extraction import LocusKey, RangeInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlapReport:
    """Two neighbouring ranges of one locus that share coordinates."""
    key: LocusKey
    first: RangeInfo
    second: RangeInfo

    def describe(self) -> str:
        return (f"{self.key}: overlapping ranges {self.first.describe()} "
                f"and {self.second.describe()}")


@dataclass
class ReconciledPath:
    """A final output path: name, covered span and concatenated steps."""
    name: str
    key: LocusKey
    start: int
    end: int
    steps: List[OrientedStep]
    sources: List[str] = field(default_factory=list)


@dataclass
class LocusReconciliation:
    """Outcome for one locus."""
    key: LocusKey
    paths: List[ReconciledPath]
    overlaps: List[OverlapReport]

    @property
    def is_split(self) -> bool:
        return len(self.paths) > 1


class _GroupBuilder:
    """
    Scan state for the greedy grouping pass.

    building_group is False until the first range is seen; afterwards a
    group is always open and group_start/group_end cover its span.
    """

    def __init__(self, key: LocusKey):
        self.key = key
        self.building_group = False
        self.group_start = 0
        self.group_end = 0
        self._steps: List[OrientedStep] = []
        self._sources: List[str] = []
        self.closed: List[ReconciledPath] = []

    def open(self, range_info: RangeInfo):
        self.building_group = True
        self.group_start = range_info.start
        self.group_end = range_info.end
        self._steps = list(range_info.steps)
        self._sources = [range_info.block_label]

    def extend(self, range_info: RangeInfo):
        self.group_end = range_info.end
        self._steps.extend(range_info.steps)
        self._sources.append(range_info.block_label)

    def close(self, name: Optional[str] = None):
        if not self.building_group:
            return
        self.closed.append(ReconciledPath(
            name=name or self.key.range_name(self.group_start, self.group_end),
            key=self.key,
            start=self.group_start,
            end=self.group_end,
            steps=self._steps,
            sources=self._sources,
        ))
        self.building_group = False
        self._steps = []
        self._sources = []

    def feed(self, range_info: RangeInfo, contiguous: bool):
        """Extend the open group if contiguous, otherwise close it and start over."""
        if self.building_group and contiguous:
            self.extend(range_info)
        else:
            self.close()
            self.open(range_info)


def sort_ranges(ranges: Iterable[RangeInfo]) -> List[RangeInfo]:
    """Sort by (start, end), breaking ties by block index then path order."""
    return sorted(ranges, key=RangeInfo.sort_key)


def classify_pairs(ranges: List[RangeInfo]) -> List[Tuple[bool, bool]]:
    """
    Classify each adjacent pair of sorted ranges.

    Returns:
        One (contiguous, overlapping) tuple per pair (len(ranges) - 1 entries)
    """
    return [
        (previous.is_contiguous_with(current), previous.overlaps(current))
        for previous, current in zip(ranges, ranges[1:])
    ]


def reconcile_locus(key: LocusKey, ranges: List[RangeInfo]) -> LocusReconciliation:
    """
    Reconcile all ranges of one locus into output paths.

    Args:
        key: Locus key shared by every range
        ranges: Ranges in any order (at least one)

    Returns:
        LocusReconciliation with paths ordered by start coordinate
    """
    ordered = sort_ranges(ranges)
    pairs = classify_pairs(ordered)

    overlaps = [
        OverlapReport(key, previous, current)
        for (previous, current), (_, overlapping) in zip(zip(ordered, ordered[1:]), pairs)
        if overlapping
    ]

    builder = _GroupBuilder(key)

    if all(contiguous for contiguous, _ in pairs):
        builder.open(ordered[0])
        for range_info in ordered[1:]:
            builder.extend(range_info)
        builder.close(name=str(key))
        return LocusReconciliation(key, builder.closed, overlaps)

    builder.open(ordered[0])
    for range_info, (contiguous, _) in zip(ordered[1:], pairs):
        builder.feed(range_info, contiguous)
    builder.close()

    return LocusReconciliation(key, builder.closed, overlaps)


def group_by_locus(ranges: Iterable[RangeInfo]) -> Dict[LocusKey, List[RangeInfo]]:
    """Group ranges by locus key, keeping arrival order inside each group."""
    grouped: Dict[LocusKey, List[RangeInfo]] = defaultdict(list)
    for range_info in ranges:
        grouped[range_info.key].append(range_info)
    return dict(grouped)


def reconcile_ranges(ranges: Iterable[RangeInfo],
                     report_overlaps: bool = True) -> List[LocusReconciliation]:
    """
    Reconcile every locus, in sorted locus-key order.

    Args:
        ranges: All extracted ranges from all blocks
        report_overlaps: Log a warning for each overlapping pair

    Returns:
        One LocusReconciliation per locus key
    """
    results = []
    grouped = group_by_locus(ranges)

    for key in sorted(grouped):
        result = reconcile_locus(key, grouped[key])
        if report_overlaps:
            for overlap in result.overlaps:
                logger.warning(overlap.describe())
        if result.is_split:
            logger.info(f"{key}: split into {len(result.paths)} sub-paths")
        results.append(result)

    return results

# GFALace v0.1.0
# Any usage is subject to this software's license.
