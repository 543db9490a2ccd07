#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Tests for locus path name parsing and range extraction.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from gfalace.lacing_core.data_structures import OrientedStep
from gfalace.lacing_core.id_translation import TranslatedBlock
from gfalace.lacing_core.range_extraction import LocusKey, extract_ranges, parse_path_name


def _translated(paths, index=0, label="blk"):
    return TranslatedBlock(index=index, label=label, offset=0, node_count=0,
                           edge_count=0, paths=paths)


class TestParsePathName:
    """Test 'sample#haplotype#contig:start-end' parsing."""

    def test_valid_name(self):
        assert parse_path_name("HG002#1#chr6:1000-2000") == (
            LocusKey("HG002", "1", "chr6"), 1000, 2000
        )

    def test_zero_start(self):
        key, start, end = parse_path_name("grch38#0#chrX:0-15")
        assert (start, end) == (0, 15)
        assert str(key) == "grch38#0#chrX"

    @pytest.mark.parametrize("name", [
        "foo#bar",
        "foo#1#chr1:abc-100",
        "foo#1#chr1:10-abc",
        "foo#1#chr1",
        "foo#1#chr1:10",
        "foo#1#chr1:10-20-30",
        "foo#1#chr1:5:10-20",
        "a#b#c#d:0-10",
        "foo#1#chr1:-5-10",
        "foo#1#chr1:+5-10",
        "foo#1#chr1: 5-10",
        "",
    ])
    def test_rejected_names(self, name):
        assert parse_path_name(name) is None

    def test_non_ascii_digits_rejected(self):
        assert parse_path_name("s#1#c:\u0661-\u0662") is None


class TestLocusKey:
    """Test the locus key value type."""

    def test_equality_and_hash(self):
        assert LocusKey("s", "1", "c") == LocusKey("s", "1", "c")
        assert len({LocusKey("s", "1", "c"), LocusKey("s", "1", "c")}) == 1

    def test_ordering(self):
        keys = [LocusKey("s", "2", "c"), LocusKey("a", "9", "z"), LocusKey("s", "1", "c")]
        assert sorted(keys) == [
            LocusKey("a", "9", "z"), LocusKey("s", "1", "c"), LocusKey("s", "2", "c")
        ]

    def test_range_name(self):
        assert LocusKey("s", "1", "chr2").range_name(10, 20) == "s#1#chr2:10-20"


class TestExtractRanges:
    """Test RangeInfo extraction from translated blocks."""

    def test_extracts_steps_and_source(self):
        steps = [OrientedStep(4), OrientedStep(5, True)]
        ranges = extract_ranges(_translated({"s#1#c:0-10": steps}, index=3, label="b3.gfa"))

        assert len(ranges) == 1
        info = ranges[0]
        assert info.key == LocusKey("s", "1", "c")
        assert (info.start, info.end) == (0, 10)
        assert info.steps == tuple(steps)
        assert info.block_index == 3
        assert info.block_label == "b3.gfa"

    def test_unparseable_paths_dropped(self):
        ranges = extract_ranges(_translated({
            "foo#bar": [OrientedStep(1)],
            "foo#1#chr1:abc-100": [OrientedStep(1)],
            "s#1#c:0-10": [OrientedStep(1)],
        }))

        assert [(r.start, r.end) for r in ranges] == [(0, 10)]

    @pytest.mark.parametrize("name", ["s#1#c:10-10", "s#1#c:20-10"])
    def test_empty_or_inverted_ranges_dropped(self, name):
        assert extract_ranges(_translated({name: [OrientedStep(1)]})) == []

    def test_path_order_recorded(self):
        ranges = extract_ranges(_translated({
            "s#1#c:0-10": [OrientedStep(1)],
            "skip": [OrientedStep(1)],
            "s#2#c:0-10": [OrientedStep(1)],
        }))

        assert [r.path_order for r in ranges] == [0, 2]

# GFALace v0.1.0
# Any usage is subject to this software's license.
