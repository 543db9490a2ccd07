#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Path and edge building - writes reconciled paths into the combined graph.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Iterable, Sequence
import logging

from .data_structures import CombinedGraph, Edge, OrientedStep
from .range_reconciler import ReconciledPath

logger = logging.getLogger(__name__)


def connect_steps(combined: CombinedGraph, steps: Sequence[OrientedStep]) -> int:
    """
    Add an edge for every consecutive step pair.

    Returns:
        Number of edges that were not already present
    """
    added = 0
    for previous, current in zip(steps, steps[1:]):
        if combined.add_edge(Edge(previous, current)):
            added += 1
    return added


def _unique_name(combined: CombinedGraph, name: str) -> str:
    if not combined.has_path(name):
        return name
    suffix = 1
    while combined.has_path(f"{name}_{suffix}"):
        suffix += 1
    unique = f"{name}_{suffix}"
    logger.warning(f"Path name {name!r} already used, storing duplicate as {unique!r}")
    return unique


def build_path(combined: CombinedGraph, path: ReconciledPath) -> str:
    """
    Create one reconciled path and derive its edges.

    Returns:
        Name the path was stored under
    """
    name = _unique_name(combined, path.name)
    steps = combined.create_path(name)
    steps.extend(path.steps)
    added = connect_steps(combined, steps)
    logger.debug(f"Path {name}: {len(steps)} steps, {added} new edges")
    return name


def build_paths(combined: CombinedGraph, paths: Iterable[ReconciledPath]) -> int:
    """
    Materialize all reconciled paths.

    Returns:
        Number of paths created
    """
    count = 0
    for path in paths:
        build_path(combined, path)
        count += 1
    return count

# GFALace v0.1.0
# Any usage is subject to this software's license.
