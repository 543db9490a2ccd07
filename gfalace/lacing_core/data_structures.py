#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Graph data structures for block lacing.

Holds the node/edge/path model shared by the loader, the lacing stages and
the GFA writer:
1. OrientedStep, Node, Edge - immutable graph elements
2. BlockGraph - one loaded block with block-local node ids
3. CombinedGraph - the single mutable aggregate that every block is folded into

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple
import logging

from ..errors import BlockStructureError

logger = logging.getLogger(__name__)


# ============================================================================
# Part 1: Graph Elements
# ============================================================================

@dataclass(frozen=True, order=True)
class OrientedStep:
    """
    A node reference plus strand, the unit of path traversal.

    Ordering is by node id first, forward before reverse.
    """
    node_id: int
    is_reverse: bool = False

    @property
    def orientation(self) -> str:
        """Return '+' or '-'."""
        return '-' if self.is_reverse else '+'

    def shifted(self, offset: int) -> 'OrientedStep':
        """Return the same step with its node id moved by offset."""
        return OrientedStep(self.node_id + offset, self.is_reverse)

    def to_gfa_token(self) -> str:
        """Format as a GFA P-line step token, e.g. '12+'."""
        return f"{self.node_id}{self.orientation}"

    @classmethod
    def from_gfa_token(cls, token: str) -> 'OrientedStep':
        """
        Parse a GFA P-line step token.

        Args:
            token: Step token such as '12+' or '7-'

        Returns:
            OrientedStep

        Raises:
            ValueError: If the token has no valid orientation or node id
        """
        if len(token) < 2 or token[-1] not in '+-':
            raise ValueError(f"Invalid path step: {token!r}")
        return cls(parse_node_id(token[:-1]), token[-1] == '-')


@dataclass(frozen=True)
class Node:
    """Graph node: integer id and sequence (empty when the GFA had '*')."""
    id: int
    seq: str

    @property
    def length(self) -> int:
        return len(self.seq)


@dataclass(frozen=True, order=True)
class Edge:
    """
    Directed link between two oriented node references.

    Two edges are equal only if both endpoints and both strands match.
    """
    from_step: OrientedStep
    to_step: OrientedStep

    @property
    def from_id(self) -> int:
        return self.from_step.node_id

    @property
    def to_id(self) -> int:
        return self.to_step.node_id

    def shifted(self, offset: int) -> 'Edge':
        return Edge(self.from_step.shifted(offset), self.to_step.shifted(offset))

    def sort_key(self) -> Tuple[int, int, bool, bool]:
        """Key used for deterministic L-line output."""
        return (self.from_id, self.to_id, self.from_step.is_reverse, self.to_step.is_reverse)


def parse_node_id(text: str) -> int:
    """
    Parse a positive integer node id.

    Raises:
        ValueError: If text is not a positive base-10 integer
    """
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"Node id must be a positive integer, got {text!r}")
    node_id = int(text)
    if node_id < 1:
        raise ValueError(f"Node id must be a positive integer, got {text!r}")
    return node_id


# ============================================================================
# Part 2: Block Graph
# ============================================================================

@dataclass
class BlockGraph:
    """
    One loaded input block.

    Node ids are block-local and expected to be the dense range [1, m].
    Paths keep their file order, which is the order used for tie-breaking
    identical coordinate ranges later on.
    """
    label: str
    nodes: Dict[int, Node] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)
    paths: Dict[str, List[OrientedStep]] = field(default_factory=dict)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def add_node(self, node: Node):
        if node.id in self.nodes:
            raise BlockStructureError(f"{self.label}: duplicate segment id {node.id}")
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge):
        self.edges.append(edge)

    def add_path(self, name: str, steps: List[OrientedStep]):
        if name in self.paths:
            raise BlockStructureError(f"{self.label}: duplicate path name {name!r}")
        self.paths[name] = list(steps)

    def check_references(self):
        """
        Verify that every edge endpoint and path step names a known segment.

        Raises:
            BlockStructureError: On the first dangling reference
        """
        for edge in self.edges:
            for step in (edge.from_step, edge.to_step):
                if step.node_id not in self.nodes:
                    raise BlockStructureError(
                        f"{self.label}: link references unknown segment {step.node_id}"
                    )
        for name, steps in self.paths.items():
            for step in steps:
                if step.node_id not in self.nodes:
                    raise BlockStructureError(
                        f"{self.label}: path {name!r} references unknown segment {step.node_id}"
                    )

    def is_dense(self) -> bool:
        """True if node ids are exactly 1..node_count."""
        if not self.nodes:
            return True
        return min(self.nodes) == 1 and max(self.nodes) == len(self.nodes)


# ============================================================================
# Part 3: Combined Graph
# ============================================================================

class CombinedGraph:
    """
    The laced graph that every block is folded into.

    Nodes and edges arrive through id translation; paths are added only by
    the path builder. Edges have set semantics, so re-adding an existing
    ordered oriented pair is a no-op.
    """

    def __init__(self):
        self.nodes: Dict[int, Node] = {}
        self.edges: Set[Edge] = set()
        self.paths: Dict[str, List[OrientedStep]] = {}

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def path_count(self) -> int:
        return len(self.paths)

    def add_node(self, node: Node):
        if node.id in self.nodes:
            raise BlockStructureError(f"Node id {node.id} already present in combined graph")
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> bool:
        """
        Add an edge unless the same ordered oriented pair exists.

        Returns:
            True if the edge was new
        """
        if edge in self.edges:
            return False
        self.edges.add(edge)
        return True

    def has_path(self, name: str) -> bool:
        return name in self.paths

    def create_path(self, name: str) -> List[OrientedStep]:
        """Create an empty path and return its mutable step list."""
        if name in self.paths:
            raise BlockStructureError(f"Path {name!r} already present in combined graph")
        steps: List[OrientedStep] = []
        self.paths[name] = steps
        return steps

    def get_node_sequence(self, node_id: int) -> str:
        return self.nodes[node_id].seq

    def sorted_nodes(self) -> Iterator[Node]:
        for node_id in sorted(self.nodes):
            yield self.nodes[node_id]

    def sorted_edges(self) -> List[Edge]:
        return sorted(self.edges, key=Edge.sort_key)

    def sorted_path_names(self) -> List[str]:
        return sorted(self.paths, key=lambda name: name.encode('utf-8'))

    def total_sequence_length(self) -> int:
        return sum(node.length for node in self.nodes.values())

    def __repr__(self) -> str:
        return (f"CombinedGraph(nodes={self.node_count}, edges={self.edge_count}, "
                f"paths={self.path_count})")

# GFALace v0.1.0
# Any usage is subject to this software's license.
