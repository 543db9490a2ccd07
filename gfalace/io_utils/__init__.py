"""
GFALace v0.1.0

I/O Module for GFALace.

1. gfa_reader.py - GFA v1 block loading with gzip support
2. gfa_export.py - Deterministic GFA export, GFA inspection, lace statistics
"""

from .gfa_reader import (
    is_gzipped,
    decompressed_copy,
    parse_gfa_lines,
    load_block_graph,
)

from .gfa_export import (
    write_gfa,
    export_laced_graph_to_gfa,
    validate_gfa_file,
    export_lace_stats,
)

__all__ = [
    # GFA import
    "is_gzipped",
    "decompressed_copy",
    "parse_gfa_lines",
    "load_block_graph",

    # GFA export
    "write_gfa",
    "export_laced_graph_to_gfa",
    "validate_gfa_file",
    "export_lace_stats",
]
