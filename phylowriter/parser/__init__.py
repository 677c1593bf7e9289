"""
Newick format parser module for phylogenetic trees.

This module parses Newick and NHX strings into pointer-based Node trees that
can be converted to attributed trees for PhyloXML output.
"""

from .newick_parser import (
    parse_newick,
    split_token,
    parse_metadata,
    flush_meta_buffer,
    flush_character_buffer,
    flush_length_buffer,
    flush_buffer,
    close_node,
    create_new_node,
    init_nodestack,
)

__all__ = [
    "parse_newick",
    "split_token",
    "parse_metadata",
    "flush_meta_buffer",
    "flush_character_buffer",
    "flush_length_buffer",
    "flush_buffer",
    "close_node",
    "create_new_node",
    "init_nodestack",
]
