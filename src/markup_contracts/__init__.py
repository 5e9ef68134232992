"""
Shared markup contracts.

These types are the boundary between the shortcode matcher, the grid renderer
and the debugging tools. Code that walks a matched shortcode tree should consume
these objects (not ad-hoc dicts).
"""

from .shortcode import Attributes, TagKind, TagNode, iter_tag_nodes, tree_to_dicts

__all__ = [
    "Attributes",
    "TagKind",
    "TagNode",
    "iter_tag_nodes",
    "tree_to_dicts",
]
