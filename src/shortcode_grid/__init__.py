"""
Grid shortcodes for Contact Form 7 markup.

Rewrites `[row ...]...[/row]` and `[col ...]...[/col]` pairs into the
`grid-row` / `grid-col` wrapper divs the grid stylesheet lays out:
- pure string -> string, no I/O, no shared state
- never raises on input text; unmatched tags are kept verbatim
- class names, data-* attributes and `--grid-gap` are a fixed stylesheet contract
"""

from .attributes import absint, parse_shortcode_atts, sanitize_html_class
from .config import GridConfig, plugin_tag_config
from .contracts import GridIssue, GridIssueCode, GridTransformResult, MatcherMode
from .detect import find_contact_form_ids, has_grid_shortcodes, page_needs_grid_stylesheet
from .matcher import parse_shortcode_tree
from .module import run_grid_transform, transform
from .tag_builder import build_col_tag, build_row_tag, wrap_selection

__all__ = [
    "GridConfig",
    "GridIssue",
    "GridIssueCode",
    "GridTransformResult",
    "MatcherMode",
    "absint",
    "build_col_tag",
    "build_row_tag",
    "find_contact_form_ids",
    "has_grid_shortcodes",
    "page_needs_grid_stylesheet",
    "parse_shortcode_atts",
    "parse_shortcode_tree",
    "plugin_tag_config",
    "run_grid_transform",
    "sanitize_html_class",
    "transform",
    "wrap_selection",
]
