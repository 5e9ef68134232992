from __future__ import annotations

import re
from dataclasses import dataclass

from .contracts import MatcherMode

_TAG_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")

# Rendering recursion is one level per nested tag; keep well under the interpreter limit.
MAX_DEPTH_CEILING = 256


@dataclass(frozen=True, slots=True)
class GridConfig:
    """
    Grid shortcode transform parameters.

    Defaults reproduce the plugin's shipped behaviour with the balanced matcher.
    Configuration is passed explicitly; nothing here reads options or env vars.
    """

    matcher: MatcherMode = MatcherMode.BALANCED
    max_depth: int = 128  # tags nested deeper than this are left verbatim

    row_tag: str = "row"
    col_tag: str = "col"

    default_gap: int = 16
    default_col: int = 12

    end_markers: bool = False  # append <!-- /grid-row --> / <!-- /grid-col --> after closing divs
    strip_autop: bool = False  # remove wpautop <p>/<br> debris around grid wrappers
    clamp_columns: bool = False  # conservative default: pass col/sm/md/lg/xl through unclamped

    def validate(self) -> None:
        if not isinstance(self.matcher, MatcherMode):
            raise TypeError("matcher must be a MatcherMode")
        if not (1 <= self.max_depth <= MAX_DEPTH_CEILING):
            raise ValueError(f"max_depth must be within [1, {MAX_DEPTH_CEILING}]")
        for name, value in (("row_tag", self.row_tag), ("col_tag", self.col_tag)):
            if not _TAG_NAME_RE.match(value):
                raise ValueError(f"{name} must match [A-Za-z0-9_-]+, got {value!r}")
        if self.row_tag == self.col_tag:
            raise ValueError("row_tag and col_tag must differ")
        if self.row_tag.startswith(self.col_tag) or self.col_tag.startswith(self.row_tag):
            raise ValueError("row_tag and col_tag must not be prefixes of each other")
        if self.default_gap < 0:
            raise ValueError("default_gap must be >= 0")
        if self.default_col < 0:
            raise ValueError("default_col must be >= 0")

    def __post_init__(self) -> None:
        self.validate()


def plugin_tag_config(**overrides: object) -> GridConfig:
    """
    Config matching the tag names the WordPress plugin registers with CF7
    (`[lfcf7-row]` / `[lfcf7-col]`).
    """
    params: dict[str, object] = {"row_tag": "lfcf7-row", "col_tag": "lfcf7-col"}
    params.update(overrides)
    return GridConfig(**params)  # type: ignore[arg-type]
