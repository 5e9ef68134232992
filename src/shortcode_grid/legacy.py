"""
Legacy matcher: the two-regex pass the plugin shipped with.

Rows are rewritten first, then columns; every callback re-runs the whole pass on
its own body. Matching is non-greedy, so a tag containing another tag of the
same kind is closed by the first closing tag found. Kept for forms that depend
on that pairing.
"""

from __future__ import annotations

import re
from typing import Any

from markup_contracts import TagKind

from .attributes import find_malformed_fragments, parse_shortcode_atts
from .config import GridConfig
from .contracts import GridIssue, GridIssueCode
from .render import render_tag


class LegacyGridPass:
    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.issues: list[GridIssue] = []
        self.counts: dict[str, int] = {"rows": 0, "cols": 0}
        self.max_depth_seen = 0
        # No boundary after the tag name: "[rowx]" opens a row with attribute "x".
        self._row_re = re.compile(rf"\[{re.escape(config.row_tag)}([^\]]*)\](.*?)\[/{re.escape(config.row_tag)}\]", re.S)
        self._col_re = re.compile(rf"\[{re.escape(config.col_tag)}([^\]]*)\](.*?)\[/{re.escape(config.col_tag)}\]", re.S)

    def run(self, markup: str) -> str:
        return self._process(markup, 1)

    def _process(self, content: str, depth: int) -> str:
        if depth > self.config.max_depth:
            m = self._row_re.search(content) or self._col_re.search(content)
            if m is not None:
                self.issues.append(
                    GridIssue(
                        code=GridIssueCode.DEPTH_LIMIT.value,
                        message="Nesting depth limit reached; span kept as text",
                        detail={"tag": m.group(0)[: m.start(2) - m.start(0)], "depth": depth, "max_depth": self.config.max_depth},
                    )
                )
            return content

        content = self._row_re.sub(lambda m: self._replace(TagKind.ROW, m, depth), content)
        content = self._col_re.sub(lambda m: self._replace(TagKind.COL, m, depth), content)
        return content

    def _replace(self, kind: TagKind, m: re.Match[str], depth: int) -> str:
        atts_string = m.group(1).strip()
        for frag in find_malformed_fragments(atts_string):
            self.issues.append(
                GridIssue(
                    code=GridIssueCode.MALFORMED_ATTRIBUTE.value,
                    message="Unrecognized attribute fragment skipped",
                    detail={"tag": m.group(0)[: m.start(2) - m.start(0)], "fragment": frag},
                )
            )
        self.max_depth_seen = max(self.max_depth_seen, depth)
        self.counts["rows" if kind == TagKind.ROW else "cols"] += 1

        body = self._process(m.group(2), depth + 1)
        return render_tag(kind, parse_shortcode_atts(atts_string), body, self.config)

    def meta(self) -> dict[str, Any]:
        return {**self.counts, "max_depth_seen": self.max_depth_seen}


def run_legacy_pass(markup: str, config: GridConfig) -> tuple[str, list[GridIssue], dict[str, Any]]:
    p = LegacyGridPass(config)
    html = p.run(markup)
    return html, list(p.issues), p.meta()
