from __future__ import annotations

import re

from .render import COL_CLASS, COL_END_MARKER, ROW_CLASS, ROW_END_MARKER

_BR = r"<br\s*/?>"


def _open_div(cls: str) -> str:
    return rf'<div class="{re.escape(cls)}(?: [^"]*)?"[^>]*>'


def _close_div(marker: str) -> str:
    return rf"</div>\s*{re.escape(marker)}"


# (pattern, replacement) applied in order. Closing-side rules need the end markers.
_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(rf"(<p>\s*)?({_open_div(ROW_CLASS)})(\s*</p>)?"), r"\2"),
    (re.compile(rf"(<p>\s*)?({_close_div(ROW_END_MARKER)})(\s*</p>)?"), r"\2"),
    (re.compile(rf"(<p>\s*)?({_open_div(COL_CLASS)})(\s*{_BR})?"), r"\2"),
    (re.compile(rf"({_BR})?(\s*{_close_div(COL_END_MARKER)})(\s*</p>)?"), r"\2"),
    (re.compile(rf"({_open_div(ROW_CLASS)})\s*{_BR}\s*"), r"\1"),
    (re.compile(rf"\s*{_BR}\s*({_close_div(ROW_END_MARKER)})"), r"\1"),
    (re.compile(rf"({_open_div(COL_CLASS)})\s*{_BR}\s*"), r"\1"),
    (re.compile(rf"\s*{_BR}\s*({_close_div(COL_END_MARKER)})"), r"\1"),
]


def strip_autop_artifacts(html: str) -> str:
    """
    Remove the <p>/<br> debris wpautop leaves around grid wrappers.

    Opening wrappers are recognized by their class; closing wrappers only when
    they carry an end marker (`GridConfig.end_markers`).
    """
    for pattern, repl in _RULES:
        html = pattern.sub(repl, html)
    return html
