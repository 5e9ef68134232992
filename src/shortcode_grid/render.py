from __future__ import annotations

import html

from markup_contracts import Attributes, TagKind, TagNode

from .attributes import absint, is_empty_value, sanitize_html_class
from .config import GridConfig

# Stylesheet contract: these names must not drift.
ROW_CLASS = "grid-row"
COL_CLASS = "grid-col"
GAP_PROPERTY = "--grid-gap"
BREAKPOINTS = ("sm", "md", "lg", "xl")

ROW_END_MARKER = f"<!-- /{ROW_CLASS} -->"
COL_END_MARKER = f"<!-- /{COL_CLASS} -->"


def _esc_attr(value: str) -> str:
    return html.escape(value, quote=True)


def _class_attr(base: str, extra: str) -> str:
    cls = sanitize_html_class(extra)
    return base + (f" {cls}" if cls else "")


def _clamp_col(value: int) -> int:
    return max(1, min(12, value))


def render_row(attributes: Attributes, body: str, config: GridConfig) -> str:
    atts = {"gap": str(config.default_gap), "class": ""}
    atts.update(attributes)

    gap = absint(atts["gap"])
    style = f"{GAP_PROPERTY}: {gap}px;"
    out = '<div class="{}" style="{}">{}</div>'.format(
        _esc_attr(_class_attr(ROW_CLASS, atts["class"])),
        _esc_attr(style),
        body,
    )
    return out + ROW_END_MARKER if config.end_markers else out


def render_col(attributes: Attributes, body: str, config: GridConfig) -> str:
    atts = {"col": str(config.default_col), "class": ""}
    atts.update(attributes)

    col = absint(atts["col"])
    if config.clamp_columns:
        col = _clamp_col(col)
    data_attrs = f'data-col="{col}"'
    for bp in BREAKPOINTS:
        raw = atts.get(bp, "")
        if is_empty_value(raw):
            continue
        val = absint(raw)
        if config.clamp_columns:
            val = _clamp_col(val)
        data_attrs += f' data-{bp}="{_esc_attr(str(val))}"'

    out = '<div class="{}" {}>{}</div>'.format(
        _esc_attr(_class_attr(COL_CLASS, atts["class"])),
        data_attrs,
        body,
    )
    return out + COL_END_MARKER if config.end_markers else out


def render_tag(kind: TagKind, attributes: Attributes, body: str, config: GridConfig) -> str:
    if kind == TagKind.ROW:
        return render_row(attributes, body, config)
    return render_col(attributes, body, config)


def render_nodes(nodes: list[TagNode | str], config: GridConfig) -> str:
    """
    Render a matched tree. Text is emitted as-is; bodies are rendered before
    their wrapper so nesting resolves inside-out.
    """

    parts: list[str] = []
    for n in nodes:
        if isinstance(n, TagNode):
            parts.append(render_tag(n.kind, n.attributes, render_nodes(n.children, config), config))
        else:
            parts.append(n)
    return "".join(parts)
