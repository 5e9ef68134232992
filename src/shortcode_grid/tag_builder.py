from __future__ import annotations

from typing import Mapping


def build_open_tag(tag_name: str, attributes: Mapping[str, str]) -> str:
    parts = [f"[{tag_name}"]
    for key, value in attributes.items():
        if value:
            parts.append(f" {key}:{value}")
    parts.append("]")
    return "".join(parts)


def build_row_tag(gap: str = "16", css_class: str = "", *, tag_name: str = "row") -> str:
    """
    Empty row tag pair as the form editor's generator inserts it. A gap of 16
    is the default and is left out.
    """
    attrs: dict[str, str] = {}
    gap = gap or "16"
    if gap != "16":
        attrs["gap"] = gap
    if css_class:
        attrs["class"] = css_class
    return build_open_tag(tag_name, attrs) + f"[/{tag_name}]"


def build_col_tag(
    col: str = "12",
    sm: str = "",
    md: str = "",
    lg: str = "",
    xl: str = "",
    css_class: str = "",
    *,
    tag_name: str = "col",
) -> str:
    attrs = {"col": col or "12", "sm": sm, "md": md, "lg": lg, "xl": xl, "class": css_class}
    return build_open_tag(tag_name, attrs) + f"[/{tag_name}]"


def wrap_selection(
    text: str,
    start: int,
    end: int,
    tag_name: str,
    attributes: Mapping[str, str],
) -> tuple[str, int]:
    """
    Wrap text[start:end] in a tag pair.

    Returns (new_text, cursor). The cursor sits after the opening tag when the
    selection is empty, after the closing tag otherwise.
    """
    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    selected = text[start:end]
    open_tag = build_open_tag(tag_name, attributes)
    close_tag = f"[/{tag_name}]"

    new_text = text[:start] + open_tag + selected + close_tag + text[end:]
    if selected:
        cursor = start + len(open_tag) + len(selected) + len(close_tag)
    else:
        cursor = start + len(open_tag)
    return new_text, cursor
