from __future__ import annotations

import re

from markup_contracts import Attributes

# key, key:value, key=value, key="quoted value". ASCII word characters only.
_ATTR_RE = re.compile(r'([A-Za-z0-9_]+)(?:[:=]([^"\s]+|"[^"]*"))?')
_LEADING_INT_RE = re.compile(r"^\s*[+-]?(\d+)", re.ASCII)
_PERCENT_OCTET_RE = re.compile(r"%[a-fA-F0-9][a-fA-F0-9]")
_CLASS_INVALID_RE = re.compile(r"[^A-Za-z0-9_-]")


def parse_shortcode_atts(atts_string: str) -> Attributes:
    """
    Parse a tag's attribute substring into an ordered key -> value mapping.

    Tokens the grammar does not recognize are skipped; this never raises.
    A key without a value maps to "". Later keys overwrite earlier ones.
    """

    atts: Attributes = {}
    if not atts_string or not atts_string.strip():
        return atts

    for m in _ATTR_RE.finditer(atts_string):
        value = m.group(2)
        atts[m.group(1)] = value.strip('"') if value is not None else ""
    return atts


def find_malformed_fragments(atts_string: str) -> list[str]:
    """
    Return the non-whitespace fragments `parse_shortcode_atts` skipped, in order.
    """

    fragments: list[str] = []
    pos = 0
    for m in _ATTR_RE.finditer(atts_string or ""):
        gap = atts_string[pos : m.start()].strip()
        if gap:
            fragments.append(gap)
        pos = m.end()
    tail = (atts_string or "")[pos:].strip()
    if tail:
        fragments.append(tail)
    return fragments


def absint(value: str | int | None) -> int:
    """
    Non-negative integer from the leading numeric run of `value`; 0 otherwise.
    """

    if value is None:
        return 0
    if isinstance(value, int):
        return abs(value)
    m = _LEADING_INT_RE.match(value)
    return int(m.group(1)) if m else 0


def sanitize_html_class(value: str | None) -> str:
    """
    Reduce `value` to a single CSS class token: percent-encoded octets are
    removed first, then every character outside [A-Za-z0-9_-].
    """

    if not value:
        return ""
    s = _PERCENT_OCTET_RE.sub("", value)
    return _CLASS_INVALID_RE.sub("", s)


def is_empty_value(value: str | None) -> bool:
    # Matches the plugin's PHP empty() test used for breakpoint omission.
    return value is None or value == "" or value == "0"
