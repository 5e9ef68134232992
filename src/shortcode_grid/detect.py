from __future__ import annotations

import re
from typing import Mapping

from .config import GridConfig

_CF7_SHORTCODE_ID_RE = re.compile(r'\[contact-form-7[^\]]*id="?(\d+)"?[^\]]*\]')


def has_grid_shortcodes(markup: str, config: GridConfig | None = None) -> bool:
    cfg = config or GridConfig()
    return f"[{cfg.row_tag}" in markup or f"[{cfg.col_tag}" in markup


def find_contact_form_ids(page_content: str) -> list[int]:
    """
    Form ids referenced by `[contact-form-7 ... id="N"]` shortcodes, in order, deduplicated.
    """
    seen: list[int] = []
    for m in _CF7_SHORTCODE_ID_RE.finditer(page_content):
        form_id = int(m.group(1))
        if form_id not in seen:
            seen.append(form_id)
    return seen


def page_needs_grid_stylesheet(
    page_content: str,
    forms: Mapping[int, str],
    config: GridConfig | None = None,
) -> bool:
    """
    True when any form embedded in `page_content` uses grid shortcodes.

    `forms` maps form id -> form markup; ids missing from it are ignored.
    """
    for form_id in find_contact_form_ids(page_content):
        markup = forms.get(form_id)
        if markup is not None and has_grid_shortcodes(markup, config):
            return True
    return False
