from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from shortcode_grid import absint, find_contact_form_ids

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "classic"
PRESET_META_KEY = "_lean_forms_cf7_presets"

_HEX_COLOR_RE = re.compile(r"#([A-Fa-f0-9]{3}){1,2}", re.ASCII)

# Emission order of the custom properties; "_color" options are hex colors,
# "_font_size" options are pixel sizes.
STYLE_OPTIONS = (
    "primary_color",
    "placeholder_color",
    "button_color",
    "primary_bg_color",
    "input_bg_color",
    "button_bg_color",
    "label_font_size",
    "h1_font_size",
    "h2_font_size",
    "h3_font_size",
    "p_font_size",
)


@dataclass(frozen=True, slots=True)
class StylePreset:
    key: str
    name: str
    description: str
    defaults: Mapping[str, str | int]

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "name": self.name, "description": self.description, "defaults": dict(self.defaults)}


STYLE_PRESETS: Mapping[str, StylePreset] = MappingProxyType(
    {
        "classic": StylePreset(
            key="classic",
            name="Classic",
            description="Traditional, professional look",
            defaults=MappingProxyType(
                {
                    "primary_color": "#0073aa",
                    "placeholder_color": "#666666",
                    "button_color": "#ffffff",
                    "primary_bg_color": "#ffffff",
                    "input_bg_color": "#ffffff",
                    "button_bg_color": "#0073aa",
                    "label_font_size": 14,
                    "h1_font_size": 24,
                    "h2_font_size": 20,
                    "h3_font_size": 18,
                    "p_font_size": 16,
                }
            ),
        ),
        "modern": StylePreset(
            key="modern",
            name="Modern",
            description="Contemporary design with shadows",
            defaults=MappingProxyType(
                {
                    "primary_color": "#2563eb",
                    "placeholder_color": "#9ca3af",
                    "button_color": "#ffffff",
                    "primary_bg_color": "#f8fafc",
                    "input_bg_color": "#ffffff",
                    "button_bg_color": "#2563eb",
                    "label_font_size": 13,
                    "h1_font_size": 28,
                    "h2_font_size": 22,
                    "h3_font_size": 18,
                    "p_font_size": 15,
                }
            ),
        ),
    }
)


def resolve_preset(name: Any) -> StylePreset:
    """
    Preset by name; unknown or missing names fall back to "classic".
    """
    preset = STYLE_PRESETS.get(name) if isinstance(name, str) else None
    if preset is None:
        logger.debug("unknown style preset %r; using %s", name, DEFAULT_PRESET)
        return STYLE_PRESETS[DEFAULT_PRESET]
    return preset


def resolve_style_options(styling: Mapping[str, Any] | None) -> dict[str, str | int]:
    """
    Preset defaults overlaid with the stored `custom_options`.

    Override values that are not a valid hex color (color options) are
    dropped in favour of the preset default; font sizes go through absint.
    Keys outside STYLE_OPTIONS are ignored.
    """

    styling = styling or {}
    preset = resolve_preset(styling.get("preset", DEFAULT_PRESET))
    custom = styling.get("custom_options") or {}
    if not isinstance(custom, Mapping):
        custom = {}

    options: dict[str, str | int] = {k: preset.defaults[k] for k in STYLE_OPTIONS}
    for k in STYLE_OPTIONS:
        if k not in custom:
            continue
        raw = custom[k]
        if k.endswith("_color"):
            if isinstance(raw, str) and _HEX_COLOR_RE.fullmatch(raw.strip()):
                options[k] = raw.strip()
            else:
                logger.debug("invalid color %r for %s; keeping preset default", raw, k)
        else:
            options[k] = absint(raw if isinstance(raw, (str, int)) else None)
    return options


def generate_form_css(form_id: int, styling: Mapping[str, Any] | None) -> str:
    """
    CSS block of `--lf-*` custom properties scoped to `.wpcf7-form-{form_id}`.
    """

    options = resolve_style_options(styling)
    lines = [f".wpcf7-form-{absint(form_id)} {{"]
    for k in STYLE_OPTIONS:
        prop = "--lf-" + k.replace("_", "-")
        value = f"{options[k]}px" if k.endswith("_font_size") else options[k]
        lines.append(f"  {prop}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def collect_page_css(page_content: str, stylings: Mapping[int, Mapping[str, Any]]) -> str:
    """
    Inline CSS for every form embedded in `page_content`, in page order.

    `stylings` maps form id -> stored styling; forms without a (non-empty)
    styling contribute nothing. Returns "" when no form is styled.
    """
    blocks = [generate_form_css(fid, stylings[fid]) for fid in find_contact_form_ids(page_content) if stylings.get(fid)]
    return "".join(blocks)


@dataclass(frozen=True, slots=True)
class FormPresetStyler:
    """
    Front-end component of the form presets feature: stored styling in, CSS out.
    """

    def preset_table(self) -> dict[str, dict[str, Any]]:
        return {k: p.to_dict() for k, p in STYLE_PRESETS.items()}

    def form_css(self, form_id: int, styling: Mapping[str, Any] | None) -> str:
        return generate_form_css(form_id, styling)

    def page_css(self, page_content: str, stylings: Mapping[int, Mapping[str, Any]]) -> str:
        return collect_page_css(page_content, stylings)
