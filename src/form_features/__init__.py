"""
Feature registry and loader.

The set of features is an immutable registry; which of them are active comes
from a FeatureSettings snapshot of the stored options. Features are built
through a closed FeatureKey -> factory table, never by class-name lookup.
"""

from .contracts import FeatureKey, FeatureLoadIssue, FeatureLoadResult, FeatureSpec, FeatureTier
from .loader import FEATURE_FACTORIES, GridShortcodeFilter, load_features
from .presets import STYLE_PRESETS, FormPresetStyler, StylePreset, collect_page_css, generate_form_css
from .registry import FeatureRegistry
from .settings import FeatureSettings, grid_config_from_dict

__all__ = [
    "FEATURE_FACTORIES",
    "FeatureKey",
    "FeatureLoadIssue",
    "FeatureLoadResult",
    "FeatureRegistry",
    "FeatureSettings",
    "FeatureSpec",
    "FeatureTier",
    "FormPresetStyler",
    "GridShortcodeFilter",
    "STYLE_PRESETS",
    "StylePreset",
    "collect_page_css",
    "generate_form_css",
    "grid_config_from_dict",
    "load_features",
]
