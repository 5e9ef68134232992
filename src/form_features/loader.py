from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping

from shortcode_grid import GridConfig, page_needs_grid_stylesheet, transform

from .contracts import FeatureKey, FeatureLoadIssue, FeatureLoadResult
from .presets import FormPresetStyler
from .registry import FeatureRegistry
from .settings import FeatureSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GridShortcodeFilter:
    """
    Form-elements filter for the grid feature: form markup in, grid HTML out.
    """

    config: GridConfig = field(default_factory=GridConfig)

    def __call__(self, content: str) -> str:
        return transform(content, self.config)

    def needs_stylesheet(self, page_content: str, forms: Mapping[int, str]) -> bool:
        return page_needs_grid_stylesheet(page_content, forms, self.config)


def _make_grid(settings: FeatureSettings) -> GridShortcodeFilter:
    return GridShortcodeFilter(config=settings.grid)


def _make_form_presets(settings: FeatureSettings) -> FormPresetStyler:
    return FormPresetStyler()


FeatureFactory = Callable[[FeatureSettings], object]

# Closed dispatch table. Entries only stores submissions, so it has no factory.
FEATURE_FACTORIES: dict[FeatureKey, FeatureFactory] = {
    FeatureKey.GRID: _make_grid,
    FeatureKey.FORM_PRESETS: _make_form_presets,
}


def _factory_for(key: str, factories: Mapping[FeatureKey, FeatureFactory]) -> FeatureFactory | None:
    try:
        return factories.get(FeatureKey(key))
    except ValueError:
        return None


def load_features(
    registry: FeatureRegistry,
    settings: FeatureSettings,
    *,
    factories: Mapping[FeatureKey, FeatureFactory] = FEATURE_FACTORIES,
) -> FeatureLoadResult:
    """
    Instantiate every enabled feature that has a factory.

    Disabled features are skipped silently. Enabled features without a factory
    are reported as issues, never raised.
    """

    enabled = settings.enabled_keys(registry)
    loaded: dict[str, object] = {}
    issues: list[FeatureLoadIssue] = []

    for key in enabled:
        factory = _factory_for(key, factories)
        if factory is None:
            issues.append(
                FeatureLoadIssue(
                    code="FEATURE_NO_FACTORY",
                    message="Feature is enabled but has no factory",
                    detail={"key": key},
                )
            )
            logger.debug("feature %s enabled without a factory; skipped", key)
            continue
        loaded[key] = factory(settings)
        logger.debug("feature %s loaded", key)

    return FeatureLoadResult(enabled=enabled, loaded=loaded, issues=issues)
