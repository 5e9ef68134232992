from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from shortcode_grid import GridConfig, MatcherMode

from .registry import ENABLED_FEATURES_OPTION, FeatureRegistry

GRID_SETTINGS_OPTION = "lean_forms_grid"

_GRID_BOOL_KEYS = ("end_markers", "strip_autop", "clamp_columns")
_GRID_STR_KEYS = ("row_tag", "col_tag")
_GRID_INT_KEYS = ("max_depth", "default_gap", "default_col")


def _truthy(value: Any) -> bool:
    # Stored options arrive as bools, ints or "0"/"1" strings.
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off")
    return bool(value)


def grid_config_from_dict(d: Mapping[str, Any] | None) -> GridConfig:
    """
    Build a GridConfig from a stored settings dict. Unknown keys are ignored;
    invalid values raise ValueError from GridConfig.validate().
    """
    if not d:
        return GridConfig()
    params: dict[str, Any] = {}
    if "matcher" in d:
        params["matcher"] = MatcherMode(str(d["matcher"]))
    for k in _GRID_INT_KEYS:
        if k in d:
            params[k] = int(d[k])
    for k in _GRID_STR_KEYS:
        if k in d:
            params[k] = str(d[k])
    for k in _GRID_BOOL_KEYS:
        if k in d:
            params[k] = _truthy(d[k])
    return GridConfig(**params)


@dataclass(frozen=True, slots=True)
class FeatureSettings:
    """
    Snapshot of the stored plugin options the feature loader reads.

    Built once per request and passed explicitly.
    """

    enabled_features: dict[str, bool] = field(default_factory=dict)
    option_flags: dict[str, bool] = field(default_factory=dict)
    grid: GridConfig = field(default_factory=GridConfig)

    @staticmethod
    def from_options(options: Mapping[str, Any]) -> "FeatureSettings":
        raw_enabled = options.get(ENABLED_FEATURES_OPTION) or {}
        if not isinstance(raw_enabled, Mapping):
            raise TypeError(f"{ENABLED_FEATURES_OPTION} must be a mapping")

        flags: dict[str, bool] = {}
        for k, v in options.items():
            if k in (ENABLED_FEATURES_OPTION, GRID_SETTINGS_OPTION):
                continue
            if isinstance(v, (bool, int, str)):
                flags[str(k)] = _truthy(v)

        grid_raw = options.get(GRID_SETTINGS_OPTION)
        if grid_raw is not None and not isinstance(grid_raw, Mapping):
            raise TypeError(f"{GRID_SETTINGS_OPTION} must be a mapping")

        return FeatureSettings(
            enabled_features={str(k): _truthy(v) for k, v in raw_enabled.items()},
            option_flags=flags,
            grid=grid_config_from_dict(grid_raw),
        )

    def is_enabled(self, registry: FeatureRegistry, key: str) -> bool:
        """
        A feature is on when it is registered, switched on in the enabled-features
        option, and its own option flag (if it has one) is not switched off.
        """
        spec = registry.get(key)
        if spec is None:
            return False
        if not self.enabled_features.get(key, False):
            return False
        if spec.option is not None:
            return self.option_flags.get(spec.option, True)
        return True

    def enabled_keys(self, registry: FeatureRegistry) -> list[str]:
        return [f.key for f in registry if self.is_enabled(registry, f.key)]
