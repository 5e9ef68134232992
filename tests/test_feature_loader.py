from __future__ import annotations

import unittest

from form_features import (
    FeatureKey,
    FeatureRegistry,
    FeatureSettings,
    FeatureSpec,
    FeatureTier,
    GridShortcodeFilter,
    load_features,
)
from shortcode_grid import MatcherMode


def _options(**enabled: object) -> dict[str, object]:
    return {"lean_forms_enabled_features": dict(enabled)}


class TestFeatureRegistry(unittest.TestCase):
    def test_default_registry(self) -> None:
        reg = FeatureRegistry.default()
        self.assertEqual(reg.keys(), ["grid", "entries", "form_presets"])
        grid = reg.get("grid")
        assert grid is not None
        self.assertEqual(grid.option, "lean_forms_enable_grid")
        self.assertEqual(grid.tier, FeatureTier.LITE)
        self.assertIsNone(reg.get("missing"))

    def test_with_feature_returns_new_registry(self) -> None:
        reg = FeatureRegistry.default()
        pro = FeatureSpec(key="conditional_logic", name="Conditional Logic", tier=FeatureTier.PRO)
        extended = reg.with_feature(pro)
        self.assertEqual(len(reg), 3)
        self.assertEqual(extended.keys(), ["grid", "entries", "form_presets", "conditional_logic"])

        renamed = extended.with_feature(FeatureSpec(key="grid", name="Grid"))
        self.assertEqual(renamed.keys(), extended.keys())
        self.assertEqual(renamed.get("grid").name, "Grid")  # type: ignore[union-attr]

    def test_duplicate_keys_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FeatureRegistry(features=(FeatureSpec(key="a", name="A"), FeatureSpec(key="a", name="B")))


class TestFeatureSettings(unittest.TestCase):
    def test_enabled_keys_follow_option(self) -> None:
        reg = FeatureRegistry.default()
        s = FeatureSettings.from_options(_options(grid=True, entries="1", form_presets=False))
        self.assertEqual(s.enabled_keys(reg), ["grid", "entries"])
        self.assertFalse(s.is_enabled(reg, "form_presets"))
        self.assertFalse(s.is_enabled(reg, "unknown"))

    def test_missing_option_means_nothing_enabled(self) -> None:
        s = FeatureSettings.from_options({})
        self.assertEqual(s.enabled_keys(FeatureRegistry.default()), [])

    def test_per_feature_flag_switches_off(self) -> None:
        reg = FeatureRegistry.default()
        opts = _options(grid=True)
        opts["lean_forms_enable_grid"] = "0"
        self.assertEqual(FeatureSettings.from_options(opts).enabled_keys(reg), [])

        opts["lean_forms_enable_grid"] = True
        self.assertEqual(FeatureSettings.from_options(opts).enabled_keys(reg), ["grid"])

    def test_grid_settings(self) -> None:
        opts = _options(grid=True)
        opts["lean_forms_grid"] = {"matcher": "legacy", "end_markers": "1", "max_depth": "32", "ignored": 1}
        s = FeatureSettings.from_options(opts)
        self.assertEqual(s.grid.matcher, MatcherMode.LEGACY)
        self.assertTrue(s.grid.end_markers)
        self.assertEqual(s.grid.max_depth, 32)

    def test_invalid_settings_raise(self) -> None:
        with self.assertRaises(ValueError):
            FeatureSettings.from_options({"lean_forms_grid": {"max_depth": 0}})
        with self.assertRaises(ValueError):
            FeatureSettings.from_options({"lean_forms_grid": {"matcher": "greedy"}})
        with self.assertRaises(TypeError):
            FeatureSettings.from_options({"lean_forms_enabled_features": ["grid"]})


class TestLoadFeatures(unittest.TestCase):
    def test_grid_loaded_and_missing_factories_reported(self) -> None:
        reg = FeatureRegistry.default()
        s = FeatureSettings.from_options(_options(grid=True, entries=True))
        result = load_features(reg, s)

        self.assertEqual(result.enabled, ["grid", "entries"])
        self.assertEqual(list(result.loaded), ["grid"])
        self.assertIsInstance(result.loaded["grid"], GridShortcodeFilter)
        self.assertEqual([(i.code, (i.detail or {})["key"]) for i in result.issues], [("FEATURE_NO_FACTORY", "entries")])

    def test_extension_feature_without_factory(self) -> None:
        reg = FeatureRegistry.default().with_feature(FeatureSpec(key="pro_only", name="Pro", tier=FeatureTier.PRO))
        result = load_features(reg, FeatureSettings.from_options(_options(pro_only=True)))
        self.assertEqual(result.loaded, {})
        self.assertEqual([i.code for i in result.issues], ["FEATURE_NO_FACTORY"])

    def test_custom_factory_table(self) -> None:
        reg = FeatureRegistry.default()
        s = FeatureSettings.from_options(_options(entries=True))
        result = load_features(reg, s, factories={FeatureKey.ENTRIES: lambda settings: "entries-component"})
        self.assertEqual(result.loaded, {"entries": "entries-component"})
        self.assertEqual(result.issues, [])

    def test_grid_filter_uses_configured_grid(self) -> None:
        opts = _options(grid=True)
        opts["lean_forms_grid"] = {"row_tag": "lfcf7-row", "col_tag": "lfcf7-col"}
        result = load_features(FeatureRegistry.default(), FeatureSettings.from_options(opts))
        grid = result.loaded["grid"]
        assert isinstance(grid, GridShortcodeFilter)

        self.assertEqual(
            grid("[lfcf7-row][lfcf7-col col:6]A[/lfcf7-col][/lfcf7-row]"),
            '<div class="grid-row" style="--grid-gap: 16px;"><div class="grid-col" data-col="6">A</div></div>',
        )
        self.assertTrue(grid.needs_stylesheet('[contact-form-7 id="3"]', {3: "[lfcf7-row][/lfcf7-row]"}))


if __name__ == "__main__":
    unittest.main()
