from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .contracts import FeatureKey, FeatureSpec, FeatureTier

ENABLED_FEATURES_OPTION = "lean_forms_enabled_features"


@dataclass(frozen=True, slots=True)
class FeatureRegistry:
    """
    Immutable, ordered set of known features.

    Extensions build a new registry with `with_feature` instead of mutating a
    shared one.
    """

    features: tuple[FeatureSpec, ...] = ()

    def __post_init__(self) -> None:
        keys = [f.key for f in self.features]
        if len(keys) != len(set(keys)):
            raise ValueError("feature keys must be unique")

    @staticmethod
    def default() -> "FeatureRegistry":
        return FeatureRegistry(
            features=(
                FeatureSpec(
                    key=FeatureKey.GRID.value,
                    name="Grid System",
                    tier=FeatureTier.LITE,
                    option="lean_forms_enable_grid",
                ),
                FeatureSpec(key=FeatureKey.ENTRIES.value, name="Entries Management", tier=FeatureTier.LITE),
                FeatureSpec(
                    key=FeatureKey.FORM_PRESETS.value,
                    name="Form Presets",
                    tier=FeatureTier.LITE,
                    option="lean_forms_enable_form_presets",
                ),
            )
        )

    def with_feature(self, spec: FeatureSpec) -> "FeatureRegistry":
        """
        New registry with `spec` added; an existing key is replaced in place.
        """
        out: list[FeatureSpec] = []
        replaced = False
        for f in self.features:
            if f.key == spec.key:
                out.append(spec)
                replaced = True
            else:
                out.append(f)
        if not replaced:
            out.append(spec)
        return FeatureRegistry(features=tuple(out))

    def get(self, key: str) -> FeatureSpec | None:
        for f in self.features:
            if f.key == key:
                return f
        return None

    def keys(self) -> list[str]:
        return [f.key for f in self.features]

    def __iter__(self) -> Iterator[FeatureSpec]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)
