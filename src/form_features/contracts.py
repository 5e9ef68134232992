from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class FeatureKey(str, Enum):
    """
    Built-in feature identifiers. Only these can have factories.
    """

    GRID = "grid"
    ENTRIES = "entries"
    FORM_PRESETS = "form_presets"


class FeatureTier(str, Enum):
    LITE = "Lite"
    PRO = "Pro"


@dataclass(frozen=True, slots=True)
class FeatureSpec:
    key: str
    name: str
    tier: FeatureTier = FeatureTier.LITE
    option: str | None = None  # per-feature on/off option, default on when absent

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class FeatureLoadIssue:
    code: str
    message: str
    detail: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class FeatureLoadResult:
    enabled: list[str]  # registry order
    loaded: dict[str, object] = field(default_factory=dict)
    issues: list[FeatureLoadIssue] = field(default_factory=list)
