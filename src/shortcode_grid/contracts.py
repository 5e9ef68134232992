from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class MatcherMode(str, Enum):
    """
    Strategy used to pair opening and closing tags.

    BALANCED pairs each closing tag with the nearest open tag of the same kind.
    LEGACY reproduces the non-greedy regex pass the plugin shipped with.
    """

    BALANCED = "balanced"
    LEGACY = "legacy"


class GridIssueCode(str, Enum):
    UNCLOSED_TAG = "GRID_UNCLOSED_TAG"
    STRAY_CLOSE_TAG = "GRID_STRAY_CLOSE_TAG"
    DEPTH_LIMIT = "GRID_DEPTH_LIMIT"
    MALFORMED_ATTRIBUTE = "GRID_MALFORMED_ATTRIBUTE"
    INVALID_INPUT = "GRID_INVALID_INPUT"


@dataclass(frozen=True, slots=True)
class GridIssue:
    code: str
    message: str
    detail: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class GridTransformResult:
    ok: bool
    html: str
    matcher: MatcherMode
    issues: list[GridIssue] = field(default_factory=list)
    # {"rows": int, "cols": int, "max_depth_seen": int, ...}
    meta: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
