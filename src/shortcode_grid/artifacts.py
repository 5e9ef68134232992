from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

from .contracts import GridTransformResult


def build_grid_report(result: GridTransformResult) -> dict[str, Any]:
    """
    Report payload for a transform: everything but the HTML itself, which the
    CLI already writes to its output, plus per-code issue counts.
    """
    payload = result.to_dict()
    payload.pop("html")
    payload["output_length"] = len(result.html)
    payload["issue_counts"] = dict(sorted(Counter(i.code for i in result.issues).items()))
    return payload


def write_grid_report_json(*, result: GridTransformResult, out_report: Path) -> None:
    out_report.parent.mkdir(parents=True, exist_ok=True)
    out_report.write_text(
        json.dumps(build_grid_report(result), ensure_ascii=False, sort_keys=True, indent=2) + "\n",
        encoding="utf-8",
    )
