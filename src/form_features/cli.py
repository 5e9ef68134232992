from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .loader import load_features
from .registry import FeatureRegistry
from .settings import FeatureSettings

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lf-features",
        description="Resolve enabled Lean Forms features from a stored-options JSON file.",
    )
    p.add_argument("--options", required=True, type=Path, help="JSON object of stored plugin options.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level to stderr.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        raw = json.loads(args.options.read_text(encoding="utf-8"))
    except ValueError as e:
        logger.error("options file is not valid JSON: %s", e)
        return 2
    if not isinstance(raw, dict):
        logger.error("options file must contain a JSON object")
        return 2
    try:
        settings = FeatureSettings.from_options(raw)
    except (TypeError, ValueError) as e:
        logger.error("invalid options: %s", e)
        return 2

    result = load_features(FeatureRegistry.default(), settings)
    summary = {
        "enabled": result.enabled,
        "loaded": sorted(result.loaded),
        "issues": [i.code + ":" + str((i.detail or {}).get("key", "")) for i in result.issues],
    }
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
