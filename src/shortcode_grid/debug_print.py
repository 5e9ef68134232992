from __future__ import annotations

import argparse
import sys
from pathlib import Path

from markup_contracts import TagNode

from .config import GridConfig
from .matcher import match_shortcodes


def _snippet(text: str, limit: int) -> str:
    s = " ".join(text.split())
    return s if len(s) <= limit else s[: limit - 3] + "..."


def format_tree(nodes: list[TagNode | str], *, show_text: bool = False, max_snippet: int = 60) -> list[str]:
    lines: list[str] = []
    stack: list[tuple[TagNode | str, int]] = [(n, 0) for n in reversed(nodes)]
    while stack:
        n, indent = stack.pop()
        pad = "  " * indent
        if isinstance(n, TagNode):
            atts = " ".join(f"{k}={v!r}" for k, v in n.attributes.items())
            lines.append(f"{pad}{n.kind.value} depth={n.depth}" + (f" {atts}" if atts else ""))
            stack.extend((c, indent + 1) for c in reversed(n.children))
        elif show_text and n.strip():
            lines.append(f"{pad}text {_snippet(n, max_snippet)!r}")
    return lines


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="lf-grid-debug")
    ap.add_argument("--input", required=True, type=Path, help="Form markup file.")
    ap.add_argument("--row-tag", default="row")
    ap.add_argument("--col-tag", default="col")
    ap.add_argument("--show-text", action="store_true", help="Also print literal text snippets.")
    ap.add_argument("--max-snippet", type=int, default=60, help="Max characters for a snippet.")
    args = ap.parse_args(argv)

    cfg = GridConfig(row_tag=args.row_tag, col_tag=args.col_tag)
    outcome = match_shortcodes(args.input.read_text(encoding="utf-8"), cfg)

    print(f"max_depth_seen={outcome.max_depth_seen} issues={len(outcome.issues)}")
    for line in format_tree(outcome.nodes, show_text=args.show_text, max_snippet=args.max_snippet):
        print(line)
    for issue in outcome.issues:
        print(f"! {issue.code} {issue.detail}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
