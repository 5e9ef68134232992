from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .artifacts import write_grid_report_json
from .config import GridConfig
from .contracts import MatcherMode
from .module import run_grid_transform

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lf-grid",
        description="Rewrite [row]/[col] grid shortcodes in CF7 form markup into grid wrapper divs.",
    )
    p.add_argument("--input", type=Path, default=None, help="Form markup file. Default: stdin.")
    p.add_argument("--output", type=Path, default=None, help="Output HTML file. Default: stdout.")
    p.add_argument(
        "--matcher",
        choices=[m.value for m in MatcherMode],
        default=MatcherMode.BALANCED.value,
        help="Tag pairing strategy.",
    )
    p.add_argument("--max-depth", type=int, default=128, help="Tags nested deeper are left verbatim.")
    p.add_argument("--row-tag", default="row", help='Row shortcode name (plugin forms use "lfcf7-row").')
    p.add_argument("--col-tag", default="col", help='Column shortcode name (plugin forms use "lfcf7-col").')
    p.add_argument("--end-markers", action="store_true", help="Append <!-- /grid-row --> style end markers.")
    p.add_argument("--strip-autop", action="store_true", help="Remove wpautop <p>/<br> debris around wrappers.")
    p.add_argument("--clamp-columns", action="store_true", help="Clamp column widths to 1..12.")
    p.add_argument("--report", type=Path, default=None, help="Optional JSON report of the transform.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log issues at DEBUG level to stderr.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = GridConfig(
            matcher=MatcherMode(args.matcher),
            max_depth=args.max_depth,
            row_tag=args.row_tag,
            col_tag=args.col_tag,
            end_markers=args.end_markers,
            strip_autop=args.strip_autop,
            clamp_columns=args.clamp_columns,
        )
    except ValueError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    markup = args.input.read_text(encoding="utf-8") if args.input is not None else sys.stdin.read()
    result = run_grid_transform(markup=markup, config=config)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(result.html, encoding="utf-8")
    else:
        sys.stdout.write(result.html)

    if args.report is not None:
        write_grid_report_json(result=result, out_report=args.report)

    if result.issues:
        logger.warning("%d issue(s) while transforming grid shortcodes", len(result.issues))
    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
