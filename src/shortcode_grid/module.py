from __future__ import annotations

import logging
from typing import Any

from markup_contracts import TagKind, iter_tag_nodes

from .autop import strip_autop_artifacts
from .config import GridConfig
from .contracts import GridIssue, GridIssueCode, GridTransformResult, MatcherMode
from .legacy import run_legacy_pass
from .matcher import match_shortcodes, tokenize_shortcodes
from .render import render_nodes

logger = logging.getLogger(__name__)


def _leftover_tag_issues(html: str, config: GridConfig) -> list[GridIssue]:
    """
    Tags still present after a legacy pass were never paired.
    """
    issues: list[GridIssue] = []
    for tok in tokenize_shortcodes(html, config):
        code = GridIssueCode.STRAY_CLOSE_TAG if tok.closing else GridIssueCode.UNCLOSED_TAG
        issues.append(
            GridIssue(
                code=code.value,
                message="Tag left unmatched by the legacy pass; kept as text",
                detail={"tag": tok.text(html)},
            )
        )
    return issues


def _run_balanced(markup: str, config: GridConfig) -> tuple[str, list[GridIssue], dict[str, Any]]:
    outcome = match_shortcodes(markup, config)
    rows = cols = 0
    for node in iter_tag_nodes(outcome.nodes):
        if node.kind == TagKind.ROW:
            rows += 1
        else:
            cols += 1
    html = render_nodes(outcome.nodes, config)
    return html, outcome.issues, {"rows": rows, "cols": cols, "max_depth_seen": outcome.max_depth_seen}


def run_grid_transform(*, markup: Any, config: GridConfig | None = None) -> GridTransformResult:
    """
    Preferred programmatic entrypoint.

    Input: form markup containing zero or more row/col shortcode pairs
    Output: transformed HTML + issues describing every degradation

    Never raises on input text. Non-string input yields ok=False and html="".
    """

    cfg = config or GridConfig()

    if not isinstance(markup, str):
        logger.debug("grid transform skipped: input is %s, not str", type(markup).__name__)
        return GridTransformResult(
            ok=False,
            html="",
            matcher=cfg.matcher,
            issues=[
                GridIssue(
                    code=GridIssueCode.INVALID_INPUT.value,
                    message="Markup must be a string",
                    detail={"type": type(markup).__name__},
                )
            ],
            meta={"rows": 0, "cols": 0, "max_depth_seen": 0, "input_length": 0, "matcher": cfg.matcher.value},
        )

    if cfg.matcher == MatcherMode.LEGACY:
        html, issues, meta = run_legacy_pass(markup, cfg)
        issues = issues + _leftover_tag_issues(html, cfg)
    else:
        html, issues, meta = _run_balanced(markup, cfg)

    if cfg.strip_autop:
        html = strip_autop_artifacts(html)

    meta["input_length"] = len(markup)
    meta["matcher"] = cfg.matcher.value
    for issue in issues:
        logger.debug("grid transform issue %s: %s %s", issue.code, issue.message, issue.detail)

    return GridTransformResult(ok=True, html=html, matcher=cfg.matcher, issues=issues, meta=meta)


def transform(markup: str, config: GridConfig | None = None) -> str:
    """
    Rewrite row/col shortcodes in `markup` into grid wrapper divs.

    Markup with no shortcodes is returned unchanged.
    """
    return run_grid_transform(markup=markup, config=config).html
