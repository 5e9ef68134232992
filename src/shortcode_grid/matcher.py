from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from markup_contracts import TagKind, TagNode

from .attributes import find_malformed_fragments, parse_shortcode_atts
from .config import GridConfig
from .contracts import GridIssue, GridIssueCode


@dataclass(frozen=True, slots=True)
class ShortcodeToken:
    kind: TagKind
    closing: bool
    start: int  # offset of "[" in the markup
    end: int  # offset just past "]"
    atts_string: str  # raw attribute substring (opening tags only)

    def text(self, markup: str) -> str:
        return markup[self.start : self.end]


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    nodes: list[TagNode | str]
    issues: list[GridIssue]
    max_depth_seen: int


@dataclass(slots=True)
class _Frame:
    node_kind: TagKind | None
    attributes: dict[str, str]
    open_token: ShortcodeToken | None
    depth: int
    children: list[TagNode | str] = field(default_factory=list)


def compile_tag_pattern(config: GridConfig) -> re.Pattern[str]:
    """
    `[/name]` closing tags, and `[name]` / `[name attrs]` opening tags where the
    tag name is followed by whitespace or `]`.
    """
    names = "|".join(re.escape(n) for n in (config.row_tag, config.col_tag))
    return re.compile(rf"\[/(?P<close>{names})\]|\[(?P<open>{names})(?P<atts>\s[^\]]*)?\]")


def tokenize_shortcodes(markup: str, config: GridConfig) -> list[ShortcodeToken]:
    kinds = {config.row_tag: TagKind.ROW, config.col_tag: TagKind.COL}
    tokens: list[ShortcodeToken] = []
    for m in compile_tag_pattern(config).finditer(markup):
        if m.group("close") is not None:
            tokens.append(
                ShortcodeToken(kind=kinds[m.group("close")], closing=True, start=m.start(), end=m.end(), atts_string="")
            )
        else:
            tokens.append(
                ShortcodeToken(
                    kind=kinds[m.group("open")],
                    closing=False,
                    start=m.start(),
                    end=m.end(),
                    atts_string=(m.group("atts") or "").strip(),
                )
            )
    return tokens


def pair_tokens(tokens: list[ShortcodeToken]) -> dict[int, int]:
    """
    Pair opening and closing tokens; returns {open_index: close_index} and the
    reverse mapping in the same dict.

    A closing tag pairs with the nearest still-open tag of its own kind. Open
    tags of the other kind sitting above it on the stack are left unpaired, so
    pairs never cross. Closing tags with no open tag of their kind stay unpaired.
    """

    pairs: dict[int, int] = {}
    stack: list[int] = []
    for i, tok in enumerate(tokens):
        if not tok.closing:
            stack.append(i)
            continue
        for j in range(len(stack) - 1, -1, -1):
            if tokens[stack[j]].kind == tok.kind:
                open_i = stack[j]
                del stack[j:]
                pairs[open_i] = i
                pairs[i] = open_i
                break
    return pairs


def _append_text(children: list[TagNode | str], text: str) -> None:
    if not text:
        return
    if children and isinstance(children[-1], str):
        children[-1] = children[-1] + text
    else:
        children.append(text)


def _issue(code: GridIssueCode, message: str, detail: dict[str, Any]) -> GridIssue:
    return GridIssue(code=code.value, message=message, detail=detail)


def match_shortcodes(markup: str, config: GridConfig) -> MatchOutcome:
    """
    Balanced matcher: split `markup` into literal text and TagNode trees.

    Unpaired tags stay in the text verbatim. Pairs nested deeper than
    `config.max_depth` are kept verbatim as a single text span.
    """

    tokens = tokenize_shortcodes(markup, config)
    pairs = pair_tokens(tokens)
    issues: list[GridIssue] = []

    root = _Frame(node_kind=None, attributes={}, open_token=None, depth=0)
    stack: list[_Frame] = [root]
    max_depth_seen = 0
    pos = 0
    i = 0

    while i < len(tokens):
        tok = tokens[i]
        top = stack[-1]
        _append_text(top.children, markup[pos : tok.start])
        pos = tok.end

        if i not in pairs:
            _append_text(top.children, tok.text(markup))
            if tok.closing:
                issues.append(
                    _issue(
                        GridIssueCode.STRAY_CLOSE_TAG,
                        "Closing tag has no matching opening tag; kept as text",
                        {"tag": tok.text(markup), "offset": tok.start},
                    )
                )
            else:
                issues.append(
                    _issue(
                        GridIssueCode.UNCLOSED_TAG,
                        "Opening tag has no matching closing tag; kept as text",
                        {"tag": tok.text(markup), "offset": tok.start},
                    )
                )
            i += 1
            continue

        if not tok.closing:
            depth = top.depth + 1
            close_i = pairs[i]
            if depth > config.max_depth:
                close_tok = tokens[close_i]
                _append_text(top.children, markup[tok.start : close_tok.end])
                issues.append(
                    _issue(
                        GridIssueCode.DEPTH_LIMIT,
                        "Nesting depth limit reached; span kept as text",
                        {"tag": tok.text(markup), "offset": tok.start, "depth": depth, "max_depth": config.max_depth},
                    )
                )
                pos = close_tok.end
                i = close_i + 1
                continue

            max_depth_seen = max(max_depth_seen, depth)
            for frag in find_malformed_fragments(tok.atts_string):
                issues.append(
                    _issue(
                        GridIssueCode.MALFORMED_ATTRIBUTE,
                        "Unrecognized attribute fragment skipped",
                        {"tag": tok.text(markup), "offset": tok.start, "fragment": frag},
                    )
                )
            stack.append(
                _Frame(
                    node_kind=tok.kind,
                    attributes=parse_shortcode_atts(tok.atts_string),
                    open_token=tok,
                    depth=depth,
                )
            )
            i += 1
            continue

        # Paired closing tag: pairs never cross, so its opener is on top.
        frame = stack.pop()
        assert frame.open_token is not None and frame.node_kind is not None
        node = TagNode(
            kind=frame.node_kind,
            attributes=frame.attributes,
            raw_body=markup[frame.open_token.end : tok.start],
            open_tag=frame.open_token.text(markup),
            close_tag=tok.text(markup),
            depth=frame.depth,
            children=frame.children,
        )
        stack[-1].children.append(node)
        i += 1

    _append_text(root.children, markup[pos:])
    return MatchOutcome(nodes=root.children, issues=issues, max_depth_seen=max_depth_seen)


def parse_shortcode_tree(markup: str, config: GridConfig | None = None) -> list[TagNode | str]:
    return match_shortcodes(markup, config or GridConfig()).nodes
