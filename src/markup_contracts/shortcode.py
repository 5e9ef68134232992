from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Union


class TagKind(str, Enum):
    ROW = "row"
    COL = "col"


# Ordered key -> value mapping parsed from a tag's attribute substring.
Attributes = dict[str, str]


@dataclass(frozen=True, slots=True)
class TagNode:
    """
    One matched `[tag ...]...[/tag]` span.

    `raw_body` is the untouched source text between the opening and closing
    tags; `children` is the same body split into literal text and nested nodes.
    """

    kind: TagKind
    attributes: Attributes
    raw_body: str
    open_tag: str  # literal opening tag, e.g. "[row gap:8]"
    close_tag: str  # literal closing tag, e.g. "[/row]"
    depth: int  # 1 for top-level tags
    children: list[Union["TagNode", str]] = field(default_factory=list)

    def source(self) -> str:
        return self.open_tag + self.raw_body + self.close_tag

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "attributes": dict(self.attributes),
            "raw_body": self.raw_body,
            "depth": self.depth,
            "children": tree_to_dicts(self.children),
        }


def tree_to_dicts(nodes: list[TagNode | str]) -> list[Any]:
    out: list[Any] = []
    for n in nodes:
        if isinstance(n, TagNode):
            out.append(n.to_dict())
        else:
            out.append({"text": n})
    return out


def iter_tag_nodes(nodes: list[TagNode | str]) -> Iterator[TagNode]:
    """
    Depth-first, document-order walk over every TagNode in a tree.
    """
    stack: list[TagNode | str] = list(reversed(nodes))
    while stack:
        n = stack.pop()
        if isinstance(n, TagNode):
            yield n
            stack.extend(reversed(n.children))
