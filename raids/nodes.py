"""
Flat view of an event page: the direct children of `.page-content` as typed
nodes, so "content under a heading" is a plain slice.
"""

from __future__ import annotations
import dataclasses
from typing import Any, List, Optional

from bs4 import BeautifulSoup

from common.utils import node_text

HEADING = "heading"
LIST = "list"
PARAGRAPH = "paragraph"
OTHER = "other"

ROSTER_CLASS = "pkmn-list-flex"
HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}


@dataclasses.dataclass
class Node:
    kind: str
    text: str = ""
    level: int = 0          # headings only
    anchor: str = ""        # heading id attribute
    el: Any = None          # underlying bs4 Tag (roster lists need it)


def to_node(el) -> Node:
    name = (el.name or "").lower()
    if name in HEADING_TAGS:
        return Node(HEADING, node_text(el), HEADING_TAGS[name], el.get("id") or "", el)
    if ROSTER_CLASS in (el.get("class") or []):
        return Node(LIST, node_text(el), el=el)
    if name == "p":
        return Node(PARAGRAPH, node_text(el), el=el)
    return Node(OTHER, el=el)


def content_root(soup: BeautifulSoup):
    return soup.select_one(".page-content")


def page_nodes(root) -> List[Node]:
    if root is None:
        return []
    return [to_node(el) for el in root.find_all(True, recursive=False)]


def collect_section(nodes: List[Node], start: int) -> List[Node]:
    """Nodes after nodes[start] up to the next heading of the same or higher level."""
    head = nodes[start]
    out: List[Node] = []
    for n in nodes[start + 1:]:
        if n.kind == HEADING and n.level <= head.level:
            break
        out.append(n)
    return out


def find_heading(nodes: List[Node], anchor: str, level: int = 2) -> Optional[int]:
    for i, n in enumerate(nodes):
        if n.kind == HEADING and n.level == level and n.anchor == anchor:
            return i
    return None
