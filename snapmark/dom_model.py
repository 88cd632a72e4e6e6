"""Node classification and compact HTML serialization for parsed trees."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from bs4 import BeautifulSoup, Comment, NavigableString, PageElement, Tag
from bs4.element import PreformattedString

from .constants import MAX_DEPTH, RAW_TEXT_ELEMENTS, VOID_ELEMENTS
from .normalize import escape_html


class MarkupDepthError(ValueError):
    """Raised when elements nest deeper than ``MAX_DEPTH``."""


def check_depth(depth: int) -> None:
    if depth > MAX_DEPTH:
        raise MarkupDepthError(f"Markup is nested more than {MAX_DEPTH} elements deep.")


class NodeKind(str, Enum):
    FRAGMENT = "fragment"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DECLARATION = "declaration"


def node_kind(node: PageElement) -> NodeKind:
    if isinstance(node, BeautifulSoup):
        return NodeKind.FRAGMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, PreformattedString):
        return NodeKind.DECLARATION
    return NodeKind.TEXT


def declaration_markup(node: NavigableString) -> str:
    """Doctypes, CDATA sections and processing instructions, as authored."""
    return node.output_ready(formatter=None).strip()


def is_raw_text(node: NavigableString) -> bool:
    parent = node.parent
    return parent is not None and parent.name in RAW_TEXT_ELEMENTS


def _compact_attrs(attrs: Dict[str, str]) -> str:
    return "".join(f' {name}="{escape_html(value)}"' for name, value in attrs.items())


def _render_node(node: PageElement, parts: List[str], depth: int) -> None:
    kind = node_kind(node)
    if kind is NodeKind.COMMENT:
        parts.append(f"<!--{node}-->")
    elif kind is NodeKind.DECLARATION:
        parts.append(declaration_markup(node))
    elif kind is NodeKind.TEXT:
        parts.append(str(node) if is_raw_text(node) else escape_html(str(node)))
    else:
        check_depth(depth)
        parts.append(f"<{node.name}{_compact_attrs(node.attrs)}>")
        if node.name in VOID_ELEMENTS:
            return
        for child in node.children:
            _render_node(child, parts, depth + 1)
        parts.append(f"</{node.name}>")


def tree_to_html(tree: BeautifulSoup) -> str:
    """Serialize a tree without formatting, e.g. for ``formatter='none'``.

    Entities follow ``escape_html`` for both attribute values and text.
    """
    parts: List[str] = []
    for node in tree.children:
        _render_node(node, parts, 1)
    return "".join(parts)
