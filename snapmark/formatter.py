"""Diffable formatter: render a parsed tree as canonical, indented markup.

Every element starts on its own line and every attribute, class and style
declaration can be wrapped onto its own line, so a change in a snapshot shows
up as a change to as few lines as possible. Inside tags whose whitespace is
significant (``<pre>``, ``<a>`` by default) content is emitted as-is.

The walk threads ``indent`` and ``preserve`` (True when this element or an
ancestor keeps its whitespace) through the recursion. Nothing else is shared
between calls.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, PageElement, Tag

from .constants import (
    ESCAPABLE_RAW_TEXT_ELEMENTS,
    INDENT,
    SELF_CLOSING_SVG_ELEMENTS,
    VOID_ELEMENTS,
)
from .dom_model import MarkupDepthError, NodeKind, check_depth, declaration_markup, is_raw_text, node_kind
from .models import FormattingConfig
from .normalize import escape_for, minify_comment


def _newline(indent: int) -> str:
    return "\n" + INDENT * indent


def _wrap_tokens(tokens: List[str], indent: int) -> str:
    """Quote content with one token per line, closing quote back at ``indent``."""
    lines = "".join(_newline(indent + 1) + token for token in tokens)
    return lines + _newline(indent)


def _attribute_value(name: str, value: str, config: FormattingConfig, indent: int) -> str:
    if name == "class":
        classes = value.split()
        if classes and len(classes) > config.classes_per_line:
            return _wrap_tokens([escape_for(token, config.escape_attributes) for token in classes], indent)
    elif name == "style":
        declarations = [part.strip() for part in value.split(";") if part.strip()]
        if declarations and len(declarations) > config.inline_styles_per_line:
            tokens = [escape_for(part, config.escape_attributes) + ";" for part in declarations]
            return _wrap_tokens(tokens, indent)
    return escape_for(value, config.escape_attributes)


def _render_attribute(name: str, value: str, config: FormattingConfig, indent: int) -> str:
    if not value and not config.empty_attributes:
        return name
    return f'{name}="{_attribute_value(name, value, config, indent)}"'


def _should_self_close(tag: Tag, config: FormattingConfig) -> bool:
    name = tag.name
    has_children = bool(tag.contents)
    if name in SELF_CLOSING_SVG_ELEMENTS and not has_children:
        return config.void_elements in ("html", "xhtml")
    if name in VOID_ELEMENTS:
        return config.void_elements == "xhtml"
    return config.self_closing_tag and not has_children and name not in ESCAPABLE_RAW_TEXT_ELEMENTS


def _render_start_tag(tag: Tag, config: FormattingConfig, indent: int, self_closing: bool) -> str:
    ending = " />" if self_closing else ">"
    attrs = tag.attrs
    if not attrs:
        return f"<{tag.name}{ending}"
    if len(attrs) <= config.attributes_per_line:
        rendered = "".join(
            " " + _render_attribute(name, value, config, indent) for name, value in attrs.items()
        )
        return f"<{tag.name}{rendered}{ending}"
    rendered = "".join(
        _newline(indent + 1) + _render_attribute(name, value, config, indent + 1)
        for name, value in attrs.items()
    )
    return f"<{tag.name}{rendered}{_newline(indent)}{ending.strip()}"


def _render_text(node: PageElement, config: FormattingConfig, indent: int, preserve: bool) -> str:
    text = str(node)
    if not is_raw_text(node):
        text = escape_for(text, config.escape_inner_text)
    if preserve:
        return text
    if text.strip():
        return _newline(indent) + text.strip()
    return ""


def _render_element(tag: Tag, config: FormattingConfig, indent: int, preserve: bool, depth: int) -> str:
    check_depth(depth)

    inside_preserved = preserve
    preserve = preserve or tag.name in config.tags_with_whitespace_preserved
    name = tag.name
    is_void = name in VOID_ELEMENTS
    self_closing = _should_self_close(tag, config)

    result = "" if inside_preserved else _newline(indent)
    result += _render_start_tag(tag, config, indent, self_closing)
    if self_closing:
        return result

    child_indent = indent if preserve else indent + 1
    if not is_void:
        for child in tag.children:
            result += _render_node(child, config, child_indent, preserve, depth + 1)

    if not is_void and (preserve or not tag.contents):
        return result + f"</{name}>"
    if config.void_elements == "xml" and (is_void or name in SELF_CLOSING_SVG_ELEMENTS):
        return result + f"</{name}>"
    if is_void:
        return result
    return result + _newline(indent) + f"</{name}>"


def _render_node(node: PageElement, config: FormattingConfig, indent: int, preserve: bool, depth: int) -> str:
    kind = node_kind(node)
    if kind is NodeKind.ELEMENT:
        return _render_element(node, config, indent, preserve, depth)
    if kind is NodeKind.TEXT:
        return _render_text(node, config, indent, preserve)
    if kind is NodeKind.COMMENT:
        rendered = minify_comment(str(node))
    else:
        rendered = declaration_markup(node)
    return rendered if preserve else _newline(indent) + rendered


def render(tree: BeautifulSoup, config: FormattingConfig | None = None) -> str:
    """Render ``tree`` in the diffable format.

    >>> from snapmark.parser import parse_markup
    >>> print(render(parse_markup('<div class="b a" id="x"><pre> x </pre></div>')))
    <div
      class="
        b
        a
      "
      id="x"
    >
      <pre> x </pre>
    </div>
    """
    config = config or FormattingConfig()
    return "".join(_render_node(node, config, 0, False, 1) for node in tree.children).strip()


__all__ = ["MarkupDepthError", "render"]
