"""Parse markup fragments into BeautifulSoup trees.

``html.parser`` keeps elements where they were authored (no HTML5 table
relocation) but lower-cases tag and attribute names. Attribute names are
restored from the source text of each start tag, and SVG tag names that are
camel-cased in the SVG vocabulary are mapped back.
"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, Tag

from .constants import LOWER_TO_CAMEL_SVG_TAGS

_TAG_OPEN_RE = re.compile(r"<([^\s/>]+)")
_ATTRIBUTE_RE = re.compile(r"""[\s/]*([^\s/>"'=][^\s/>=]*)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*))?""")
_TAG_CLOSE_RE = re.compile(r"[\s/]*>")


@dataclass(frozen=True)
class SourceSpan:
    """Location of an element's start tag in the parsed markup."""

    line: int  # 1-based
    column: int  # 1-based
    start: int
    end: int


def _line_offsets(markup: str) -> List[int]:
    offsets = [0]
    offsets.extend(match.end() for match in re.finditer("\n", markup))
    return offsets


def scan_start_tag(markup: str, start: int = 0) -> Tuple[Dict[str, str], int] | None:
    """Read the start tag at ``start``.

    Returns the authored spelling of each attribute name keyed by its
    lower-cased form, and the offset just past the tag.
    """
    match = _TAG_OPEN_RE.match(markup, start)
    if not match:
        return None
    names: Dict[str, str] = {}
    pos = match.end()
    while pos < len(markup):
        attribute = _ATTRIBUTE_RE.match(markup, pos)
        if not attribute or attribute.end() == pos:
            break
        names.setdefault(attribute.group(1).lower(), attribute.group(1))
        pos = attribute.end()
    close = _TAG_CLOSE_RE.match(markup, pos)
    return names, close.end() if close else pos


def locate(tag: Tag, markup: str, line_offsets: Optional[List[int]] = None) -> SourceSpan | None:
    """Return the span of ``tag``'s start tag, or None if it was not parsed from ``markup``."""
    if tag.sourceline is None or tag.sourcepos is None:
        return None
    offsets = line_offsets or _line_offsets(markup)
    if tag.sourceline > len(offsets):
        return None
    start = offsets[tag.sourceline - 1] + tag.sourcepos
    scanned = scan_start_tag(markup, start)
    if scanned is None:
        return None
    return SourceSpan(line=tag.sourceline, column=tag.sourcepos + 1, start=start, end=scanned[1])


def _restore_case(soup: BeautifulSoup, markup: str) -> None:
    offsets = _line_offsets(markup)
    for tag in soup.find_all(True):
        tag.name = LOWER_TO_CAMEL_SVG_TAGS.get(tag.name, tag.name)
        if not tag.attrs or tag.sourceline is None or tag.sourcepos is None:
            continue
        if tag.sourceline > len(offsets):
            continue
        scanned = scan_start_tag(markup, offsets[tag.sourceline - 1] + tag.sourcepos)
        if scanned is None:
            continue
        authored = scanned[0]
        if any(authored.get(name, name) != name for name in tag.attrs):
            tag.attrs = {authored.get(name, name): value for name, value in tag.attrs.items()}


def parse_markup(markup: str | None) -> BeautifulSoup:
    """Parse a markup fragment. Empty input gives an empty fragment."""
    markup = markup or ""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(
            markup,
            "html.parser",
            multi_valued_attributes=None,
            on_duplicate_attribute="ignore",
        )
    _restore_case(soup, markup)
    return soup
