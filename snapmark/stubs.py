"""Selector to stub tag name translation."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover
    from .models import StubSpec

STUB_SUFFIX = "-stub"

_SEPARATOR_RUN_RE = re.compile(r"[^a-z0-9]+")


def _separator(run: str) -> str:
    return "_" if any(char.isspace() for char in run) else "-"


def stub_slug(selector: str) -> str:
    """Derive a tag name from a CSS selector.

    Runs of characters other than ``[a-z0-9]`` become ``_`` when they contain
    whitespace (descendant combinators) and ``-`` otherwise.

    >>> stub_slug(".artichoke")
    'artichoke-stub'
    >>> stub_slug("#A li:nth-of-type(odd)")
    'a_li-nth-of-type-odd-stub'
    """
    slug = _SEPARATOR_RUN_RE.sub(lambda match: _separator(match.group(0)), selector.lower())
    slug = slug.strip("_-")
    if not slug:
        return STUB_SUFFIX.lstrip("-")
    if slug.endswith(STUB_SUFFIX):
        return slug
    return slug + STUB_SUFFIX


def resolve_stub_tag_name(selector: str, spec: Union["StubSpec", str, None] = None) -> str:
    if isinstance(spec, str):
        return spec
    if spec is not None and spec.tag_name:
        return spec.tag_name
    return stub_slug(selector)
