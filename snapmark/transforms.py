"""Ordered DOM passes that normalize a parsed tree before formatting.

Each pass mutates the tree in place and is a no-op on an empty tree. The
order is fixed: live values are read before stubs rename or empty elements,
and sorting runs last so every attribute a pass adds is sorted too.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

from bs4 import BeautifulSoup, Comment, Tag
from soupsieve import SelectorSyntaxError

from .constants import FORM_CONTROL_TAGS
from .dom_model import tree_to_html
from .io_utils import debug_log, warn
from .models import Settings
from .parser import parse_markup
from .stringify import stringify, swap_quotes
from .stubs import resolve_stub_tag_name
from .token_removal import remove_test_tokens
from .wrappers import HasLiveValues, live_values_of

_SCOPED_STYLE_ID_RE = re.compile(r"data-v-[A-Za-z0-9_-]+")
_FUNCTION_RE = re.compile(r"function\s*[\w$]*\s*\([^)]*\)\s*\{.*\}", re.DOTALL)
_ARROW_RES = (
    re.compile(r"^\s*\w+\s*=>"),
    re.compile(r"^\s*\([^)]*\)\s*=>"),
)
INLINE_FUNCTION_PLACEHOLDER = "[function]"
CHECKABLE_INPUT_TYPES = ("checkbox", "radio")

LivePairs = List[Tuple[Tag, Any]]


def _elements(tree: BeautifulSoup) -> List[Tag]:
    return tree.find_all(True)


def remove_scoped_style_ids(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.remove_data_v_id:
        return
    debug_log("remove_scoped_style_ids", enabled=settings.debug)
    names = {
        name
        for tag in _elements(tree)
        for name in tag.attrs
        if _SCOPED_STYLE_ID_RE.fullmatch(name)
    }
    for tag in _elements(tree):
        for name in names.intersection(tag.attrs):
            del tag[name]


def remove_attributes_by_pattern(tree: BeautifulSoup, settings: Settings) -> None:
    pattern = settings.regex_to_remove_attributes
    if pattern is None:
        return
    debug_log("remove_attributes_by_pattern", enabled=settings.debug, data={"pattern": pattern.pattern})
    for tag in _elements(tree):
        for name in [name for name in tag.attrs if pattern.search(name)]:
            del tag[name]


def clear_attributes(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.attributes_to_clear:
        return
    debug_log(
        "clear_attributes",
        enabled=settings.debug,
        data={"attributes": list(settings.attributes_to_clear)},
    )
    for tag in _elements(tree):
        for name in settings.attributes_to_clear:
            if name in tag.attrs:
                tag[name] = ""


def looks_like_function(value: str) -> bool:
    """True for values such as ``function (a) { return a; }`` or ``(a) => a``."""
    if value.startswith(("function ", "function(")):
        return value.endswith("}") and _FUNCTION_RE.match(value) is not None
    return any(pattern.match(value) for pattern in _ARROW_RES)


def clear_inline_functions(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.clear_inline_functions:
        return
    debug_log("clear_inline_functions", enabled=settings.debug)
    for tag in _elements(tree):
        for name, value in tag.attrs.items():
            if looks_like_function(value):
                tag[name] = INLINE_FUNCTION_PLACEHOLDER


def pair_live_elements(tree: BeautifulSoup, wrapper: HasLiveValues, settings: Settings) -> Optional[LivePairs]:
    """Match static elements to live ones by document position."""
    tags = _elements(tree)
    live = list(wrapper.live_elements())
    if len(live) != len(tags):
        warn(
            f"The component reported {len(live)} live elements but its markup has "
            f"{len(tags)}. Live values were not added to the snapshot.",
            verbose=settings.verbose,
        )
        return None
    return list(zip(tags, live))


def stringify_attributes(pairs: LivePairs, settings: Settings) -> None:
    if not settings.stringify_attributes:
        return
    debug_log("stringify_attributes", enabled=settings.debug)
    skipped = set(settings.attributes_not_to_stringify) | set(settings.attributes_to_clear)
    for tag, live in pairs:
        props = getattr(live, "props", None) or {}
        for name, value in props.items():
            if name in skipped or name not in tag.attrs or isinstance(value, str):
                continue
            tag[name] = swap_quotes(stringify(value))


def add_input_values(pairs: LivePairs, settings: Settings) -> None:
    if not settings.add_input_values:
        return
    debug_log("add_input_values", enabled=settings.debug)
    for tag, live in pairs:
        if tag.name not in FORM_CONTROL_TAGS:
            continue
        tag["value"] = swap_quotes(stringify(getattr(live, "value", None)))
        if tag.name == "input" and tag.get("type") in CHECKABLE_INPUT_TYPES:
            tag["checked"] = stringify(bool(getattr(live, "checked", False)))


def stub_components(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.stubs:
        return
    debug_log("stub_components", enabled=settings.debug, data={"selectors": list(settings.stubs)})
    for selector, spec in settings.stubs.items():
        try:
            matches = tree.select(selector)
        except SelectorSyntaxError as exc:
            warn(f"Skipping stub with an invalid selector {selector!r}: {exc}", verbose=settings.verbose)
            continue
        tag_name = resolve_stub_tag_name(selector, spec)
        for tag in matches:
            if spec.remove_attributes is True:
                tag.attrs = {}
            elif spec.remove_attributes:
                for name in spec.remove_attributes:
                    tag.attrs.pop(name, None)
            if spec.remove_inner_html:
                tag.clear()
            tag.name = tag_name


def sort_attributes(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.sort_attributes:
        return
    debug_log("sort_attributes", enabled=settings.debug)
    for tag in _elements(tree):
        tag.attrs = dict(sorted(tag.attrs.items()))


def sort_classes(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.sort_classes:
        return
    debug_log("sort_classes", enabled=settings.debug)
    for tag in _elements(tree):
        classes = tag.get("class", "").split()
        if classes:
            tag["class"] = " ".join(sorted(classes))


def remove_comments(tree: BeautifulSoup, settings: Settings) -> None:
    if not settings.remove_comments:
        return
    debug_log("remove_comments", enabled=settings.debug)
    for comment in tree.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()


def apply_transforms(tree: BeautifulSoup, settings: Settings, wrapper: Any = None) -> BeautifulSoup:
    """Run every pass over ``tree`` in order and return it."""
    debug_log("apply_transforms", enabled=settings.debug, details="Normalizing markup before formatting.")
    remove_test_tokens(tree, settings)
    remove_scoped_style_ids(tree, settings)
    remove_attributes_by_pattern(tree, settings)
    clear_attributes(tree, settings)
    clear_inline_functions(tree, settings)

    live = live_values_of(wrapper)
    if live is not None and (settings.stringify_attributes or settings.add_input_values):
        pairs = pair_live_elements(tree, live, settings)
        if pairs is not None:
            stringify_attributes(pairs, settings)
            add_input_values(pairs, settings)

    stub_components(tree, settings)
    sort_attributes(tree, settings)
    sort_classes(tree, settings)
    remove_comments(tree, settings)
    return tree


def transform_markup(markup: str | None, settings: Settings, wrapper: Any = None) -> str:
    """Parse ``markup``, run the passes and return compact HTML."""
    return tree_to_html(apply_transforms(parse_markup(markup), settings, wrapper))
