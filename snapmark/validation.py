"""Lenient validation for serializer settings.

A bad setting never aborts a snapshot. Each problem is reported through
``warn`` (gated by ``verbose``) and the offending value is dropped, so the
model default applies. The cleaners return plain dicts keyed by model field
name, ready for pydantic.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Tuple

from pydantic.fields import FieldInfo

from .constants import FORMATTER_NAMES, VOID_ELEMENT_STYLES
from .io_utils import warn

_DROP = object()

STUB_KEYS = {
    "removeInnerHtml": "remove_inner_html",
    "remove_inner_html": "remove_inner_html",
    "removeAttributes": "remove_attributes",
    "remove_attributes": "remove_attributes",
    "tagName": "tag_name",
    "tag_name": "tag_name",
}


def accepted_keys(fields: Mapping[str, FieldInfo]) -> Dict[str, str]:
    """Map every accepted spelling (alias or field name) to the field name."""
    table: Dict[str, str] = {}
    for name, info in fields.items():
        table[name] = name
        if info.alias:
            table[info.alias] = name
    return table


def _label(prefix: str, name: str, info: FieldInfo) -> str:
    return prefix + (info.alias or name)


def _format_default(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return repr(value)


def _check_bool(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if isinstance(value, bool):
        return value
    warn(
        f"{label} should be a boolean or undefined. "
        f"Using default value ({_format_default(info.default)}).",
        verbose=verbose,
    )
    return _DROP


def _check_whole_number(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    warn(f"{label} must be a whole number.", verbose=verbose)
    return _DROP


def _check_attribute_names(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if not isinstance(value, (list, tuple)):
        warn(f"{label} must be a list of attribute names.", verbose=verbose)
        return _DROP
    names: List[str] = []
    for item in value:
        if not isinstance(item, str):
            warn(f"Attributes must be a type of string in {label}. Received: {item!r}", verbose=verbose)
        elif not item or re.search(r"\s", item):
            warn(f"Attributes should not include a space in {label}. Received: {item}", verbose=verbose)
        else:
            names.append(item)
    return tuple(names)


def _check_formatter(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if value in FORMATTER_NAMES or callable(value):
        return value
    warn(f"Allowed values for {label} are 'none', 'diffable', or a function.", verbose=verbose)
    return _DROP


def _check_callable(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if callable(value):
        return value
    warn(f"The {label} option must be a function that returns a string, or undefined.", verbose=verbose)
    return _DROP


def _check_pattern(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if isinstance(value, re.Pattern):
        return value
    if isinstance(value, str):
        try:
            return re.compile(value)
        except re.error as exc:
            warn(f"{label} is not a valid regular expression: {exc}", verbose=verbose)
            return _DROP
    warn(
        f"The {label} setting must be a regular expression or undefined. Received: {value!r}",
        verbose=verbose,
    )
    return _DROP


def _check_void_elements(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if value in VOID_ELEMENT_STYLES:
        return value
    warn(f"{label} must be either 'xhtml', 'html', 'xml', or undefined.", verbose=verbose)
    return _DROP


def _check_tag_names(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    if isinstance(value, (list, tuple, set, frozenset)) and all(isinstance(tag, str) for tag in value):
        return tuple(tag.lower() for tag in value)
    warn(f"{label} must be a list of tag names, like ['a', 'pre'].", verbose=verbose)
    return _DROP


def _clean_stub(selector: str, value: Any, verbose: bool) -> Dict[str, Any] | None:
    if isinstance(value, str):
        if not value.strip():
            warn(f"A stub tag name must not be empty. Skipping stub: {selector}", verbose=verbose)
            return None
        return {"tag_name": value, "remove_inner_html": True, "remove_attributes": True}
    if not isinstance(value, Mapping):
        warn(
            f"A stub must be a tag name string or a mapping of stub settings. Skipping stub: {selector}",
            verbose=verbose,
        )
        return None

    stub: Dict[str, Any] = {}
    for key, item in value.items():
        name = STUB_KEYS.get(key)
        if name is None:
            warn(f"Removed invalid stub setting {key} from stub: {selector}", verbose=verbose)
            continue
        if item is None:
            continue
        if name == "remove_inner_html":
            if isinstance(item, bool):
                stub[name] = item
            else:
                warn("The 'removeInnerHtml' property for a stub must be a boolean or undefined.", verbose=verbose)
        elif name == "remove_attributes":
            if isinstance(item, bool):
                stub[name] = item
            elif isinstance(item, (list, tuple)):
                attributes = [attribute for attribute in item if isinstance(attribute, str)]
                if len(attributes) != len(item):
                    warn(
                        "If specifying HTML attributes to remove from a stub, they must be strings.",
                        verbose=verbose,
                    )
                stub[name] = attributes
            else:
                warn(
                    "The 'removeAttributes' property for a stub must be a boolean, "
                    "a list of attribute names, or undefined.",
                    verbose=verbose,
                )
        elif isinstance(item, str) and item.strip():
            stub[name] = item
        else:
            warn("The 'tagName' property for a stub must be a string or undefined.", verbose=verbose)
    return stub


def _check_stubs(label: str, value: Any, info: FieldInfo, verbose: bool) -> Any:
    items: List[Tuple[str, Any]]
    if isinstance(value, (list, tuple)):
        if not all(isinstance(selector, str) for selector in value):
            warn(f"If using {label} as a list, all values must be a string of a CSS selector.", verbose=verbose)
        items = [(selector, {"remove_inner_html": True, "remove_attributes": True})
                 for selector in value if isinstance(selector, str)]
    elif isinstance(value, Mapping):
        items = list(value.items())
    else:
        warn(f"The {label} setting must be either a list, a mapping, or undefined.", verbose=verbose)
        return _DROP

    stubs: Dict[str, Dict[str, Any]] = {}
    for selector, raw in items:
        if not isinstance(selector, str) or not selector.strip():
            warn(f"Stub selectors must be non-empty strings. Skipping stub: {selector!r}", verbose=verbose)
            continue
        stub = _clean_stub(selector, raw, verbose)
        if stub is not None:
            stubs[selector] = stub
    return stubs


_Check = Callable[[str, Any, FieldInfo, bool], Any]

SETTING_CHECKS: Dict[str, _Check] = {
    "attributes_to_clear": _check_attribute_names,
    "attributes_not_to_stringify": _check_attribute_names,
    "stubs": _check_stubs,
    "formatter": _check_formatter,
    "post_processor": _check_callable,
    "regex_to_remove_attributes": _check_pattern,
}

FORMATTING_CHECKS: Dict[str, _Check] = {
    "void_elements": _check_void_elements,
    "tags_with_whitespace_preserved": _check_tag_names,
}


def _clean(
    data: Mapping[str, Any],
    fields: Mapping[str, FieldInfo],
    checks: Mapping[str, _Check],
    *,
    prefix: str,
    verbose: bool,
) -> Dict[str, Any]:
    table = accepted_keys(fields)
    cleaned: Dict[str, Any] = {}
    for key, value in data.items():
        name = table.get(key)
        if name is None:
            warn(f"Removed invalid setting {prefix}{key}", verbose=verbose)
            continue
        if value is None:
            continue
        info = fields[name]
        check = checks.get(name)
        if check is None and info.annotation is bool:
            check = _check_bool
        elif check is None and info.annotation is int:
            check = _check_whole_number
        if check is not None:
            value = check(_label(prefix, name, info), value, info, verbose)
            if value is _DROP:
                continue
        cleaned[name] = value
    return cleaned


def clean_formatting(data: Any, fields: Mapping[str, FieldInfo], *, verbose: bool = True) -> Any:
    if not isinstance(data, Mapping):
        return data
    return _clean(data, fields, FORMATTING_CHECKS, prefix="formatting.", verbose=verbose)


def clean_settings(
    data: Any,
    fields: Mapping[str, FieldInfo],
    formatting_fields: Mapping[str, FieldInfo],
) -> Any:
    """Validate raw settings, logging and dropping whatever is unusable."""
    if not isinstance(data, Mapping):
        return data

    raw_verbose = data.get("verbose")
    verbose = raw_verbose if isinstance(raw_verbose, bool) else True

    formatting = data.get("formatting")
    rest = {key: value for key, value in data.items() if key != "formatting"}
    cleaned = _clean(rest, fields, SETTING_CHECKS, prefix="", verbose=verbose)

    if formatting is None:
        return cleaned
    if cleaned.get("formatter", "diffable") != "diffable":
        warn(
            "When setting the formatter to anything other than 'diffable', "
            "all formatting options are ignored.",
            verbose=verbose,
        )
    elif isinstance(formatting, Mapping):
        cleaned["formatting"] = clean_formatting(formatting, formatting_fields, verbose=verbose)
    elif hasattr(formatting, "model_dump"):
        cleaned["formatting"] = formatting
    else:
        warn("The formatting setting must be a mapping of formatting options.", verbose=verbose)
    return cleaned
