"""Snapshot serializer entry points: ``test`` and ``print``.

``test`` decides whether a value is handled here; ``print`` turns it into
the canonical snapshot text using the process-wide settings.
"""

from __future__ import annotations

from typing import Any

from .format_markup import format_markup
from .io_utils import debug_log
from .settings import current_settings, get_global_settings
from .wrappers import is_component_wrapper, is_html_string, markup_of


def test(received: Any) -> bool:
    """True for a markup string (first character ``<``) or a component wrapper."""
    is_html = is_html_string(received)
    is_wrapper = is_component_wrapper(received)
    if get_global_settings().get("debug") is True:
        debug_log(
            "serializer.test",
            enabled=True,
            details="Only strings starting with '<' and component wrappers are serialized.",
            data={"is_html": is_html, "is_wrapper": is_wrapper},
        )
    return is_html or is_wrapper


def serialize(received: Any) -> str:
    """Format a markup string or a component wrapper for a snapshot."""
    settings = current_settings()
    debug_log("serializer.print", enabled=settings.debug, data={"received": repr(received)})
    wrapper = received if is_component_wrapper(received) else None
    return format_markup(markup_of(received), settings, wrapper)


print = serialize  # noqa: A001


def markup_formatter(html: Any) -> Any:
    """Transform and format a markup string; anything else is returned as-is."""
    settings = current_settings()
    debug_log("serializer.markup_formatter", enabled=settings.debug, data={"html": repr(html)})
    if not is_html_string(html):
        return html
    return format_markup(html, settings)
