"""Capabilities a rendered component handle may expose.

The serializer only looks at capabilities, never at concrete classes: a value
with a callable ``html()`` is a component wrapper, and one that also offers
``live_elements()`` can feed runtime values into the snapshot.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


class LiveElement(Protocol):
    """A rendered element as it exists at runtime.

    ``props`` maps attribute names to the values bound to them (possibly
    non-strings). ``value`` and ``checked`` are only read for form controls.
    """

    props: Mapping[str, Any]
    value: Any
    checked: Any


@runtime_checkable
class HasHtml(Protocol):
    def html(self) -> str:
        ...


@runtime_checkable
class HasLiveValues(Protocol):
    def live_elements(self) -> Sequence[LiveElement]:
        """Every rendered element in document order, matching the static markup."""
        ...


def is_html_string(received: Any) -> bool:
    return isinstance(received, str) and received.startswith("<")


def _has_method(received: Any, name: str) -> bool:
    return not isinstance(received, type) and callable(getattr(received, name, None))


def is_component_wrapper(received: Any) -> bool:
    return _has_method(received, "html") or _has_method(received, "live_elements")


def live_values_of(received: Any) -> HasLiveValues | None:
    return received if _has_method(received, "live_elements") else None


def markup_of(received: Any) -> str:
    """Static markup for a markup string or a component wrapper."""
    if _has_method(received, "html"):
        return received.html() or ""
    if isinstance(received, str):
        return received
    return ""
