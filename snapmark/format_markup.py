"""Pick the formatter for one invocation and run the post-processor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from .dom_model import tree_to_html
from .formatter import render
from .io_utils import debug_log, warn
from .models import Settings
from .parser import parse_markup
from .transforms import apply_transforms


class FormatterKind(str, Enum):
    NONE = "none"
    DIFFABLE = "diffable"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FormatterChoice:
    kind: FormatterKind
    callback: Optional[Callable[[str], Any]] = None

    @classmethod
    def from_setting(cls, formatter: Union[str, Callable[[str], Any]]) -> "FormatterChoice":
        if callable(formatter):
            return cls(FormatterKind.CUSTOM, formatter)
        return cls(FormatterKind(formatter))


def _run_callback(
    callback: Callable[[str], Any], markup: str, *, name: str, settings: Settings
) -> Optional[str]:
    result = callback(markup)
    if not isinstance(result, str):
        warn(f"Your custom markup {name} must return a string.", verbose=settings.verbose)
        return None
    return result


def format_markup(markup: str | None, settings: Settings, wrapper: Any = None) -> str:
    """Transform and format ``markup``.

    A custom formatter or post-processor that does not return a string is
    reported, and the input markup is returned untouched.
    """
    markup = markup or ""
    choice = FormatterChoice.from_setting(settings.formatter)
    debug_log("format_markup", enabled=settings.debug, data={"formatter": choice.kind.value})

    tree = apply_transforms(parse_markup(markup), settings, wrapper)
    if choice.kind is FormatterKind.DIFFABLE:
        formatted = render(tree, settings.formatting)
    else:
        formatted = tree_to_html(tree)
        if choice.kind is FormatterKind.CUSTOM:
            formatted = _run_callback(choice.callback, formatted, name="formatter", settings=settings)
            if formatted is None:
                return markup

    if settings.post_processor is not None:
        debug_log("post_processor", enabled=settings.debug)
        formatted = _run_callback(settings.post_processor, formatted, name="post processor", settings=settings)
        if formatted is None:
            return markup
    return formatted
