"""Strip attributes that exist only to help tests find elements."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from .constants import SERVER_RENDERED_ATTRIBUTE, TEST_TOKEN_ATTRIBUTES
from .io_utils import debug_log
from .models import Settings

_TEST_PREFIX = "test"


def _is_test_token(value: str) -> bool:
    return value.lower().startswith(_TEST_PREFIX)


def _remove_test_classes(tag: Tag) -> None:
    classes = tag.get("class")
    if classes is None:
        return
    kept = [name for name in classes.split() if not _is_test_token(name)]
    if len(kept) == len(classes.split()):
        return
    # An already-empty class attribute stays; only one emptied here goes.
    if kept:
        tag["class"] = " ".join(kept)
    else:
        del tag["class"]


def remove_test_tokens(tree: BeautifulSoup, settings: Settings) -> None:
    """Remove ``data-test``-style attributes, ``id="test..."`` and ``test*`` classes."""
    attributes = [
        attribute for flag, attribute in TEST_TOKEN_ATTRIBUTES.items() if getattr(settings, flag)
    ]
    if settings.remove_server_rendered:
        attributes.append(SERVER_RENDERED_ATTRIBUTE)
    debug_log("remove_test_tokens", enabled=settings.debug, data={"attributes": attributes})

    for tag in tree.find_all(True):
        for attribute in attributes:
            if attribute in tag.attrs:
                del tag[attribute]
        if settings.remove_id_test and _is_test_token(tag.get("id", "")):
            del tag["id"]
        if settings.remove_class_test:
            _remove_test_classes(tag)
