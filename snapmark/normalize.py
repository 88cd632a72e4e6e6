"""Comment minification and the entity escaping policy."""

from __future__ import annotations

MINIFIED_COMMENT = "<!---->"

_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("\xa0", "&nbsp;"),
)


def escape_html(value: str) -> str:
    """Encode reserved characters as named entities.

    >>> escape_html('<b title="x">1 & 2</b>')
    '&lt;b title=&quot;x&quot;&gt;1 &amp; 2&lt;/b&gt;'
    """
    for char, entity in _ENTITIES:
        value = value.replace(char, entity)
    return value


def escape_for(value: str, enabled: bool) -> str:
    return escape_html(value) if enabled else value


def minify_comment(body: str) -> str:
    """Render a comment, collapsing empty or all-whitespace bodies to ``<!---->``."""
    if not body.strip():
        return MINIFIED_COMMENT
    return f"<!--{body}-->"
