"""Tag tables shared by the parser, the transforms and the formatter."""

from __future__ import annotations

SVG_FILTER_TAGS = (
    "feBlend",
    "feColorMatrix",
    "feComponentTransfer",
    "feComposite",
    "feConvolveMatrix",
    "feDiffuseLighting",
    "feDisplacementMap",
    "feDistantLight",
    "feDropShadow",
    "feFlood",
    "feFuncA",
    "feFuncB",
    "feFuncG",
    "feFuncR",
    "feGaussianBlur",
    "feImage",
    "feMerge",
    "feMergeNode",
    "feMorphology",
    "feOffset",
    "fePointLight",
    "feSpecularLighting",
    "feSpotLight",
    "feTile",
    "feTurbulence",
)

# html.parser lower-cases every tag name.
LOWER_TO_CAMEL_SVG_TAGS = {"clippath": "clipPath"}
LOWER_TO_CAMEL_SVG_TAGS.update({name.lower(): name for name in SVG_FILTER_TAGS})

SELF_CLOSING_SVG_ELEMENTS = frozenset(
    {
        "circle",
        "ellipse",
        *SVG_FILTER_TAGS,
        "line",
        "path",
        "polygon",
        "polyline",
        "rect",
        "stop",
        "use",
    }
)

# https://developer.mozilla.org/en-US/docs/Glossary/Void_element
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

ESCAPABLE_RAW_TEXT_ELEMENTS = frozenset({"textarea", "title"})
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

FORM_CONTROL_TAGS = ("input", "textarea", "select")

# Setting name -> attribute removed when the setting is enabled.
TEST_TOKEN_ATTRIBUTES = {
    "remove_data_test": "data-test",
    "remove_data_testid": "data-testid",
    "remove_data_test_id": "data-test-id",
    "remove_data_qa": "data-qa",
    "remove_data_cy": "data-cy",
    "remove_data_pw": "data-pw",
}

SERVER_RENDERED_ATTRIBUTE = "data-server-rendered"

DEFAULT_WHITESPACE_PRESERVED_TAGS = ("a", "pre")
VOID_ELEMENT_STYLES = ("html", "xhtml", "xml")
FORMATTER_NAMES = ("none", "diffable")

MAX_DEPTH = 200
INDENT = "  "
