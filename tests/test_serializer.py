from dataclasses import dataclass, field
from typing import Any, Dict, List

import pytest

from snapmark import serializer
from snapmark.dom_model import MarkupDepthError
from snapmark.settings import configure


@dataclass
class Live:
    props: Dict[str, Any] = field(default_factory=dict)
    value: Any = None
    checked: Any = False


@dataclass
class Wrapper:
    markup: str
    live: List[Live] = field(default_factory=list)

    def html(self) -> str:
        return self.markup

    def live_elements(self) -> List[Live]:
        return self.live


class HtmlOnly:
    def html(self) -> str:
        return '<p title="t">Hi</p>'


def test_recognizes_markup_and_wrappers():
    assert serializer.test("<div></div>")
    assert serializer.test(HtmlOnly())
    assert serializer.test(Wrapper("<p></p>"))
    assert not serializer.test("div")
    assert not serializer.test("")
    assert not serializer.test(None)
    assert not serializer.test({"html": "<p></p>"})


def test_print_formats_markup():
    assert serializer.print('<div data-test="token">Test</div>') == "<div>\n  Test\n</div>"
    assert serializer.serialize is serializer.print


def test_print_reads_wrapper_markup():
    assert serializer.print(HtmlOnly()) == '<p title="t">\n  Hi\n</p>'


def test_print_adds_live_input_values():
    wrapper = Wrapper('<input type="text">', [Live(value="Hi")])
    assert serializer.print(wrapper) == "<input\n  type=\"text\"\n  value=\"'Hi'\"\n/>"


def test_sorted_attribute_names():
    formatted = serializer.print('<p z="1" a="2" m="3"></p>')
    assert formatted == '<p\n  a="2"\n  m="3"\n  z="1"\n></p>'


def test_formatter_none_returns_transformed_markup():
    configure(formatter="none")
    assert serializer.print('<div data-test="token" id="b" class="y x">Test</div>') == (
        '<div class="x y" id="b">Test</div>'
    )


def test_formatter_none_fails_fast_on_deep_nesting():
    configure(formatter="none")
    with pytest.raises(MarkupDepthError):
        serializer.print("<div>" * 1200 + "x" + "</div>" * 1200)


def test_custom_formatter():
    configure(formatter=lambda html: html.upper())
    assert serializer.print("<div>Test</div>") == "<DIV>TEST</DIV>"


def test_custom_formatter_must_return_string(capsys):
    configure(formatter=lambda html: 5)
    markup = '<div data-test="token">Test</div>'
    assert serializer.print(markup) == markup
    assert "Your custom markup formatter must return a string." in capsys.readouterr().err


def test_post_processor():
    configure(postProcessor=lambda html: html.replace("Test", "Done"))
    assert serializer.print("<div>Test</div>") == "<div>\n  Done\n</div>"


def test_post_processor_must_return_string(capsys):
    configure(postProcessor=lambda html: None)
    assert serializer.print("<div>Test</div>") == "<div>Test</div>"
    assert "post processor must return a string" in capsys.readouterr().err


def test_formatting_settings_are_applied():
    configure(formatting={"voidElements": "html", "attributesPerLine": 3})
    assert serializer.print('<input type="range" max="50">') == '<input max="50" type="range">'


def test_markup_formatter_skips_non_markup():
    assert serializer.markup_formatter(5) == 5
    assert serializer.markup_formatter("plain text") == "plain text"
    assert serializer.markup_formatter("<b>x</b>") == "<b>\n  x\n</b>"


def test_debug_logging_names_each_pass(capsys):
    configure(debug=True)
    serializer.print('<p class="b a">x</p>')
    err = capsys.readouterr().err
    for function in ("serializer.print", "format_markup", "remove_test_tokens", "sort_attributes", "sort_classes"):
        assert f'"function": "{function}"' in err


def test_debug_logging_is_off_by_default(capsys):
    serializer.test("<p></p>")
    serializer.print("<p></p>")
    assert capsys.readouterr().err == ""
