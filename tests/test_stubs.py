import pytest

from snapmark.models import StubSpec
from snapmark.stubs import resolve_stub_tag_name, stub_slug


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        (".artichoke", "artichoke-stub"),
        ("#A li:nth-of-type(odd)", "a_li-nth-of-type-odd-stub"),
        ("my-stub", "my-stub"),
        ("Fancy.Button > svg", "fancy-button_svg-stub"),
        ("!!!", "stub"),
    ],
)
def test_stub_slug(selector: str, expected: str):
    assert stub_slug(selector) == expected


def test_stub_slug_is_deterministic():
    assert stub_slug("div > .card") == stub_slug("div > .card")


def test_explicit_tag_name_wins():
    spec = StubSpec(tag_name="custom-thing")
    assert resolve_stub_tag_name(".artichoke", spec) == "custom-thing"


def test_short_form_string_is_the_tag_name():
    assert resolve_stub_tag_name(".artichoke", "veggie") == "veggie"


def test_missing_tag_name_falls_back_to_slug():
    assert resolve_stub_tag_name(".artichoke", StubSpec(remove_inner_html=True)) == "artichoke-stub"
    assert resolve_stub_tag_name(".artichoke") == "artichoke-stub"
