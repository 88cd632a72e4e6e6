from snapmark.dom_model import tree_to_html
from snapmark.models import Settings
from snapmark.parser import parse_markup
from snapmark.token_removal import remove_test_tokens


def _remove(markup: str, **settings) -> str:
    tree = parse_markup(markup)
    remove_test_tokens(tree, Settings(**settings))
    return tree_to_html(tree)


def test_data_test_is_removed_by_default():
    assert _remove('<div data-test="token">Test</div>') == "<div>Test</div>"
    assert _remove('<p data-testid="a" data-test-id="b">x</p>') == "<p>x</p>"


def test_other_data_tokens_are_opt_in():
    markup = '<p data-qa="a" data-cy="b" data-pw="c"></p>'
    assert _remove(markup) == markup
    assert _remove(markup, remove_data_qa=True, remove_data_cy=True, remove_data_pw=True) == "<p></p>"


def test_disabled_flag_keeps_attribute():
    assert _remove('<div data-test="token"></div>', remove_data_test=False) == '<div data-test="token"></div>'


def test_ids_starting_with_test_are_removed():
    markup = '<p id="TestFoo"></p><p id="foo"></p>'
    assert _remove(markup) == markup
    assert _remove(markup, remove_id_test=True) == '<p></p><p id="foo"></p>'


def test_test_classes_are_removed():
    markup = '<p class="TEST-a b"></p><p class="test"></p><p class=""></p>'
    assert _remove(markup, remove_class_test=True) == '<p class="b"></p><p></p><p class=""></p>'


def test_server_rendered_marker_is_removed():
    assert _remove('<div data-server-rendered="true"></div>') == "<div></div>"
    markup = '<div data-server-rendered="true"></div>'
    assert _remove(markup, remove_server_rendered=False) == markup


def test_empty_tree():
    assert _remove("") == ""
