from pathlib import Path

from snapmark.dom_model import NodeKind, node_kind, tree_to_html
from snapmark.parser import parse_markup
from snapmark.snapshots import compare_snapshot, write_snapshot
from snapmark.wrappers import is_component_wrapper, is_html_string, markup_of


def test_node_kinds():
    tree = parse_markup("<!DOCTYPE html><!-- c --><p>text</p>")
    assert node_kind(tree) is NodeKind.FRAGMENT
    assert [node_kind(node) for node in tree.contents] == [
        NodeKind.DECLARATION,
        NodeKind.COMMENT,
        NodeKind.ELEMENT,
    ]
    assert node_kind(tree.p.contents[0]) is NodeKind.TEXT


def test_compact_html():
    markup = '<div title="a &amp; b"><input disabled><br><script>a < b</script>1 &lt; 2<!-- c --></div>'
    assert tree_to_html(parse_markup(markup)) == (
        '<div title="a &amp; b"><input disabled=""><br><script>a < b</script>1 &lt; 2<!-- c --></div>'
    )


def test_compact_html_escapes_like_the_formatter():
    markup = '<p title="1 &gt; 0">a&nbsp;&quot;b&quot;</p>'
    assert tree_to_html(parse_markup(markup)) == markup


def test_markup_capabilities():
    class Rendered:
        def html(self):
            return "<p></p>"

    assert is_html_string("<p>")
    assert not is_html_string(" <p>")
    assert is_component_wrapper(Rendered())
    assert not is_component_wrapper(Rendered)
    assert markup_of(Rendered()) == "<p></p>"
    assert markup_of("<b></b>") == "<b></b>"
    assert markup_of(None) == ""


def test_compare_snapshot(tmp_path: Path):
    snapshot = tmp_path / "a.snap"
    ok, diff = compare_snapshot(snapshot, "<p></p>")
    assert not ok
    assert "+<p></p>" in diff

    write_snapshot(snapshot, "<p></p>")
    assert compare_snapshot(snapshot, "<p></p>") == (True, "")
