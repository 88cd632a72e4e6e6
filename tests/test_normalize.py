from snapmark.normalize import MINIFIED_COMMENT, escape_for, escape_html, minify_comment


def test_escape_html_encodes_reserved_characters():
    assert escape_html('<b title="x">1 & 2\xa0</b>') == "&lt;b title=&quot;x&quot;&gt;1 &amp; 2&nbsp;&lt;/b&gt;"


def test_escape_for_respects_flag():
    assert escape_for("a & b", True) == "a &amp; b"
    assert escape_for("a & b", False) == "a & b"


def test_blank_comments_are_minified():
    assert minify_comment("") == MINIFIED_COMMENT
    assert minify_comment("  \n  ") == "<!---->"


def test_comment_body_is_verbatim():
    assert minify_comment(" Single Line ") == "<!-- Single Line -->"
    assert minify_comment("\n  Multi\n  Line\n") == "<!--\n  Multi\n  Line\n-->"
