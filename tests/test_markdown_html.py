import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inkpad.core.markdown_html import markdown_to_html


def test_empty_input():
    assert markdown_to_html("") == ""
    assert markdown_to_html("  \n\n  ") == ""
    assert markdown_to_html(None) == ""


def test_heading_not_wrapped_in_paragraph():
    assert markdown_to_html("# Title") == "<h1>Title</h1>"


def test_heading_levels():
    assert markdown_to_html("###### six\n# one") == "<h6>six</h6>\n<h1>one</h1>"


def test_hash_without_space_is_text():
    assert markdown_to_html("#no space") == "<p>#no space</p>"


def test_bold_and_italic():
    out = markdown_to_html("**bold** and *italic*")
    assert out == "<p><strong>bold</strong> and <em>italic</em></p>"


def test_bold_italic_and_underscores():
    assert markdown_to_html("***both***") == "<p><strong><em>both</em></strong></p>"
    out = markdown_to_html("__strong__ and _em_")
    assert out == "<p><strong>strong</strong> and <em>em</em></p>"


def test_strikethrough():
    assert markdown_to_html("~~gone~~") == "<p><del>gone</del></p>"


def test_script_is_escaped():
    out = markdown_to_html("<script>alert(1)</script>")
    assert "<script" not in out
    assert "&lt;script&gt;" in out


def test_ampersand_escaped():
    assert markdown_to_html("a & b") == "<p>a &amp; b</p>"


def test_task_list():
    out = markdown_to_html("- [x] done\n- [ ] todo")
    assert out == (
        '<ul><li class="task-list-item"><input type="checkbox" checked disabled> done</li>\n'
        '<li class="task-list-item"><input type="checkbox" disabled> todo</li></ul>'
    )
    assert out.count("<ul>") == 1


def test_mixed_list_items_share_one_ul():
    out = markdown_to_html("- a\n* b\n1. c")
    assert out == "<ul><li>a</li>\n<li>b</li>\n<li>c</li></ul>"


def test_ordered_list_renders_as_ul():
    assert markdown_to_html("1. a\n2. b") == "<ul><li>a</li>\n<li>b</li></ul>"


def test_list_followed_by_paragraph():
    out = markdown_to_html("- a\n- b\n\nAfter")
    assert out == "<ul><li>a</li>\n<li>b</li></ul>\n<p>After</p>"


def test_fenced_code_with_language_is_verbatim():
    out = markdown_to_html("```python\nx = 1  # *not* _em_\n```")
    assert out == '<pre><code class="language-python">x = 1  # *not* _em_\n</code></pre>'


def test_fenced_code_keeps_blank_lines():
    out = markdown_to_html("```\na\n\nb\n```")
    assert "<p>" not in out
    assert "a\n\nb" in out
    assert out.startswith("<pre><code>")


def test_fenced_code_escapes_markup():
    out = markdown_to_html("```\n<div>\n```")
    assert "&lt;div&gt;" in out
    assert "<div>" not in out


def test_inline_code():
    assert markdown_to_html("Use `a*b*c` here") == "<p>Use <code>a*b*c</code> here</p>"
    assert markdown_to_html("`<b>`") == "<p><code>&lt;b&gt;</code></p>"


def test_link():
    out = markdown_to_html("[site](https://example.com)")
    assert out == '<p><a href="https://example.com">site</a></p>'


def test_image_is_not_a_link():
    out = markdown_to_html("![cat](cat.png) and [b](y)")
    assert out == '<p><img src="cat.png" alt="cat"> and <a href="y">b</a></p>'


def test_link_url_cannot_break_out_of_attribute():
    out = markdown_to_html('[x](a" onmouseover="b)')
    assert 'onmouseover="' not in out
    assert "&quot;" in out


def test_horizontal_rules():
    assert markdown_to_html("---") == "<hr>"
    assert markdown_to_html("***") == "<hr>"
    assert markdown_to_html("text\n\n-----\n\nmore") == "<p>text</p>\n<hr>\n<p>more</p>"


def test_blockquotes_are_not_merged():
    out = markdown_to_html("> one\n> two")
    assert out == "<blockquote>one</blockquote>\n<blockquote>two</blockquote>"


def test_line_breaks_inside_paragraph():
    out = markdown_to_html("line one\nline two\n\nnext")
    assert out == "<p>line one<br>line two</p>\n<p>next</p>"


def test_crlf_input():
    assert markdown_to_html("# T\r\n\r\npara") == "<h1>T</h1>\n<p>para</p>"


def test_never_raises_on_odd_input():
    for text in ["```unclosed", "**", "[", "](", "\x00", "`", "~~", "> ", "- ", "1."]:
        out = markdown_to_html(text)
        assert isinstance(out, str)
        assert "<p></p>" not in out


def test_unmatched_markers_stay_literal():
    assert markdown_to_html("**") == "<p>**</p>"
    assert markdown_to_html("```unclosed") == "<p>```unclosed</p>"


def test_link_target_is_not_touched_by_emphasis():
    out = markdown_to_html("[x](http://a_b_c.com) and ![i](p*q*r.png)")
    assert out == '<p><a href="http://a_b_c.com">x</a> and <img src="p*q*r.png" alt="i"></p>'


def test_link_text_still_gets_emphasis():
    assert markdown_to_html("[*x*](y)") == '<p><a href="y"><em>x</em></a></p>'
