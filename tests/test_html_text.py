import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inkpad.core.html_text import (
    convert_line_breaks,
    escape_html,
    wrap_list_items,
    wrap_paragraphs,
)


def test_escape_ampersand_first():
    assert escape_html("a & <b>") == "a &amp; &lt;b&gt;"
    assert escape_html("&lt;") == "&amp;lt;"
    assert escape_html('"q"') == '"q"'
    assert escape_html('"q"', quote=True) == "&quot;q&quot;"


def test_wrap_list_items_groups_consecutive_lines():
    html = "<li>a</li>\n<li>b</li>\n\n<li>c</li>"
    assert wrap_list_items(html) == "<ul><li>a</li>\n<li>b</li></ul>\n\n<ul><li>c</li></ul>"


def test_wrap_list_items_accepts_attributes():
    html = '<li class="task-list-item">x</li>'
    assert wrap_list_items(html) == '<ul><li class="task-list-item">x</li></ul>'


def test_line_breaks():
    assert convert_line_breaks("a\nb") == "a<br>b"


def test_paragraphs_skip_blocks_and_blank_chunks():
    html = "<h1>T</h1>\n\n  \n\ntext\nmore\n\n<hr>"
    assert wrap_paragraphs(html) == "<h1>T</h1>\n<p>text<br>more</p>\n<hr>"


def test_escape_quote_mode_covers_apostrophes():
    assert escape_html("it's", quote=True) == "it&#x27;s"
    assert escape_html("it's") == "it's"
