import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inkpad.core.outline import Heading, extract_outline


def test_headings_with_levels_and_lines():
    text = "# Title\nintro\n## Section\n\n### Sub"
    assert extract_outline(text) == [
        Heading(level=1, text="Title", line_number=1),
        Heading(level=2, text="Section", line_number=3),
        Heading(level=3, text="Sub", line_number=5),
    ]


def test_lenient_heading_forms():
    outline = extract_outline("   ##Indented  \n#\n####### seven")
    assert outline == [Heading(level=2, text="Indented", line_number=1)]


def test_empty_document():
    assert extract_outline("") == []
    assert extract_outline(None) == []
    assert extract_outline("no headings here") == []
