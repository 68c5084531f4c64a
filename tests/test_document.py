import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathlib import Path

from inkpad.core.document import Document, FileType
from inkpad.core.languages import Language


def test_file_type_detection():
    assert FileType.detect("a/b.md") is FileType.MARKDOWN
    assert FileType.detect("notes.Markdown") is FileType.MARKDOWN
    assert FileType.detect("notes.txt") is FileType.PLAIN_TEXT
    assert FileType.detect(None) is FileType.PLAIN_TEXT


def test_from_path():
    doc = Document.from_path(Path("/tmp/Readme.md"), "# hi")
    assert doc.title == "Readme"
    assert doc.is_markdown
    assert doc.language is Language.MARKDOWN
    assert not doc.is_modified


def test_language_follows_path_extension():
    doc = Document.from_path("script.py", "print(1)")
    assert doc.file_type is FileType.PLAIN_TEXT
    assert doc.language is Language.PYTHON


def test_language_without_path():
    assert Document().language is Language.PLAIN_TEXT
    assert Document(file_type=FileType.MARKDOWN).language is Language.MARKDOWN


def test_update_content_marks_modified():
    doc = Document(title="Notes")
    before = doc.modified_at
    doc.update_content("")
    assert not doc.is_modified
    doc.update_content("changed")
    assert doc.is_modified
    assert doc.display_title == "• Notes"
    assert doc.modified_at >= before


def test_identity_equality():
    a = Document(title="same")
    b = Document(title="same")
    assert a != b
    assert a == a
    assert len({a, b, a}) == 2
