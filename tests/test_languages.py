import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import re

import pytest

from inkpad.core.languages import (
    PATTERN_TABLE,
    Language,
    detect_language,
    detect_language_for_path,
    patterns_for,
)


def test_detect_by_extension():
    assert detect_language("md") is Language.MARKDOWN
    assert detect_language(".PY") is Language.PYTHON
    assert detect_language("yml") is Language.YAML


def test_detect_by_file_name_is_case_insensitive():
    assert detect_language("file.md") is Language.MARKDOWN
    assert detect_language("FILE.JSON") is Language.JSON


def test_unknown_extension_is_plain_text():
    assert detect_language("docx") is Language.PLAIN_TEXT
    assert detect_language("") is Language.PLAIN_TEXT
    assert detect_language(None) is Language.PLAIN_TEXT


def test_detect_for_path():
    assert detect_language_for_path("notes/Readme.MD") is Language.MARKDOWN
    assert detect_language_for_path("scripts/build") is Language.PLAIN_TEXT
    assert detect_language_for_path(None) is Language.PLAIN_TEXT


def test_every_extension_maps_back_to_its_language():
    for language in Language:
        for ext in language.file_extensions:
            assert detect_language(ext) is language


def test_plain_text_has_no_patterns():
    assert patterns_for(Language.PLAIN_TEXT) == ()


def test_all_other_languages_have_patterns():
    for language in Language:
        if language is not Language.PLAIN_TEXT:
            assert patterns_for(language), language


def test_table_regexes_compile():
    for language, patterns in PATTERN_TABLE.items():
        for pattern in patterns:
            re.compile(pattern.regex)


def test_comments_come_before_keywords():
    kinds = [p.kind.value for p in patterns_for(Language.PYTHON)]
    assert kinds.index("comment") < kinds.index("keyword")
    assert kinds.index("string") < kinds.index("keyword")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PATTERN_TABLE[Language.JSON] = ()
