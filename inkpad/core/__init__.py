from .document import Document, FileType
from .highlighter import StyledSpan, StyledText, highlight, styled_text_to_html
from .languages import (
    Language,
    LanguagePattern,
    TokenKind,
    detect_language,
    detect_language_for_path,
    patterns_for,
)
from .markdown_html import markdown_to_html
from .outline import Heading, extract_outline
from .stats import TextStatistics
from .theme import DARK, LIGHT, Theme, theme_by_name

__all__ = ["Document",
           "FileType",
           "StyledSpan",
           "StyledText",
           "highlight",
           "styled_text_to_html",
           "Language",
           "LanguagePattern",
           "TokenKind",
           "detect_language",
           "detect_language_for_path",
           "patterns_for",
           "markdown_to_html",
           "Heading",
           "extract_outline",
           "TextStatistics",
           "DARK",
           "LIGHT",
           "Theme",
           "theme_by_name",
           ]
