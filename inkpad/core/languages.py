from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType


class Language(enum.Enum):
    PLAIN_TEXT = "Plain Text"
    MARKDOWN = "Markdown"
    JSON = "JSON"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"
    HTML = "HTML"
    CSS = "CSS"
    SWIFT = "Swift"
    YAML = "YAML"
    SHELL = "Shell"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return _EXTENSIONS[self]


class TokenKind(enum.Enum):
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    FUNCTION = "function"
    VARIABLE = "variable"
    TYPE = "type"
    PROPERTY = "property"
    TAG = "tag"
    ATTRIBUTE = "attribute"
    PUNCTUATION = "punctuation"
    OPERATOR = "operator"
    HEADING = "heading"
    LINK = "link"
    EMPHASIS = "emphasis"
    CODE_BLOCK = "code_block"


@dataclass(frozen=True)
class LanguagePattern:
    regex: str
    kind: TokenKind
    multiline: bool = False
    ignore_case: bool = False


_EXTENSIONS: dict[Language, tuple[str, ...]] = {
    Language.PLAIN_TEXT: ("txt",),
    Language.MARKDOWN: ("md", "markdown"),
    Language.JSON: ("json",),
    Language.JAVASCRIPT: ("js", "jsx", "ts", "tsx"),
    Language.PYTHON: ("py", "pyw"),
    Language.HTML: ("html", "htm"),
    Language.CSS: ("css", "scss", "sass"),
    Language.SWIFT: ("swift",),
    Language.YAML: ("yaml", "yml"),
    Language.SHELL: ("sh", "bash", "zsh"),
}

_BY_EXTENSION = {ext: lang for lang, exts in _EXTENSIONS.items() for ext in exts}


def detect_language(extension: str | None) -> Language:
    """
    Map an extension or file name (``"md"``, ``".PY"``, ``"FILE.JSON"``) to a Language.

    Unknown or empty input maps to PLAIN_TEXT.
    """
    ext = (extension or "").strip().rsplit(".", 1)[-1].lower()
    return _BY_EXTENSION.get(ext, Language.PLAIN_TEXT)


def detect_language_for_path(path: str | Path | None) -> Language:
    if not path:
        return Language.PLAIN_TEXT
    return detect_language(Path(path).suffix)


# ───────────────────────── pattern table ─────────────────────────
#
# Each list is applied in order over the whole text; a later pattern
# recolours whatever an earlier one matched on the same characters.

_DQ_STRING = r'"[^"\\]*(?:\\.[^"\\]*)*"'
_SQ_STRING = r"'[^'\\]*(?:\\.[^'\\]*)*'"
_NUMBER = r"\b\d+\.?\d*\b"

P = LanguagePattern
K = TokenKind

_PATTERNS: dict[Language, tuple[LanguagePattern, ...]] = {
    Language.PLAIN_TEXT: (),
    Language.JSON: (
        P(_DQ_STRING + r"\s*:", K.PROPERTY),
        P(_DQ_STRING, K.STRING),
        P(r"-?\d+\.?\d*(?:[eE][+-]?\d+)?", K.NUMBER),
        P(r"\b(true|false|null)\b", K.KEYWORD),
        P(r"[{}\[\]:,]", K.PUNCTUATION),
    ),
    Language.JAVASCRIPT: (
        P(r"//.*$", K.COMMENT, multiline=True),
        P(r"/\*[\s\S]*?\*/", K.COMMENT),
        P(_DQ_STRING, K.STRING),
        P(_SQ_STRING, K.STRING),
        P(r"`[^`]*`", K.STRING),
        P(
            r"\b(const|let|var|function|return|if|else|for|while|do|switch|case|break"
            r"|continue|new|this|class|extends|import|export|from|default|async|await"
            r"|try|catch|finally|throw|typeof|instanceof)\b",
            K.KEYWORD,
        ),
        P(r"\b(true|false|null|undefined|NaN|Infinity)\b", K.KEYWORD),
        P(_NUMBER, K.NUMBER),
        P(r"\b([A-Z][a-zA-Z0-9]*)\b", K.TYPE),
        P(r"\b([a-z_][a-zA-Z0-9_]*)\s*\(", K.FUNCTION),
        P(r"[{}\[\]();,.]", K.PUNCTUATION),
        P(r"[+\-*/%=<>!&|^~?:]", K.OPERATOR),
    ),
    Language.PYTHON: (
        P(r"#.*$", K.COMMENT, multiline=True),
        P(r'"""[\s\S]*?"""', K.STRING),
        P(r"'''[\s\S]*?'''", K.STRING),
        P(_DQ_STRING, K.STRING),
        P(_SQ_STRING, K.STRING),
        P(
            r"\b(def|class|import|from|as|return|if|elif|else|for|while|break|continue"
            r"|pass|raise|try|except|finally|with|lambda|yield|global|nonlocal|assert"
            r"|del|in|is|and|or|not)\b",
            K.KEYWORD,
        ),
        P(r"\b(True|False|None)\b", K.KEYWORD),
        P(_NUMBER, K.NUMBER),
        P(r"\b([A-Z][a-zA-Z0-9_]*)\b", K.TYPE),
        P(r"\bdef\s+([a-z_][a-zA-Z0-9_]*)", K.FUNCTION),
        P(r"[{}\[\]():,.]", K.PUNCTUATION),
        P(r"[+\-*/%=<>!@&|^~]", K.OPERATOR),
    ),
    Language.HTML: (
        P(r"<!--[\s\S]*?-->", K.COMMENT),
        P(r"</?([a-zA-Z][a-zA-Z0-9]*)", K.TAG),
        P(r"\b([a-zA-Z-]+)=", K.ATTRIBUTE),
        P(r'"[^"]*"', K.STRING),
        P(r"'[^']*'", K.STRING),
        P(r"[<>=/]", K.PUNCTUATION),
    ),
    Language.CSS: (
        P(r"/\*[\s\S]*?\*/", K.COMMENT),
        P(r"([.#][a-zA-Z][a-zA-Z0-9_-]*)", K.TYPE),
        P(r"@[a-zA-Z]+", K.KEYWORD),
        P(r"([a-zA-Z-]+)\s*:", K.PROPERTY),
        P(r'"[^"]*"', K.STRING),
        P(r"'[^']*'", K.STRING),
        P(r"#[0-9a-fA-F]{3,8}", K.NUMBER),
        P(r"\b\d+(\.\d+)?(px|em|rem|%|vh|vw|pt|cm|mm)?\b", K.NUMBER),
        P(r"[{}();:,]", K.PUNCTUATION),
    ),
    Language.MARKDOWN: (
        P(r"^#{1,6}\s.*$", K.HEADING, multiline=True),
        P(r"\*\*[^*]+\*\*", K.EMPHASIS),
        P(r"__[^_]+__", K.EMPHASIS),
        P(r"\*[^*]+\*", K.EMPHASIS),
        P(r"_[^_]+_", K.EMPHASIS),
        P(r"`[^`]+`", K.CODE_BLOCK),
        P(r"```[\s\S]*?```", K.CODE_BLOCK),
        P(r"\[([^\]]+)\]\(([^)]+)\)", K.LINK),
        P(r"^>\s.*$", K.COMMENT, multiline=True),
        P(r"^[-*+]\s", K.PUNCTUATION, multiline=True),
        P(r"^\d+\.\s", K.PUNCTUATION, multiline=True),
    ),
    Language.SWIFT: (
        P(r"//.*$", K.COMMENT, multiline=True),
        P(r"/\*[\s\S]*?\*/", K.COMMENT),
        P(_DQ_STRING, K.STRING),
        P(
            r"\b(import|class|struct|enum|protocol|extension|func|var|let|if|else|guard"
            r"|switch|case|default|for|while|repeat|break|continue|return|throw|throws"
            r"|try|catch|as|is|in|where|self|Self|super|init|deinit|get|set|willSet"
            r"|didSet|lazy|static|final|override|mutating|nonmutating|convenience"
            r"|required|open|public|internal|fileprivate|private|weak|unowned|inout"
            r"|some|any|async|await|actor)\b",
            K.KEYWORD,
        ),
        P(r"\b(true|false|nil)\b", K.KEYWORD),
        P(_NUMBER, K.NUMBER),
        P(r"\b([A-Z][a-zA-Z0-9]*)\b", K.TYPE),
        P(r"\bfunc\s+([a-z_][a-zA-Z0-9_]*)", K.FUNCTION),
        P(r"[{}\[\]():,.<>]", K.PUNCTUATION),
        P(r"[+\-*/%=<>!&|^~?:]", K.OPERATOR),
        P(r"@[a-zA-Z]+", K.ATTRIBUTE),
    ),
    Language.YAML: (
        P(r"#.*$", K.COMMENT, multiline=True),
        P(r"^[a-zA-Z_][a-zA-Z0-9_]*:", K.PROPERTY, multiline=True),
        P(r'"[^"]*"', K.STRING),
        P(r"'[^']*'", K.STRING),
        P(r"\b(true|false|null|yes|no|on|off)\b", K.KEYWORD),
        P(_NUMBER, K.NUMBER),
        P(r"[:\-|>]", K.PUNCTUATION),
    ),
    Language.SHELL: (
        P(r"#.*$", K.COMMENT, multiline=True),
        P(_DQ_STRING, K.STRING),
        P(r"'[^']*'", K.STRING),
        P(
            r"\b(if|then|else|elif|fi|for|while|do|done|case|esac|function|return|exit"
            r"|break|continue|export|source|alias|unalias|cd|pwd|echo|printf|read|local"
            r"|declare)\b",
            K.KEYWORD,
        ),
        P(r"\$[a-zA-Z_][a-zA-Z0-9_]*", K.VARIABLE),
        P(r"\$\{[^}]+\}", K.VARIABLE),
        P(r"\b\d+\b", K.NUMBER),
        P(r"[|&;()<>]", K.PUNCTUATION),
    ),
}

del P, K

PATTERN_TABLE = MappingProxyType(_PATTERNS)


def patterns_for(language: Language) -> tuple[LanguagePattern, ...]:
    return PATTERN_TABLE.get(language, ())
