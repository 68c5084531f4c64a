from __future__ import annotations

from dataclasses import dataclass

from inkpad.settings import EDITOR_FONT_FAMILY, EDITOR_FONT_SIZE

from .languages import TokenKind


@dataclass(frozen=True)
class Theme:
    """Token colours (``#rrggbb``) plus the base style of the editor text."""

    name: str
    keyword: str
    string: str
    number: str
    comment: str
    function: str
    variable: str
    type: str
    property: str
    tag: str
    attribute: str
    punctuation: str
    operator: str
    heading: str
    link: str
    emphasis: str
    code_block: str
    background: str
    foreground: str
    font_family: str = EDITOR_FONT_FAMILY
    font_size: int = EDITOR_FONT_SIZE

    @property
    def is_dark(self) -> bool:
        return self.name == "dark"

    def color_for(self, kind: TokenKind) -> str:
        return getattr(self, kind.value)


LIGHT = Theme(
    name="light",
    keyword="#9c1fb3",
    string="#c41a17",
    number="#1c6eb0",
    comment="#6b7882",
    function="#26878f",
    variable="#333333",
    type="#1c6eb0",
    property="#26878f",
    tag="#218540",
    attribute="#9c1fb3",
    punctuation="#4d4d4d",
    operator="#9c1fb3",
    heading="#1c6eb0",
    link="#1c6eb0",
    emphasis="#333333",
    code_block="#c41a17",
    background="#ffffff",
    foreground="#333333",
)

DARK = Theme(
    name="dark",
    keyword="#c78fed",
    string="#e6a178",
    number="#b5d6a8",
    comment="#808c99",
    function="#82c7e0",
    variable="#e0e0e0",
    type="#82c7e0",
    property="#82c7e0",
    tag="#f0ad9e",
    attribute="#c78fed",
    punctuation="#b3b3b3",
    operator="#e6a178",
    heading="#82c7e0",
    link="#82c7e0",
    emphasis="#e0e0e0",
    code_block="#b5d6a8",
    background="#1f1f24",
    foreground="#e0e0e0",
)


def normalize_theme(name: str | None) -> str:
    name = (name or "").strip().lower()
    return name if name in ("dark", "light") else "light"


def theme_by_name(name: str | None) -> Theme:
    return DARK if normalize_theme(name) == "dark" else LIGHT
