import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from inkpad.core.languages import TokenKind
from inkpad.core.theme import DARK, LIGHT, normalize_theme, theme_by_name


def test_every_kind_has_a_colour():
    for theme in (LIGHT, DARK):
        for kind in TokenKind:
            color = theme.color_for(kind)
            assert color.startswith("#") and len(color) == 7, (theme.name, kind)


def test_light_and_dark_differ():
    assert LIGHT.background != DARK.background
    assert LIGHT.foreground != DARK.foreground
    assert DARK.is_dark and not LIGHT.is_dark


def test_theme_names_are_normalised():
    assert normalize_theme(" Dark ") == "dark"
    assert normalize_theme("solarized") == "light"
    assert normalize_theme(None) == "light"
    assert theme_by_name("DARK") is DARK
    assert theme_by_name("") is LIGHT
