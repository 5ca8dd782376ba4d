"""Theme definitions for layout previews."""

from figgrid.themes.dark import DARK_THEME
from figgrid.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
