from __future__ import annotations

import unittest

from pykilo.rows import Highlight
from pykilo.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("nope"), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)

    def test_default_theme_uses_classic_colors(self) -> None:
        self.assertEqual(DEFAULT_THEME.color_for(Highlight.NUMBER), "\033[31m")
        self.assertEqual(DEFAULT_THEME.color_for(Highlight.MATCH), "\033[34m")
        self.assertEqual(DEFAULT_THEME.color_for(Highlight.NORMAL), "")


if __name__ == "__main__":
    unittest.main()
