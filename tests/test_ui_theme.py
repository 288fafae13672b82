from __future__ import annotations

import unittest

from tmenu.ui_theme import (
    DEFAULT_THEME,
    MONO_THEME,
    PLAIN_THEME,
    available_theme_names,
    resolve_theme,
)


class ResolveThemeTests(unittest.TestCase):
    def test_named_lookup_is_case_insensitive(self) -> None:
        self.assertIs(resolve_theme(" Mono "), MONO_THEME)
        self.assertIs(resolve_theme("default"), DEFAULT_THEME)

    def test_unknown_or_missing_name_uses_default(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("neon"), DEFAULT_THEME)

    def test_no_color_wins(self) -> None:
        self.assertIs(resolve_theme("mono", no_color=True), PLAIN_THEME)
        self.assertEqual(PLAIN_THEME.selected, "")

    def test_available_names(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "mono"))


if __name__ == "__main__":
    unittest.main()
