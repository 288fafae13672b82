"""Regression tests for ANSI width and clipping primitives.

These cases protect box-border alignment from escape sequences and wide
characters in entry names.
"""

import unittest

from tmenu import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escape_sequences_have_no_width(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[1;34mabc\033[0m"), 3)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(ansi_mod.display_width("漢字"), 4)
        self.assertEqual(ansi_mod.display_width("é"), 1)


class ClipAndPadTests(unittest.TestCase):
    def test_clip_keeps_escapes_and_stops_at_width(self) -> None:
        clipped = ansi_mod.clip_ansi_line("\033[1mabcdef\033[0m", 3)
        self.assertEqual(clipped, "\033[1mabc")

    def test_clip_does_not_split_wide_character(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a漢b", 2), "a")

    def test_clip_non_positive_width(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")

    def test_pad_fills_to_width(self) -> None:
        self.assertEqual(ansi_mod.pad_ansi_line("ab", 5), "ab   ")
        self.assertEqual(ansi_mod.display_width(ansi_mod.pad_ansi_line("\033[7mab\033[0m", 5)), 5)
        self.assertEqual(ansi_mod.pad_ansi_line("abcdef", 3), "abc")


if __name__ == "__main__":
    unittest.main()
