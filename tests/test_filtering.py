"""Tests for case-insensitive substring filtering of the catalog."""

from __future__ import annotations

import unittest

from tmenu.catalog import AppEntry
from tmenu.filtering import filter_entries

FIREFOX = AppEntry(name="Firefox", description="Web Browser", command="firefox")
TERMINAL = AppEntry(name="Terminal", description="", command="xterm")
FILES = AppEntry(name="Files", description="File Manager", command="nautilus")
GIMP = AppEntry(name="GIMP", description="Image Editor", command="gimp")

CATALOG = [FIREFOX, TERMINAL, FILES, GIMP]


class FilterEntriesTests(unittest.TestCase):
    def test_empty_query_returns_full_catalog_in_order(self) -> None:
        self.assertEqual(filter_entries(CATALOG, ""), CATALOG)

    def test_empty_query_returns_a_copy(self) -> None:
        result = filter_entries(CATALOG, "")
        result.append(GIMP)
        self.assertEqual(len(CATALOG), 4)

    def test_match_is_case_insensitive_on_name(self) -> None:
        self.assertEqual(filter_entries([FIREFOX, TERMINAL], "fi"), [FIREFOX])
        self.assertEqual(filter_entries(CATALOG, "TERM"), [TERMINAL])

    def test_description_match_includes_entry(self) -> None:
        self.assertEqual(filter_entries(CATALOG, "editor"), [GIMP])
        self.assertEqual(filter_entries(CATALOG, "browser"), [FIREFOX])

    def test_description_matching_can_be_disabled(self) -> None:
        self.assertEqual(filter_entries(CATALOG, "browser", search_descriptions=False), [])
        self.assertEqual(filter_entries(CATALOG, "fi", search_descriptions=False), [FIREFOX, FILES])

    def test_result_is_order_preserving_subsequence(self) -> None:
        for query in ("e", "i", "r", "zz", "fil", " "):
            with self.subTest(query=query):
                result = filter_entries(CATALOG, query)
                positions = [CATALOG.index(entry) for entry in result]
                self.assertEqual(positions, sorted(positions))

    def test_no_match_yields_empty_view(self) -> None:
        self.assertEqual(filter_entries(CATALOG, "xyz"), [])

    def test_empty_catalog(self) -> None:
        self.assertEqual(filter_entries([], "a"), [])
        self.assertEqual(filter_entries([], ""), [])


if __name__ == "__main__":
    unittest.main()
