"""Substring filtering of the launch catalog."""

from __future__ import annotations

from collections.abc import Sequence

from .catalog import AppEntry


def entry_matches(entry: AppEntry, folded_query: str, search_descriptions: bool = True) -> bool:
    """Return whether ``entry`` contains an already casefolded query."""
    if folded_query in entry.name.casefold():
        return True
    return bool(
        search_descriptions
        and entry.description
        and folded_query in entry.description.casefold()
    )


def filter_entries(
    catalog: Sequence[AppEntry],
    query: str,
    search_descriptions: bool = True,
) -> list[AppEntry]:
    """Return catalog entries whose name or description contains ``query``.

    Matching is case-insensitive substring containment and keeps catalog
    order. An empty query returns every entry.
    """
    if not query:
        return list(catalog)
    folded = query.casefold()
    return [entry for entry in catalog if entry_matches(entry, folded, search_descriptions)]
