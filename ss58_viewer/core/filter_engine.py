from __future__ import annotations

from typing import Iterable, List

from .columns import COLUMNS
from .entry import RegistryEntry


def entry_matches(entry: RegistryEntry, filter_text: str) -> bool:
    """
    True if any column's rendered text contains filter_text, ignoring case.

    The text is matched as-is: surrounding whitespace is part of the query.
    """
    if not filter_text:
        return True
    needle = filter_text.casefold()
    return any(needle in column.render(entry).casefold() for column in COLUMNS)


def filter_entries(entries: Iterable[RegistryEntry], filter_text: str) -> List[RegistryEntry]:
    """
    Global filter: keep every entry with at least one matching column, in the
    original relative order. An empty filter keeps everything.
    """
    if not filter_text:
        return list(entries)
    return [entry for entry in entries if entry_matches(entry, filter_text)]
