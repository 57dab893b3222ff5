from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from .entry import RegistryEntry

MISSING_TEXT = "N/A"
ARRAY_SEPARATOR = ", "


class ColumnKind(str, Enum):
    """
    Semantic type of a table column. Each kind decides how a cell value is
    rendered as text and how two values compare when sorting.
    """
    NUMERIC = "numeric"
    STRING = "string"
    STRING_ARRAY = "string_array"
    INTEGER_ARRAY = "integer_array"
    NULLABLE_ENUM = "nullable_enum"
    URL = "url"


def _join(values: Tuple[Any, ...]) -> str:
    return ARRAY_SEPARATOR.join(str(v) for v in values)


def render_value(kind: ColumnKind, value: Any) -> str:
    """
    Rendered textual value of a cell.

    Numbers become decimal text, arrays are joined with ", ", absent values
    (None or an empty array) become "N/A" and strings are used verbatim.
    """
    if kind in (ColumnKind.STRING_ARRAY, ColumnKind.INTEGER_ARRAY):
        return _join(value) if value else MISSING_TEXT
    if value is None:
        return MISSING_TEXT
    if kind is ColumnKind.NUMERIC:
        return str(int(value))
    return str(value)


def sort_key(kind: ColumnKind, value: Any) -> Any:
    """
    Key used to order present values of a column.

    Absent values of nullable kinds are never passed here; the sort engine
    partitions them out first so they can be placed after everything else.
    """
    if kind is ColumnKind.NUMERIC:
        return int(value)
    if kind in (ColumnKind.STRING_ARRAY, ColumnKind.INTEGER_ARRAY):
        return _join(value)
    # plain str comparison: case-sensitive, code-point order
    return str(value)


def is_absent(kind: ColumnKind, value: Any) -> bool:
    """Only nullable kinds have an absent state that sorts last."""
    return kind in (ColumnKind.NULLABLE_ENUM, ColumnKind.URL) and value is None


@dataclass(frozen=True)
class Column:
    """
    Column descriptor.

    :param key: stable column id used by sort specs and the UI
    :param header: human-readable header text
    :param kind: the ColumnKind driving rendering and comparison
    :param accessor: pulls the raw cell value out of an entry
    """
    key: str
    header: str
    kind: ColumnKind
    accessor: Callable[[RegistryEntry], Any]

    def render(self, entry: RegistryEntry) -> str:
        return render_value(self.kind, self.accessor(entry))

    def sort_key(self, entry: RegistryEntry) -> Any:
        return sort_key(self.kind, self.accessor(entry))

    def is_absent(self, entry: RegistryEntry) -> bool:
        return is_absent(self.kind, self.accessor(entry))


COLUMNS: Tuple[Column, ...] = (
    Column("prefix", "Prefix", ColumnKind.NUMERIC, lambda e: e.prefix),
    Column("network", "Network", ColumnKind.STRING, lambda e: e.network),
    Column("display_name", "Display Name", ColumnKind.STRING, lambda e: e.display_name),
    Column("symbols", "Symbols", ColumnKind.STRING_ARRAY, lambda e: e.symbols),
    Column("decimals", "Decimals", ColumnKind.INTEGER_ARRAY, lambda e: e.decimals),
    Column("standard_account", "Standard Account", ColumnKind.NULLABLE_ENUM, lambda e: e.standard_account),
    Column("website", "Website", ColumnKind.URL, lambda e: e.website),
)

COLUMNS_BY_KEY: Dict[str, Column] = {c.key: c for c in COLUMNS}


def get_column(key: str) -> Column:
    """
    :raises KeyError: if no column with the given key exists
    """
    try:
        return COLUMNS_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Column '{key}' not found")


def column_keys() -> List[str]:
    return [c.key for c in COLUMNS]


def render_row(entry: RegistryEntry) -> Dict[str, str]:
    """Rendered text for every column of one entry, keyed by column key."""
    return {c.key: c.render(entry) for c in COLUMNS}
