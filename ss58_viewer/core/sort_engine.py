from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .columns import get_column
from .entry import RegistryEntry


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortSpec:
    """Single-column sort selection."""
    column: str
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING

    def to_dict(self) -> Dict[str, Any]:
        return {"column": self.column, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[SortSpec]:
        if not data or not data.get("column"):
            return None
        return cls(
            column=data["column"],
            direction=SortDirection(data.get("direction", SortDirection.ASCENDING.value)),
        )


def sort_entries(
    entries: Iterable[RegistryEntry],
    sort_spec: Optional[SortSpec],
) -> List[RegistryEntry]:
    """
    Order entries by one column.

    - No spec: input order is kept.
    - Ascending is a stable sort: ties keep their input order.
    - Descending is the exact reverse of the ascending order, ties included.
    - Absent values of nullable columns go after every present value whatever
      the direction, in input order.
    """
    rows = list(entries)
    if sort_spec is None:
        return rows

    column = get_column(sort_spec.column)

    present = [e for e in rows if not column.is_absent(e)]
    absent = [e for e in rows if column.is_absent(e)]

    ordered = sorted(present, key=column.sort_key)
    if sort_spec.descending:
        ordered.reverse()
    return ordered + absent


def next_sort_spec(current: Optional[SortSpec], column: str) -> Optional[SortSpec]:
    """
    Header activation: none -> ascending -> descending -> none.

    Activating another column starts that column at ascending and drops the
    previous selection (single-column sort only).

    :raises KeyError: if column is not a known column key
    """
    get_column(column)

    if current is None or current.column != column:
        return SortSpec(column, SortDirection.ASCENDING)
    if current.direction is SortDirection.ASCENDING:
        return SortSpec(column, SortDirection.DESCENDING)
    return None
