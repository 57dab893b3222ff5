from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def page_count(total: int, page_size: int) -> int:
    """
    Number of pages for `total` rows. An empty result still reports one page
    so the UI can show "page 1 of 1".
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(total / page_size))


def clamp_page_index(page_index: int, n_pages: int) -> int:
    """Clamp into [0, n_pages - 1]."""
    return min(max(0, page_index), max(0, n_pages - 1))


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of an ordered result plus the metadata the navigation controls need.
    """
    rows: Tuple[T, ...]
    page_index: int
    page_size: int
    page_count: int
    total_rows: int
    page_options: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def can_previous_page(self) -> bool:
        return self.page_index > 0

    @property
    def can_next_page(self) -> bool:
        return self.page_index < self.page_count - 1

    @property
    def first_row(self) -> int:
        """1-based number of the first row on this page, 0 when empty."""
        if not self.rows:
            return 0
        return self.page_index * self.page_size + 1

    @property
    def last_row(self) -> int:
        """1-based number of the last row on this page, 0 when empty."""
        if not self.rows:
            return 0
        return self.page_index * self.page_size + len(self.rows)


def paginate(rows: Sequence[T], page_index: int, page_size: int) -> Page[T]:
    """
    Slice `rows` into the page at `page_index` (clamped into range).
    """
    total = len(rows)
    n_pages = page_count(total, page_size)
    index = clamp_page_index(page_index, n_pages)

    start = index * page_size
    end = min(total, start + page_size)

    return Page(
        rows=tuple(rows[start:end]),
        page_index=index,
        page_size=page_size,
        page_count=n_pages,
        total_rows=total,
        page_options=tuple(range(n_pages)),
    )


def split_pages(rows: Sequence[T], page_size: int) -> List[Page[T]]:
    """Every page of `rows`, in index order."""
    n_pages = page_count(len(rows), page_size)
    return [paginate(rows, i, page_size) for i in range(n_pages)]
