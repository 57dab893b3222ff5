from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from .entry import RegistryEntry
from .filter_engine import filter_entries
from .pagination import Page, paginate
from .sort_engine import SortSpec, next_sort_spec, sort_entries
from .table_state import DEFAULT_PAGE_SIZE_OPTIONS, ControlState
from .columns import get_column

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSnapshot:
    """
    Result of one pipeline run (filter -> sort -> paginate).

    - rows: entries on the visible page
    - page: pagination metadata for the navigation controls
    - sort: active sort, for header decoration
    - filter_text: the filter that produced this snapshot
    - total_rows: size of the unfiltered dataset
    - filtered_rows: size of the filtered result across all pages
    """
    rows: Tuple[RegistryEntry, ...]
    page: Page[RegistryEntry]
    sort: Optional[SortSpec]
    filter_text: str
    total_rows: int
    filtered_rows: int

    @property
    def page_index(self) -> int:
        return self.page.page_index

    @property
    def page_count(self) -> int:
        return self.page.page_count

    @property
    def can_previous_page(self) -> bool:
        return self.page.can_previous_page

    @property
    def can_next_page(self) -> bool:
        return self.page.can_next_page


class TableView:
    """
    Owns the control state of the registry table and keeps a consistent
    snapshot of the visible rows.

    Every mutation reruns the whole pipeline on the calling thread. A new state
    is only committed once the pipeline has produced a snapshot for it, so a
    failing operation leaves both the previous state and snapshot in place.

    With ``auto_reset_page`` (the default) changing the filter or the sort
    returns to the first page; otherwise the page index is only clamped.
    """

    def __init__(
        self,
        entries: Sequence[RegistryEntry],
        state: Optional[ControlState] = None,
        page_size_options: Sequence[int] = DEFAULT_PAGE_SIZE_OPTIONS,
        auto_reset_page: bool = True,
    ) -> None:
        if not page_size_options or any(size <= 0 for size in page_size_options):
            raise ValueError(f"page_size_options must be positive integers, got {page_size_options!r}")

        self._entries = entries
        self.page_size_options: Tuple[int, ...] = tuple(page_size_options)
        self.auto_reset_page = auto_reset_page

        state = state or ControlState(page_size=self.page_size_options[0])
        if state.page_size not in self.page_size_options:
            logger.warning(
                "Page size not among options; using the first option",
                extra={"page_size": state.page_size, "options": list(self.page_size_options)},
            )
            state = replace(state, page_size=self.page_size_options[0])

        self._state, self._snapshot = self._commit(state)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def entries(self) -> Sequence[RegistryEntry]:
        return self._entries

    @property
    def state(self) -> ControlState:
        return self._state

    @property
    def snapshot(self) -> TableSnapshot:
        return self._snapshot

    @property
    def rows(self) -> Tuple[RegistryEntry, ...]:
        return self._snapshot.rows

    def sort_indicator(self, column: str) -> Optional[str]:
        """Return "asc" or "desc" if `column` is the sorted column, else None."""
        spec = self._state.sort
        if spec is None or spec.column != column:
            return None
        return spec.direction.value

    # ------------------------------------------------------------------
    # Control mutations
    # ------------------------------------------------------------------
    def set_filter_text(self, text: Optional[str]) -> TableSnapshot:
        text = text or ""
        page_index = 0 if self.auto_reset_page else self._state.page_index
        return self._apply(replace(self._state, filter_text=text, page_index=page_index))

    def toggle_sort(self, column: str) -> TableSnapshot:
        """Header activation on `column`, cycling none -> asc -> desc -> none."""
        return self.set_sort(next_sort_spec(self._state.sort, column))

    def set_sort(self, spec: Optional[SortSpec]) -> TableSnapshot:
        if spec is not None:
            get_column(spec.column)
        page_index = 0 if self.auto_reset_page else self._state.page_index
        return self._apply(replace(self._state, sort=spec, page_index=page_index))

    def set_page_size(self, page_size: int) -> TableSnapshot:
        """
        :raises ValueError: if page_size is not one of page_size_options
        """
        if page_size not in self.page_size_options:
            raise ValueError(
                f"Page size {page_size} not in options {list(self.page_size_options)}"
            )
        return self._apply(replace(self._state, page_size=page_size))

    def set_page_index(self, page_index: int) -> TableSnapshot:
        return self._apply(replace(self._state, page_index=page_index))

    def go_to_page(self, page_index: int) -> TableSnapshot:
        return self.set_page_index(page_index)

    def next_page(self) -> TableSnapshot:
        if not self._snapshot.can_next_page:
            return self._snapshot
        return self.set_page_index(self._state.page_index + 1)

    def previous_page(self) -> TableSnapshot:
        if not self._snapshot.can_previous_page:
            return self._snapshot
        return self.set_page_index(self._state.page_index - 1)

    def first_page(self) -> TableSnapshot:
        return self.set_page_index(0)

    def last_page(self) -> TableSnapshot:
        return self.set_page_index(self._snapshot.page_count - 1)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def _apply(self, state: ControlState) -> TableSnapshot:
        self._state, self._snapshot = self._commit(state)
        return self._snapshot

    def _commit(self, state: ControlState) -> Tuple[ControlState, TableSnapshot]:
        filtered = filter_entries(self._entries, state.filter_text)
        ordered = sort_entries(filtered, state.sort)
        page = paginate(ordered, state.page_index, state.page_size)

        # paginate() clamps; store the index it actually used
        if page.page_index != state.page_index:
            state = replace(state, page_index=page.page_index)

        snapshot = TableSnapshot(
            rows=page.rows,
            page=page,
            sort=state.sort,
            filter_text=state.filter_text,
            total_rows=len(self._entries),
            filtered_rows=len(ordered),
        )
        return state, snapshot
