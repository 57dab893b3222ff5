from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from ss58_viewer.core.columns import COLUMNS, ColumnKind, MISSING_TEXT
from ss58_viewer.core.entry import RegistryEntry
from ss58_viewer.core.sort_engine import SortSpec
from ss58_viewer.core.table_view import TableSnapshot, TableView
from ss58_viewer.ui.ids import IDs


def table_columns() -> List[dict]:
    """DataTable column definitions; URL columns are rendered as markdown links."""
    columns = []
    for column in COLUMNS:
        spec = {"name": column.header, "id": column.key}
        if column.kind is ColumnKind.URL:
            spec["presentation"] = "markdown"
        columns.append(spec)
    return columns


def _cell(column, entry: RegistryEntry) -> str:
    text = column.render(entry)
    if column.kind is ColumnKind.URL and text != MISSING_TEXT:
        return f"[{text}]({text})"
    return text


def rows_frame(rows: Sequence[RegistryEntry]) -> pd.DataFrame:
    """
    Rendered text of the visible rows, one column per table column, in row order.
    """
    return pd.DataFrame(
        [{column.key: _cell(column, entry) for column in COLUMNS} for entry in rows],
        columns=[column.key for column in COLUMNS],
    )


def table_records(rows: Sequence[RegistryEntry]) -> List[Dict[str, Any]]:
    return rows_frame(rows).to_dict("records")


def sort_by_for(spec: Optional[SortSpec]) -> List[dict]:
    """DataTable `sort_by` value mirroring the active sort."""
    if spec is None:
        return []
    return [{"column_id": spec.column, "direction": spec.direction.value}]


def column_from_sort_by(sort_by: Optional[List[dict]], current: Optional[SortSpec]) -> Optional[str]:
    """
    Work out which header was activated from the DataTable's new `sort_by`.

    The DataTable clears `sort_by` when a descending column is clicked again;
    in that case the activated column is the one currently sorted.
    """
    if sort_by:
        return sort_by[0].get("column_id")
    return current.column if current is not None else None


def apply_control_event(
    view: TableView,
    triggered_id: Optional[str],
    *,
    filter_text: Optional[str] = None,
    sort_by: Optional[List[dict]] = None,
    page_size: Optional[Any] = None,
) -> TableSnapshot:
    """
    Translate one UI event into the matching TableView operation.

    Unknown or missing triggers (e.g. the initial page load) leave the view as
    it is and return its current snapshot.
    """
    if triggered_id == IDs.Control.FILTER_INPUT:
        return view.set_filter_text(filter_text)

    if triggered_id == IDs.Control.REGISTRY_TABLE:
        column = column_from_sort_by(sort_by, view.state.sort)
        if column is None:
            return view.snapshot
        return view.toggle_sort(column)

    if triggered_id == IDs.Control.PAGE_SIZE_SELECT:
        if page_size is None:
            return view.snapshot
        return view.set_page_size(int(page_size))

    method = IDs.NAVIGATION.get(triggered_id) if triggered_id else None
    if method is not None:
        return getattr(view, method)()

    return view.snapshot


def page_label(snapshot: TableSnapshot) -> str:
    return f"Page {snapshot.page_index + 1} of {snapshot.page_count}"


def summary_text(snapshot: TableSnapshot) -> str:
    page = snapshot.page
    if snapshot.filtered_rows == 0:
        text = "No matching entries"
    else:
        text = f"Showing {page.first_row} to {page.last_row} of {snapshot.filtered_rows} entries"
    if snapshot.filter_text:
        text += f" (filtered from {snapshot.total_rows})"
    return text


def page_size_options(options: Sequence[int]) -> List[dict]:
    return [{"label": f"Show {size}", "value": size} for size in options]


def snapshot_outputs(snapshot: TableSnapshot, view: TableView) -> tuple:
    """
    Values for the table callback outputs, in the order they are declared.

    The page-size selector is written back as well so a rejected size snaps
    the dropdown back to the size the rows were paginated with.
    """
    return (
        table_records(snapshot.rows),
        sort_by_for(snapshot.sort),
        summary_text(snapshot),
        page_label(snapshot),
        snapshot.page.page_size,
        not snapshot.can_previous_page,
        not snapshot.can_previous_page,
        not snapshot.can_next_page,
        not snapshot.can_next_page,
        view.state.to_dict(),
    )
