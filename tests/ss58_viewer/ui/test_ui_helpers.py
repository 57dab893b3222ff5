import pytest

from ss58_viewer.config.model import GlobalConfig
from ss58_viewer.core.entry import RegistryEntry
from ss58_viewer.core.record_store import RecordStore
from ss58_viewer.core.sort_engine import SortDirection, SortSpec
from ss58_viewer.core.table_view import TableView
from ss58_viewer.ui.helpers import (
    apply_control_event,
    column_from_sort_by,
    page_label,
    rows_frame,
    snapshot_outputs,
    sort_by_for,
    summary_text,
    table_columns,
    table_records,
)
from ss58_viewer.ui.config import AppConfig
from ss58_viewer.ui.ids import IDs


def _make_view(n=120):
    entries = [
        RegistryEntry(i, f"net{i:03d}", f"Network {i}", ("TOK",), (12,), "*25519", f"https://net{i}.example")
        for i in range(n)
    ]
    entries.append(RegistryEntry(n, "nolink", "No Link"))
    return TableView(RecordStore(entries))


def test_table_columns_mark_website_as_markdown():
    columns = {c["id"]: c for c in table_columns()}

    assert columns["website"]["presentation"] == "markdown"
    assert "presentation" not in columns["prefix"]
    assert columns["display_name"]["name"] == "Display Name"


def test_rows_frame_renders_text():
    view = _make_view(2)

    frame = rows_frame(view.rows)

    assert list(frame["prefix"]) == ["0", "1", "2"]
    assert frame.loc[0, "website"] == "[https://net0.example](https://net0.example)"
    assert frame.loc[2, "website"] == "N/A"
    assert frame.loc[2, "symbols"] == "N/A"


def test_table_records_for_empty_page():
    assert table_records(()) == []


def test_sort_by_mirrors_spec():
    assert sort_by_for(None) == []
    assert sort_by_for(SortSpec("prefix", SortDirection.DESCENDING)) == [
        {"column_id": "prefix", "direction": "desc"}
    ]


def test_column_from_sort_by():
    current = SortSpec("network", SortDirection.DESCENDING)

    assert column_from_sort_by([{"column_id": "prefix", "direction": "asc"}], current) == "prefix"
    # DataTable clears sort_by when a descending column is clicked again
    assert column_from_sort_by([], current) == "network"
    assert column_from_sort_by([], None) is None


def test_header_clicks_cycle_through_the_view():
    view = _make_view(3)
    table = IDs.Control.REGISTRY_TABLE

    snap = apply_control_event(view, table, sort_by=[{"column_id": "prefix", "direction": "asc"}])
    assert snap.sort == SortSpec("prefix", SortDirection.ASCENDING)

    snap = apply_control_event(view, table, sort_by=[{"column_id": "prefix", "direction": "desc"}])
    assert [e.prefix for e in snap.rows] == [3, 2, 1, 0]

    snap = apply_control_event(view, table, sort_by=[])
    assert snap.sort is None


def test_filter_and_navigation_events():
    view = _make_view(120)

    snap = apply_control_event(view, IDs.Control.LAST_PAGE_BTN)
    assert snap.page_index == 2

    snap = apply_control_event(view, IDs.Control.PREVIOUS_PAGE_BTN)
    assert snap.page_index == 1

    snap = apply_control_event(view, IDs.Control.PAGE_SIZE_SELECT, page_size="200")
    assert snap.page_index == 0
    assert snap.page_count == 1

    snap = apply_control_event(view, IDs.Control.FILTER_INPUT, filter_text="nolink")
    assert [e.network for e in snap.rows] == ["nolink"]


def test_unknown_trigger_returns_current_snapshot():
    view = _make_view(3)

    assert apply_control_event(view, None) is view.snapshot
    assert apply_control_event(view, "something-else") is view.snapshot


def test_page_label_and_summary():
    view = _make_view(120)
    view.last_page()

    assert page_label(view.snapshot) == "Page 3 of 3"
    assert summary_text(view.snapshot) == "Showing 101 to 121 of 121 entries"

    view.set_filter_text("zzz")
    assert page_label(view.snapshot) == "Page 1 of 1"
    assert summary_text(view.snapshot) == "No matching entries (filtered from 121)"


def test_snapshot_outputs_write_back_page_size():
    view = _make_view(120)
    view.set_page_size(100)
    view.next_page()

    outputs = snapshot_outputs(view.snapshot, view)

    records, sort_by, summary, label, page_size, first, prev, nxt, last, state = outputs
    assert len(records) == 21
    assert sort_by == []
    assert label == "Page 2 of 2"
    assert page_size == 100
    assert (first, prev, nxt, last) == (False, False, True, True)
    assert state["page_size"] == 100
    assert state["page_index"] == 1


def test_rejected_page_size_snaps_selector_back():
    view = _make_view(120)

    with pytest.raises(ValueError):
        apply_control_event(view, IDs.Control.PAGE_SIZE_SELECT, page_size=75)

    outputs = snapshot_outputs(view.snapshot, view)
    assert outputs[4] == 50
    assert outputs[-1]["page_size"] == 50


def _make_app_config(tmp_path):
    store = _make_view(3).entries
    return AppConfig(
        config_root=tmp_path,
        global_config=GlobalConfig(registry_file=tmp_path / "ss58-registry.json"),
        store=store,
    )


def test_restore_view_from_null_page_index(tmp_path):
    ctx = _make_app_config(tmp_path)

    view = ctx.restore_view({"filter_text": "", "sort": None, "page_index": None, "page_size": 50})

    assert view.state.page_index == 0
    assert [e.prefix for e in view.rows] == [0, 1, 2, 3]


def test_restore_view_drops_sort_on_unknown_column(tmp_path):
    ctx = _make_app_config(tmp_path)

    view = ctx.restore_view({"sort": {"column": "nope", "direction": "asc"}, "page_size": 50})

    assert view.state.sort is None
    assert len(view.rows) == 4
