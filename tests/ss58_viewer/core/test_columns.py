import pytest

from ss58_viewer.core.columns import (
    COLUMNS,
    ColumnKind,
    column_keys,
    get_column,
    render_row,
    render_value,
)
from ss58_viewer.core.entry import RegistryEntry


def _make_entry(**overrides):
    fields = dict(
        prefix=2,
        network="kusama",
        display_name="Kusama Relay Chain",
        symbols=("KSM",),
        decimals=(12,),
        standard_account="*25519",
        website="https://kusama.network",
    )
    fields.update(overrides)
    return RegistryEntry(**fields)


def test_column_order_matches_table():
    assert column_keys() == [
        "prefix",
        "network",
        "display_name",
        "symbols",
        "decimals",
        "standard_account",
        "website",
    ]
    assert [c.header for c in COLUMNS][:3] == ["Prefix", "Network", "Display Name"]


def test_render_row_uses_text_rules():
    entry = _make_entry(symbols=("KSM", "xKSM"), decimals=(12, 18), website=None)

    row = render_row(entry)

    assert row["prefix"] == "2"
    assert row["network"] == "kusama"
    assert row["symbols"] == "KSM, xKSM"
    assert row["decimals"] == "12, 18"
    assert row["standard_account"] == "*25519"
    assert row["website"] == "N/A"


def test_empty_arrays_render_as_missing():
    row = render_row(_make_entry(symbols=(), decimals=(), standard_account=None))

    assert row["symbols"] == "N/A"
    assert row["decimals"] == "N/A"
    assert row["standard_account"] == "N/A"


def test_strings_are_rendered_verbatim():
    assert render_value(ColumnKind.STRING, "  Mixed Case  ") == "  Mixed Case  "


def test_array_sort_key_is_joined_text():
    column = get_column("decimals")

    assert column.sort_key(_make_entry(decimals=(10, 12))) == "10, 12"
    assert column.sort_key(_make_entry(decimals=())) == ""


def test_only_nullable_columns_have_absent_values():
    entry = _make_entry(symbols=(), standard_account=None, website=None)

    assert get_column("website").is_absent(entry)
    assert get_column("standard_account").is_absent(entry)
    assert not get_column("symbols").is_absent(entry)


def test_unknown_column_raises():
    with pytest.raises(KeyError, match="Column 'chain_id' not found"):
        get_column("chain_id")
