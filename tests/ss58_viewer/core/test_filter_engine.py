import pytest

from ss58_viewer.core.columns import COLUMNS
from ss58_viewer.core.entry import RegistryEntry
from ss58_viewer.core.filter_engine import entry_matches, filter_entries


def _make_entries():
    return [
        RegistryEntry(0, "polkadot", "Polkadot Relay Chain", ("DOT",), (10,), "*25519", "https://polkadot.network"),
        RegistryEntry(2, "kusama", "Kusama Relay Chain", ("KSM",), (12,), "*25519", "https://kusama.network"),
        RegistryEntry(42, "substrate", "Substrate", (), (), "*25519", "https://substrate.io/"),
        RegistryEntry(43, "BareSecp256k1", "Bare ECDSA key", (), (), "secp256k1", None),
        RegistryEntry(1284, "moonbeam", "Moonbeam", ("GLMR",), (18,), "secp256k1", "https://moonbeam.network"),
    ]


def test_empty_filter_is_identity():
    entries = _make_entries()

    assert filter_entries(entries, "") == entries


def test_filter_is_case_insensitive():
    result = filter_entries(_make_entries(), "KUSAMA")

    assert [e.prefix for e in result] == [2]


def test_filter_matches_any_column_and_keeps_order():
    # "relay" hits display names, "12" hits prefix 1284 and decimals 12
    assert [e.prefix for e in filter_entries(_make_entries(), "relay")] == [0, 2]
    assert [e.prefix for e in filter_entries(_make_entries(), "12")] == [2, 1284]


def test_filter_matches_joined_and_missing_text():
    entries = _make_entries()

    assert [e.prefix for e in filter_entries(entries, "n/a")] == [42, 43]
    assert [e.prefix for e in filter_entries(entries, "secp256k1")] == [43, 1284]


def test_whitespace_is_not_trimmed():
    entries = _make_entries()

    # only display names contain a space
    assert [e.prefix for e in filter_entries(entries, " ")] == [0, 2, 43]
    assert filter_entries(entries, " kusama ") == []


def test_no_match_gives_empty_list():
    assert filter_entries(_make_entries(), "no-such-network") == []


def test_filter_on_empty_input():
    assert filter_entries([], "dot") == []


@pytest.mark.parametrize("text", ["", "a", "RELAY", "1", " ", "n/a", "https", "zzz"])
def test_filter_is_idempotent(text):
    once = filter_entries(_make_entries(), text)

    assert filter_entries(once, text) == once


@pytest.mark.parametrize("text", ["a", "RELAY", "1", "n/a", "Net"])
def test_every_result_has_a_matching_column(text):
    for entry in filter_entries(_make_entries(), text):
        assert entry_matches(entry, text)
        assert any(text.lower() in c.render(entry).lower() for c in COLUMNS)
