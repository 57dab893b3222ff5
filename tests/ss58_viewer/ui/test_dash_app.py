import json
from pathlib import Path

from ss58_viewer.ui.dash_app import create_dash_app


def _make_config(root: Path) -> Path:
    root.mkdir(parents=True)
    (root / "global.json").write_text(
        json.dumps({"ui_title": "Tiny Viewer", "registry_file": "registry.json"})
    )
    (root / "registry.json").write_text(
        json.dumps(
            {
                "registry": [
                    {"prefix": 0, "network": "polkadot", "displayName": "Polkadot", "symbols": ["DOT"],
                     "decimals": [10], "standardAccount": "*25519", "website": "https://polkadot.network"},
                    {"prefix": 2, "network": "kusama", "displayName": "Kusama", "symbols": ["KSM"],
                     "decimals": [12], "standardAccount": "*25519", "website": None},
                ]
            }
        )
    )
    return root


def test_create_dash_app_builds_layout(tmp_path):
    app = create_dash_app(_make_config(tmp_path / "config"))

    assert app.title == "Tiny Viewer"
    assert app.layout is not None
    assert "registry-table" in str(app.layout)


def test_create_dash_app_with_missing_registry(tmp_path):
    root = _make_config(tmp_path / "config")
    (root / "registry.json").unlink()

    app = create_dash_app(root)

    assert app.layout is not None
