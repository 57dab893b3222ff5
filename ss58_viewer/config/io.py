from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from ss58_viewer.config.model import (
    DEFAULT_FILTER_PLACEHOLDER,
    DEFAULT_REGISTRY_FILE,
    DEFAULT_REPO_URL,
    DEFAULT_UI_TITLE,
    GlobalConfig,
)
from ss58_viewer.core.exceptions import ConfigError
from ss58_viewer.core.table_state import DEFAULT_PAGE_SIZE_OPTIONS

logger = logging.getLogger(__name__)


def _parse_page_size_options(raw: Any) -> Tuple[int, ...]:
    if raw is None:
        return DEFAULT_PAGE_SIZE_OPTIONS
    if not isinstance(raw, list) or not raw:
        raise ConfigError("'page_size_options' must be a non-empty list of positive integers")
    for value in raw:
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigError(f"Invalid page size option {value!r}")
    return tuple(raw)


def _resolve(root: Path, raw_path: str) -> Path:
    # Absolute paths are used as-is, relative ones are resolved against the config root.
    path = Path(raw_path)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def parse_global_config(raw: Dict[str, Any], root: Path) -> GlobalConfig:
    """
    Build a GlobalConfig from the decoded global.json.

    :raises ConfigError: on wrong types or a default page size outside the options
    """
    if not isinstance(raw, dict):
        raise ConfigError("global.json must contain a JSON object")

    options = _parse_page_size_options(raw.get("page_size_options"))

    default_page_size = raw.get("default_page_size", options[0])
    if default_page_size not in options:
        raise ConfigError(
            f"default_page_size {default_page_size!r} is not one of {list(options)}"
        )

    registry_file = raw.get("registry_file", DEFAULT_REGISTRY_FILE)
    if not isinstance(registry_file, str) or not registry_file:
        raise ConfigError("'registry_file' must be a non-empty string")

    for key in ("ui_title", "repo_url", "filter_placeholder"):
        if key in raw and not isinstance(raw[key], str):
            raise ConfigError(f"'{key}' must be a string")

    return GlobalConfig(
        registry_file=_resolve(root, registry_file),
        ui_title=raw.get("ui_title", DEFAULT_UI_TITLE),
        page_size_options=options,
        default_page_size=default_page_size,
        repo_url=raw.get("repo_url", DEFAULT_REPO_URL),
        filter_placeholder=raw.get("filter_placeholder", DEFAULT_FILTER_PLACEHOLDER),
    )


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            ss58-registry.json   (or whatever 'registry_file' names)

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or has invalid values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw_global = json.load(f)
    except ValueError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    config = parse_global_config(raw_global, root)

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "registry_file": str(config.registry_file),
            "page_size_options": list(config.page_size_options),
        },
    )
    return config
