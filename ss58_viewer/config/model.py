from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ss58_viewer.core.table_state import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE_OPTIONS

DEFAULT_UI_TITLE = "SS58 Registry Viewer"
DEFAULT_REGISTRY_FILE = "ss58-registry.json"
DEFAULT_REPO_URL = "https://github.com/ss58-registry/viewer"
DEFAULT_FILTER_PLACEHOLDER = "Search in all columns..."


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title: page title and navbar heading
    - registry_file: registry JSON, already resolved against the config root
    - page_size_options: choices offered by the page-size selector
    - default_page_size: initial page size, one of page_size_options
    - repo_url: link shown in the navbar
    - filter_placeholder: placeholder text of the search box
    """
    registry_file: Path
    ui_title: str = DEFAULT_UI_TITLE
    page_size_options: Tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    default_page_size: int = DEFAULT_PAGE_SIZE
    repo_url: str = DEFAULT_REPO_URL
    filter_placeholder: str = DEFAULT_FILTER_PLACEHOLDER
