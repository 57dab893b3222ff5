from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .sort_engine import SortSpec

DEFAULT_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE_OPTIONS = (50, 100, 200)


@dataclass(frozen=True)
class ControlState:
    """
    Represents the current user controls on the registry table.

    Fields:

    - filter_text: free-text global filter, matched verbatim (not trimmed)
    - sort: active single-column sort, None for load order
    - page_index: 0-based index of the visible page
    - page_size: rows per page, one of the configured page size options
    """

    filter_text: str = ""
    sort: Optional[SortSpec] = None
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filter_text": self.filter_text,
            "sort": self.sort.to_dict() if self.sort is not None else None,
            "page_index": self.page_index,
            "page_size": self.page_size,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ControlState:
        """
        Rebuild a state from its stored dict.

        The dict comes back from the browser, so missing, null or malformed
        values fall back to their defaults instead of raising.
        """
        if not isinstance(data, dict):
            return cls()
        try:
            sort = SortSpec.from_dict(data.get("sort"))
        except (AttributeError, TypeError, ValueError):
            sort = None
        return cls(
            filter_text=str(data.get("filter_text") or ""),
            sort=sort,
            page_index=_as_int(data.get("page_index"), 0),
            page_size=_as_int(data.get("page_size"), DEFAULT_PAGE_SIZE),
        )


def _as_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
