from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        TABLE_STATE = "table-state"

    class Control:
        # Search
        FILTER_INPUT = "filter-input"

        # Table
        REGISTRY_TABLE = "registry-table"
        TABLE_SUMMARY = "table-summary"

        # Pagination
        FIRST_PAGE_BTN = "first-page-btn"
        PREVIOUS_PAGE_BTN = "previous-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"
        LAST_PAGE_BTN = "last-page-btn"
        PAGE_LABEL = "page-label"
        PAGE_SIZE_SELECT = "page-size-select"

    # Navigation buttons mapped to the TableView method they call
    NAVIGATION = {
        Control.FIRST_PAGE_BTN: "first_page",
        Control.PREVIOUS_PAGE_BTN: "previous_page",
        Control.NEXT_PAGE_BTN: "next_page",
        Control.LAST_PAGE_BTN: "last_page",
    }
