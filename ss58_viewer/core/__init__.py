"""
Core domain layer: registry entries, the record store, column descriptors
and the filter / sort / pagination engines behind the table view.
"""

from .entry import RegistryEntry
from .record_store import RecordStore, load_registry
from .columns import COLUMNS, Column, ColumnKind
from .sort_engine import SortDirection, SortSpec
from .table_state import ControlState
from .table_view import TableSnapshot, TableView

__all__ = [
    "RegistryEntry",
    "RecordStore",
    "load_registry",
    "COLUMNS",
    "Column",
    "ColumnKind",
    "SortDirection",
    "SortSpec",
    "ControlState",
    "TableSnapshot",
    "TableView",
]
