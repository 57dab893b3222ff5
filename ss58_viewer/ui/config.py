import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from ss58_viewer.config.model import GlobalConfig
from ss58_viewer.core.record_store import RecordStore
from ss58_viewer.core.table_state import ControlState
from ss58_viewer.core.table_view import TableView

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """
    Holds shared, read-only state for the Dash app: config root, global config
    and the registry loaded at startup. Passed into layout + callback
    registration functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    store: RecordStore

    def initial_state(self) -> ControlState:
        return ControlState(page_size=self.global_config.default_page_size)

    def make_view(self, state: ControlState) -> TableView:
        """Rebuild the table view for one request from the stored control state."""
        return TableView(
            self.store,
            state=state,
            page_size_options=self.global_config.page_size_options,
        )

    def restore_view(self, state_data: Optional[Any]) -> TableView:
        """
        Rebuild the table view from the raw store payload.

        A stored sort on a column that no longer exists is dropped.
        """
        state = ControlState.from_dict(state_data)
        try:
            return self.make_view(state)
        except KeyError:
            logger.warning(
                "Dropping stored sort on unknown column",
                extra={"sort": state.sort.to_dict() if state.sort else None},
            )
            return self.make_view(replace(state, sort=None))
