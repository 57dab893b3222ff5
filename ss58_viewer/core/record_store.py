from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Sequence, Set, Tuple, Union, overload

from .entry import RegistryEntry
from .exceptions import RegistryEntryError, RegistryLoadError

logger = logging.getLogger(__name__)


class RecordStore(Sequence[RegistryEntry]):
    """
    Read-only, ordered view over the registry entries loaded at startup.

    The store never changes after construction: the entries are held in a tuple
    and there are no mutating operations. Load order is the default table order.
    """

    def __init__(self, entries: Sequence[RegistryEntry] = ()) -> None:
        self._entries: Tuple[RegistryEntry, ...] = tuple(entries)

    @classmethod
    def empty(cls) -> RecordStore:
        return cls(())

    @property
    def entries(self) -> Tuple[RegistryEntry, ...]:
        return self._entries

    @overload
    def __getitem__(self, index: int) -> RegistryEntry: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[RegistryEntry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RecordStore(n_entries={len(self._entries)})"


def read_registry_file(path: Union[str, Path]) -> List[Any]:
    """
    Read the raw entry list from a registry JSON file.

    Accepts both the published ss58-registry layout (``{"registry": [...]}``)
    and a bare list of entries.

    :raises RegistryLoadError: if the file is missing, not JSON, or has another shape
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise RegistryLoadError(f"Could not read registry file {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("registry")

    if not isinstance(raw, list):
        raise RegistryLoadError(
            f"Registry file {path} must contain a list or an object with a 'registry' list"
        )
    return raw


def build_entries(raw_entries: Sequence[Any]) -> List[RegistryEntry]:
    """
    Parse raw dicts into RegistryEntry objects, keeping load order.

    Malformed entries and repeated prefixes are logged and skipped.
    """
    entries: List[RegistryEntry] = []
    seen: Set[int] = set()

    for idx, raw in enumerate(raw_entries):
        try:
            entry = RegistryEntry.from_dict(raw)
        except RegistryEntryError as e:
            logger.error(
                "Skipping malformed registry entry",
                extra={"index": idx, "error": str(e)},
            )
            continue

        if entry.prefix in seen:
            logger.warning(
                "Skipping duplicate registry prefix",
                extra={"index": idx, "prefix": entry.prefix, "network": entry.network},
            )
            continue

        seen.add(entry.prefix)
        entries.append(entry)

    return entries


def load_registry(path: Union[str, Path]) -> RecordStore:
    """
    Load the registry once for the session.

    If the file cannot be used at all the failure is logged and an empty store
    is returned, so the table still renders (zero rows, page 1 of 1).
    """
    try:
        raw_entries = read_registry_file(path)
    except RegistryLoadError:
        logger.exception(
            "Registry could not be loaded; continuing with an empty table",
            extra={"registry_file": str(path)},
        )
        return RecordStore.empty()

    entries = build_entries(raw_entries)

    logger.info(
        "Registry loaded",
        extra={
            "registry_file": str(path),
            "n_entries": len(entries),
            "n_skipped": len(raw_entries) - len(entries),
        },
    )
    return RecordStore(entries)
