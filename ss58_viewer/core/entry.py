from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .exceptions import RegistryEntryError

STANDARD_ACCOUNTS = frozenset({"*25519", "Ed25519", "Sr25519", "secp256k1"})


@dataclass(frozen=True)
class RegistryEntry:
    """
    One network's address-prefix metadata record.

    Fields:

    - prefix: SS58 address prefix, unique within a dataset
    - network: machine name of the network (e.g. "polkadot")
    - display_name: human-readable label
    - symbols: token symbols, possibly empty
    - decimals: token decimals, expected (not enforced) to line up with symbols
    - standard_account: account key type, None when unknown
    - website: project URL, None when there is no link
    """

    prefix: int
    network: str
    display_name: str
    symbols: Tuple[str, ...] = field(default_factory=tuple)
    decimals: Tuple[int, ...] = field(default_factory=tuple)
    standard_account: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefix": self.prefix,
            "network": self.network,
            "displayName": self.display_name,
            "symbols": list(self.symbols),
            "decimals": list(self.decimals),
            "standardAccount": self.standard_account,
            "website": self.website,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RegistryEntry:
        """
        Build an entry from the published registry shape (camelCase keys).

        :raises RegistryEntryError: if a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise RegistryEntryError(f"Registry entry must be an object, got {type(data).__name__}")

        prefix = data.get("prefix")
        # bool is an int subclass; reject it explicitly
        if not isinstance(prefix, int) or isinstance(prefix, bool) or prefix < 0:
            raise RegistryEntryError(f"Invalid prefix {prefix!r}: expected a non-negative integer")

        network = data.get("network")
        if not isinstance(network, str) or not network:
            raise RegistryEntryError(f"Entry {prefix}: 'network' must be a non-empty string")

        display_name = data.get("displayName", "")
        if not isinstance(display_name, str):
            raise RegistryEntryError(f"Entry {prefix}: 'displayName' must be a string")

        symbols = data.get("symbols") or []
        if not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols):
            raise RegistryEntryError(f"Entry {prefix}: 'symbols' must be a list of strings")

        decimals = data.get("decimals") or []
        if not isinstance(decimals, list) or not all(
            isinstance(d, int) and not isinstance(d, bool) for d in decimals
        ):
            raise RegistryEntryError(f"Entry {prefix}: 'decimals' must be a list of integers")

        standard_account = data.get("standardAccount")
        if standard_account is not None and standard_account not in STANDARD_ACCOUNTS:
            raise RegistryEntryError(
                f"Entry {prefix}: unknown standardAccount {standard_account!r}"
            )

        website = data.get("website")
        if website is not None and not isinstance(website, str):
            raise RegistryEntryError(f"Entry {prefix}: 'website' must be a string or null")

        return cls(
            prefix=prefix,
            network=network,
            display_name=display_name,
            symbols=tuple(symbols),
            decimals=tuple(decimals),
            standard_account=standard_account,
            website=website or None,
        )
