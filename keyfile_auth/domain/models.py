"""Domain models for the API key store."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping


@dataclass(frozen=True)
class KeyEntry:
    """One parsed `<service name><separator><api key>` line."""
    service_name: str
    api_key: str


@dataclass(frozen=True)
class KeySnapshot:
    """Immutable view of every key loaded so far.

    A store publishes a new snapshot after each load; readers only ever
    see a complete one.
    """
    valid_keys: FrozenSet[str] = frozenset()
    keys_by_name: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def extend(self, entries: list[KeyEntry]) -> "KeySnapshot":
        """Return a new snapshot with entries added. Later names overwrite earlier ones."""
        keys_by_name = dict(self.keys_by_name)
        valid_keys = set(self.valid_keys)
        for entry in entries:
            keys_by_name[entry.service_name] = entry.api_key
            valid_keys.add(entry.api_key)
        return KeySnapshot(
            valid_keys=frozenset(valid_keys),
            keys_by_name=MappingProxyType(keys_by_name),
        )
