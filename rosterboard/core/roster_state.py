"""Roster State — per-group ordered entries plus the claimed subset.

Invariants:
    - entries contains no duplicates (case-sensitive exact match)
    - claimed ⊆ entries at every observation point
    - Every failing operation raises BEFORE mutating (roster left unmodified)
    - snapshot() is immutable and never aliases the live collections

Design Decisions:
    - Pure dataclass, no IO (ADR: functional core — persistence lives in the shell)
    - claimed as a set, persisted in roster order for deterministic records
    - from_record() repairs invariants on load: stored data may predate them;
      a field of the wrong type is corruption, not something to repair
"""

from dataclasses import dataclass, field

from rosterboard.core.errors import (
    DuplicateEntryError, EntryNotFoundError, InvalidPositionError, StorageError,
)


@dataclass(frozen=True)
class RosterSnapshot:
    """Read-only view of one roster at a single point in time."""

    entries: tuple[str, ...] = ()
    claimed: frozenset[str] = frozenset()

    def __len__(self) -> int:
        return len(self.entries)

    def is_claimed(self, name: str) -> bool:
        return name in self.claimed


@dataclass
class GroupRoster:
    """Mutable roster for one group — pure dataclass, no IO."""

    entries: list[str] = field(default_factory=list)
    claimed: set[str] = field(default_factory=set)

    def add(self, name: str) -> None:
        """Append name. Raises DuplicateEntryError if already present."""
        if name in self.entries:
            raise DuplicateEntryError(name)
        self.entries.append(name)

    def remove(self, name: str) -> None:
        """Drop name from entries and claimed in the same mutation."""
        index = self._index_of(name)
        del self.entries[index]
        self.claimed.discard(name)

    def move(self, name: str, position: int) -> None:
        """Reinsert name at 1-based position (after removal)."""
        index = self._index_of(name)
        if position < 1 or position > len(self.entries):
            raise InvalidPositionError(position, len(self.entries))
        del self.entries[index]
        self.entries.insert(position - 1, name)

    def toggle_claim(self, name: str) -> bool:
        """Flip claim membership. Returns the new claim state."""
        self._index_of(name)
        if name in self.claimed:
            self.claimed.discard(name)
            return False
        self.claimed.add(name)
        return True

    def toggle_claim_at(self, index: int) -> bool:
        """Flip the entry at index if it still resolves.

        Returns True when a mutation happened. A stale index (roster shrank
        since the page was rendered) is not an error — nothing changes.
        """
        if index < 0 or index >= len(self.entries):
            return False
        self.toggle_claim(self.entries[index])
        return True

    def reset(self) -> None:
        self.entries.clear()
        self.claimed.clear()

    def snapshot(self) -> RosterSnapshot:
        return RosterSnapshot(
            entries=tuple(self.entries), claimed=frozenset(self.claimed),
        )

    def to_record(self) -> dict:
        """JSON-safe record: claimed listed in roster order."""
        return {
            "entries": list(self.entries),
            "claimed": [name for name in self.entries if name in self.claimed],
        }

    @classmethod
    def from_record(cls, record: dict | None) -> "GroupRoster":
        """Rebuild from a stored record, dropping duplicates and orphan claims.

        Accepts the legacy {"players": [...], "taken": [...]} layout too.
        Raises StorageError when a field holds something other than a list.
        """
        if not record:
            return cls()
        raw_entries = _list_field(record, "entries", "players")
        raw_claimed = _list_field(record, "claimed", "taken")
        entries = list(dict.fromkeys(str(name) for name in raw_entries))
        known = set(entries)
        claimed = {str(name) for name in raw_claimed if str(name) in known}
        return cls(entries=entries, claimed=claimed)

    def _index_of(self, name: str) -> int:
        try:
            return self.entries.index(name)
        except ValueError:
            raise EntryNotFoundError(name) from None


def _list_field(record: dict, key: str, legacy_key: str) -> list:
    value = record.get(key, record.get(legacy_key))
    if value is None:
        return []
    if not isinstance(value, list):
        raise StorageError(
            f"field '{key}' holds {type(value).__name__}, expected a list", "load",
        )
    return value
