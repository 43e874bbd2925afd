"""Root conftest — shared test configuration and in-memory repository fakes.

Invariants:
    - Every test gets a fresh repository (no cross-test state)
    - Fakes store records (dicts), not live GroupRoster objects, so a loaded
      roster never aliases what was saved, same as a real backend

Design Decisions:
    - Fake over mock: the store's load/save contract is simple and worth exercising for real
    - FailingRosterRepository raises StorageError to drive the Unexpected path
"""

import os

# Ensure tests never touch the working-directory database or roster file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ROSTER_BACKEND", "database")

import pytest

from rosterboard.core.errors import StorageError
from rosterboard.core.roster_state import GroupRoster
from rosterboard.services.roster_store import RosterStore


class InMemoryRosterRepository:
    """Dict-backed RosterRepository with call counters."""

    def __init__(self):
        self.records: dict[str, dict] = {}
        self.loads = 0
        self.saves = 0

    async def load(self, group_id):
        self.loads += 1
        return GroupRoster.from_record(self.records.get(group_id))

    async def save(self, group_id, roster):
        self.saves += 1
        self.records[group_id] = roster.to_record()

    async def health_check(self):
        return True

    def seed(self, group_id, entries, claimed=()):
        self.records[group_id] = {"entries": list(entries), "claimed": list(claimed)}


class FailingRosterRepository(InMemoryRosterRepository):
    """Loads fine, fails every save."""

    async def save(self, group_id, roster):
        raise StorageError("disk unavailable", "save")

    async def health_check(self):
        return False


@pytest.fixture
def repository():
    return InMemoryRosterRepository()


@pytest.fixture
def store(repository):
    return RosterStore(repository)


@pytest.fixture
def failing_store():
    return RosterStore(FailingRosterRepository())
