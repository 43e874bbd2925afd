"""Roster Store — atomic per-group read-mutate-write over a RosterRepository.

Invariants:
    - Every mutation runs under the group lock: load → mutate → save, as one unit
      (transaction(), or toggle_claim_at() which skips the save when stale)
    - One asyncio.Lock per group: events for the same group never interleave
    - A mutation that raises saves nothing (roster left as stored)
    - A stale toggle (index no longer resolves) saves nothing either
    - snapshot() takes the same lock and never writes
    - Every RosterError leaving the store carries its group_id in ErrorContext

Design Decisions:
    - Explicit transaction unit over call-site await ordering: the consistency
      contract does not depend on the caller happening to be sequential
    - Locks are in-process only; multi-process writers are last-writer-wins
    - Locks live in a WeakValueDictionary: a group's lock exists only while an
      event holds or awaits it, so idle groups cost nothing
    - Pure roster logic lives in core/roster_state.py — this layer only orchestrates IO
"""

import asyncio
import logging
import weakref
from contextlib import asynccontextmanager
from typing import AsyncIterator

from rosterboard.core.domain_types import GroupId
from rosterboard.core.errors import RosterError
from rosterboard.core.repository_protocols import RosterRepository
from rosterboard.core.roster_state import GroupRoster, RosterSnapshot

logger = logging.getLogger(__name__)


class RosterStore:
    """Group-scoped roster operations with an explicit atomic unit per event."""

    def __init__(self, repository: RosterRepository):
        self._repository = repository
        self._locks: weakref.WeakValueDictionary[GroupId, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    @property
    def repository(self) -> RosterRepository:
        return self._repository

    def _lock_for(self, group_id: GroupId) -> asyncio.Lock:
        lock = self._locks.get(group_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[group_id] = lock
        return lock

    @asynccontextmanager
    async def _locked(self, group_id: GroupId) -> AsyncIterator[None]:
        """Hold the group's lock; stamp group_id on any RosterError raised inside."""
        async with self._lock_for(group_id):
            try:
                yield
            except RosterError as e:
                if e.context.group_id is None:
                    e.context.group_id = group_id
                raise

    @asynccontextmanager
    async def transaction(self, group_id: GroupId) -> AsyncIterator[GroupRoster]:
        """Load the group's roster, yield it for mutation, save on clean exit."""
        async with self._locked(group_id):
            roster = await self._repository.load(group_id)
            yield roster
            await self._repository.save(group_id, roster)

    async def add(self, group_id: GroupId, name: str) -> None:
        async with self.transaction(group_id) as roster:
            roster.add(name)
        logger.info("Entry added", extra={"group_id": group_id})

    async def remove(self, group_id: GroupId, name: str) -> None:
        async with self.transaction(group_id) as roster:
            roster.remove(name)
        logger.info("Entry removed", extra={"group_id": group_id})

    async def move(self, group_id: GroupId, name: str, position: int) -> None:
        async with self.transaction(group_id) as roster:
            roster.move(name, position)
        logger.info("Entry moved", extra={"group_id": group_id})

    async def toggle_claim(self, group_id: GroupId, name: str) -> bool:
        async with self.transaction(group_id) as roster:
            return roster.toggle_claim(name)

    async def toggle_claim_at(
        self, group_id: GroupId, index: int,
    ) -> tuple[bool, RosterSnapshot]:
        """Toggle by absolute index; returns (mutated, snapshot after).

        A stale index is not an error and writes nothing.
        """
        async with self._locked(group_id):
            roster = await self._repository.load(group_id)
            mutated = roster.toggle_claim_at(index)
            if mutated:
                await self._repository.save(group_id, roster)
        return mutated, roster.snapshot()

    async def reset(self, group_id: GroupId) -> None:
        async with self.transaction(group_id) as roster:
            roster.reset()
        logger.info("Roster reset", extra={"group_id": group_id})

    async def snapshot(self, group_id: GroupId) -> RosterSnapshot:
        """Consistent read-only view; never writes."""
        async with self._locked(group_id):
            roster = await self._repository.load(group_id)
        return roster.snapshot()
