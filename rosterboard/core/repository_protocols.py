"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves —
      the shell orchestrates the async calls around the pure logic
    - load() never returns None: an unknown group is an empty roster (lazy creation)
"""

from typing import Protocol

from rosterboard.core.domain_types import GroupId
from rosterboard.core.roster_state import GroupRoster


class RosterRepository(Protocol):
    """Contract for whole-roster persistence — implemented by shell.

    Implementations raise StorageError on any IO failure.
    """
    async def load(self, group_id: GroupId) -> GroupRoster: ...
    async def save(self, group_id: GroupId, roster: GroupRoster) -> None: ...
    async def health_check(self) -> bool: ...
