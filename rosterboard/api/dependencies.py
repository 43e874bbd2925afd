"""API Dependencies — process-wide RosterStore and the per-request services built on it.

Invariants:
    - Exactly one RosterStore per process (its per-group locks must be shared)
    - Dispatch and router are stateless: built per request from the shared store
    - A request arriving before startup finished gets StorageError (503 envelope)

Design Decisions:
    - Singleton initialized on startup via lifespan, same pattern as db_manager
    - FastAPI dependencies so tests override get_store with an in-memory store
"""

from fastapi import Depends

from rosterboard.core.errors import StorageError
from rosterboard.core.repository_protocols import RosterRepository
from rosterboard.services.command_dispatch import CommandDispatch
from rosterboard.services.interaction_router import InteractionRouter
from rosterboard.services.roster_store import RosterStore

# Singleton (initialized on startup)
roster_store: RosterStore | None = None


def init_store(repository: RosterRepository) -> RosterStore:
    global roster_store
    roster_store = RosterStore(repository)
    return roster_store


def get_store() -> RosterStore:
    """FastAPI dependency for the shared store."""
    if not roster_store:
        raise StorageError("roster store not initialized", "init")
    return roster_store


def get_dispatch(store: RosterStore = Depends(get_store)) -> CommandDispatch:
    return CommandDispatch(store)


def get_router(store: RosterStore = Depends(get_store)) -> InteractionRouter:
    return InteractionRouter(store)
