"""Roster Command Handlers — add, remove, move, reset, list, show-panel.

Invariants:
    - Required string options are trimmed; empty after trimming → "Invalid name."
    - position must be a real int (bool rejected) — range is checked by the roster
    - Store errors propagate as RosterError; CommandDispatch turns them into denials
    - show-panel renders every page from ONE snapshot (pages mutually consistent)

Design Decisions:
    - Handlers return Reply dataclasses, never platform payloads (ADR: core owns no JSON)
    - Argument validation here, not in the store: the store trusts trimmed input
"""

import logging

from rosterboard.core.domain_types import GroupId
from rosterboard.core.format_messages import (
    EMPTY_PANEL, INVALID_NAME, INVALID_POSITION_TYPE, LIST_TITLE, ROSTER_CLEARED,
    format_added, format_moved, format_removed, format_roster_list,
)
from rosterboard.core.render_page import render_panel
from rosterboard.core.replies import ListReply, PanelReply, Reply, TextReply
from rosterboard.services.roster_store import RosterStore

logger = logging.getLogger(__name__)


def _read_name(options: dict) -> str | None:
    value = options.get("name")
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _read_position(options: dict) -> int | None:
    value = options.get("position")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class RosterCommandHandlers:
    """Command handlers — one Store operation each."""

    def __init__(self, store: RosterStore):
        self.store = store

    async def add(self, group_id: GroupId, options: dict) -> Reply:
        name = _read_name(options)
        if name is None:
            return TextReply(INVALID_NAME)
        await self.store.add(group_id, name)
        return TextReply(format_added(name))

    async def remove(self, group_id: GroupId, options: dict) -> Reply:
        name = _read_name(options)
        if name is None:
            return TextReply(INVALID_NAME)
        await self.store.remove(group_id, name)
        return TextReply(format_removed(name))

    async def move(self, group_id: GroupId, options: dict) -> Reply:
        name = _read_name(options)
        if name is None:
            return TextReply(INVALID_NAME)
        position = _read_position(options)
        if position is None:
            return TextReply(INVALID_POSITION_TYPE)
        await self.store.move(group_id, name, position)
        return TextReply(format_moved(name, position))

    async def reset(self, group_id: GroupId, options: dict) -> Reply:
        await self.store.reset(group_id)
        return TextReply(ROSTER_CLEARED)

    async def list(self, group_id: GroupId, options: dict) -> Reply:
        snapshot = await self.store.snapshot(group_id)
        return ListReply(title=LIST_TITLE, body=format_roster_list(snapshot))

    async def show_panel(self, group_id: GroupId, options: dict) -> Reply:
        snapshot = await self.store.snapshot(group_id)
        pages = render_panel(snapshot)
        if not pages:
            return TextReply(EMPTY_PANEL)
        logger.info(
            f"Panel rendered: {len(pages)} page(s) for {len(snapshot)} entries",
            extra={"group_id": group_id},
        )
        return PanelReply(pages=tuple(pages))
