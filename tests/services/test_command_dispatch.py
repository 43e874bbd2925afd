"""Command Dispatch — tests for explicit command routing and error conversion.

Tests cover:
    - Every command routes to its handler
    - Argument validation (trim, required, integer position)
    - Store errors become short denials, roster unchanged
    - Storage failures become the generic failure message
    - Denial and failure logs carry group and command context
    - show-panel builds primary + follow-up pages
"""

import logging

from rosterboard.core.format_messages import (
    EMPTY_LIST, EMPTY_PANEL, GENERIC_FAILURE, INVALID_NAME, INVALID_POSITION_TYPE,
)
from rosterboard.core.replies import ListReply, PanelReply, TextReply
from rosterboard.services.command_dispatch import CommandDispatch


async def test_dispatch_registers_all_six_commands(store):
    dispatch = CommandDispatch(store)
    assert sorted(dispatch.command_names) == sorted(
        ["add", "remove", "list", "reset", "show-panel", "move"],
    )


async def test_unknown_command_returns_text(store):
    reply = await CommandDispatch(store).execute("g1", "dance", {})
    assert reply == TextReply("Unknown command `dance`.")


# --- add ---------------------------------------------------------------------

async def test_add_trims_and_confirms(store, repository):
    reply = await CommandDispatch(store).execute("g1", "add", {"name": "  Anna  "})
    assert reply == TextReply("Added `Anna`.")
    assert repository.records["g1"]["entries"] == ["Anna"]


async def test_add_duplicate_is_denied_and_roster_unchanged(store, repository):
    dispatch = CommandDispatch(store)
    await dispatch.execute("g1", "add", {"name": "A"})
    reply = await dispatch.execute("g1", "add", {"name": "A"})
    assert reply == TextReply("`A` already exists.")
    assert repository.records["g1"]["entries"] == ["A"]


async def test_add_blank_name_is_invalid(store, repository):
    for options in ({"name": "   "}, {}, {"name": 5}):
        reply = await CommandDispatch(store).execute("g1", "add", options)
        assert reply == TextReply(INVALID_NAME)
    assert repository.saves == 0


# --- remove ------------------------------------------------------------------

async def test_remove_existing(store, repository):
    repository.seed("g1", ["A", "B"], claimed=["B"])
    reply = await CommandDispatch(store).execute("g1", "remove", {"name": "B"})
    assert reply == TextReply("Removed `B`.")
    assert repository.records["g1"] == {"entries": ["A"], "claimed": []}


async def test_remove_missing_is_denied(store):
    reply = await CommandDispatch(store).execute("g1", "remove", {"name": "Z"})
    assert reply == TextReply("Could not find `Z`.")


# --- move --------------------------------------------------------------------

async def test_move_confirms_new_position(store, repository):
    repository.seed("g1", ["A", "B", "C"])
    reply = await CommandDispatch(store).execute(
        "g1", "move", {"name": "C", "position": 1},
    )
    assert reply == TextReply("Moved `C` to position 1.")
    assert repository.records["g1"]["entries"] == ["C", "A", "B"]


async def test_move_out_of_range_is_denied(store, repository):
    repository.seed("g1", ["A", "B", "C"])
    reply = await CommandDispatch(store).execute(
        "g1", "move", {"name": "A", "position": 4},
    )
    assert reply == TextReply("Position must be between 1 and 3.")
    assert repository.records["g1"]["entries"] == ["A", "B", "C"]


async def test_move_requires_integer_position(store, repository):
    repository.seed("g1", ["A"])
    dispatch = CommandDispatch(store)
    for options in ({"name": "A"}, {"name": "A", "position": "1"}, {"name": "A", "position": True}):
        reply = await dispatch.execute("g1", "move", options)
        assert reply == TextReply(INVALID_POSITION_TYPE)


async def test_move_missing_name_is_invalid(store):
    reply = await CommandDispatch(store).execute("g1", "move", {"position": 1})
    assert reply == TextReply(INVALID_NAME)


# --- list / reset ------------------------------------------------------------

async def test_list_empty_roster(store):
    reply = await CommandDispatch(store).execute("g1", "list")
    assert isinstance(reply, ListReply)
    assert reply.title == "Roster"
    assert reply.body == EMPTY_LIST


async def test_list_shows_claims(store, repository):
    repository.seed("g1", ["A", "B"], claimed=["A"])
    reply = await CommandDispatch(store).execute("g1", "list", {})
    assert reply.body == "✅ A\n⬜ B"


async def test_reset_clears(store, repository):
    repository.seed("g1", ["A", "B"], claimed=["A"])
    reply = await CommandDispatch(store).execute("g1", "reset", {})
    assert reply == TextReply("Roster cleared.")
    assert repository.records["g1"] == {"entries": [], "claimed": []}


# --- show-panel --------------------------------------------------------------

async def test_show_panel_empty_roster_is_text(store):
    reply = await CommandDispatch(store).execute("g1", "show-panel", {})
    assert reply == TextReply(EMPTY_PANEL)


async def test_show_panel_splits_into_primary_and_follow_ups(store, repository):
    repository.seed("g1", [f"P{i}" for i in range(45)], claimed=["P20"])
    reply = await CommandDispatch(store).execute("g1", "show-panel", {})
    assert isinstance(reply, PanelReply)
    assert reply.primary.page_index == 0
    assert [p.page_index for p in reply.follow_ups] == [1, 2]
    second_page_first = reply.follow_ups[0].live_controls[0]
    assert second_page_first.custom_id == "toggle:20:chunk:1"
    assert second_page_first.claimed


async def test_show_panel_does_not_write(store, repository):
    repository.seed("g1", ["A"])
    await CommandDispatch(store).execute("g1", "show-panel", {})
    assert repository.saves == 0


# --- failures ----------------------------------------------------------------

async def test_storage_failure_returns_generic_message(failing_store):
    reply = await CommandDispatch(failing_store).execute("g1", "add", {"name": "A"})
    assert reply == TextReply(GENERIC_FAILURE)


async def test_unexpected_exception_returns_generic_message(store, monkeypatch):
    async def explode(group_id):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(store, "snapshot", explode)
    reply = await CommandDispatch(store).execute("g1", "list", {})
    assert reply == TextReply(GENERIC_FAILURE)


async def test_denial_log_carries_group_and_command(store, caplog):
    dispatch = CommandDispatch(store)
    await dispatch.execute("g4", "add", {"name": "A"})
    with caplog.at_level(logging.INFO, logger="rosterboard.services.command_dispatch"):
        await dispatch.execute("g4", "add", {"name": "A"})
    (record,) = [r for r in caplog.records if getattr(r, "error_code", None) == "DUPLICATE"]
    assert record.group_id == "g4"
    assert record.command == "add"


async def test_failure_log_carries_group_and_command(failing_store, caplog):
    with caplog.at_level(logging.ERROR, logger="rosterboard.services.command_dispatch"):
        await CommandDispatch(failing_store).execute("g5", "reset", {})
    (record,) = [r for r in caplog.records if getattr(r, "error_code", None) == "UNEXPECTED"]
    assert record.group_id == "g5"
    assert record.command == "reset"
    assert record.exc_info is not None
