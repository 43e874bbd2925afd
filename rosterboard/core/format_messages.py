"""Format Messages — human-readable confirmations, denials and the roster listing.

Invariants:
    - Pure functions, no IO
    - Denials name the offending input but never expose error codes or internals
    - Names are wrapped in backticks so platform markdown shows them verbatim

Design Decisions:
    - One function per message over a template dict: call sites stay greppable
    - format_denial() is the single RosterError → text mapping used by the dispatcher
"""

from rosterboard.core.domain_types import CLAIMED_GLYPH, UNCLAIMED_GLYPH
from rosterboard.core.errors import (
    DuplicateEntryError, EntryNotFoundError, InvalidPositionError, RosterError,
)
from rosterboard.core.roster_state import RosterSnapshot

LIST_TITLE = "Roster"
EMPTY_LIST = "_(No entries added yet)_"
EMPTY_PANEL = "No entries added yet."
INVALID_NAME = "Invalid name."
INVALID_POSITION_TYPE = "Position must be a whole number."
ROSTER_CLEARED = "Roster cleared."
GENERIC_FAILURE = "Something went wrong. Check the log."
PANEL_UPDATE_FAILED = "Could not update the panel."


def format_added(name: str) -> str:
    return f"Added `{name}`."


def format_removed(name: str) -> str:
    return f"Removed `{name}`."


def format_moved(name: str, position: int) -> str:
    return f"Moved `{name}` to position {position}."


def format_unknown_command(command: str) -> str:
    return f"Unknown command `{command}`."


def format_denial(error: RosterError) -> str:
    """Short user-facing text for a user input error."""
    if isinstance(error, DuplicateEntryError):
        return f"`{error.name}` already exists."
    if isinstance(error, EntryNotFoundError):
        return f"Could not find `{error.name}`."
    if isinstance(error, InvalidPositionError):
        return f"Position must be between 1 and {error.length}."
    return GENERIC_FAILURE


def format_roster_list(snapshot: RosterSnapshot) -> str:
    """One line per entry with its claim glyph, in roster order."""
    if not snapshot.entries:
        return EMPTY_LIST
    return "\n".join(
        f"{CLAIMED_GLYPH if snapshot.is_claimed(name) else UNCLAIMED_GLYPH} {name}"
        for name in snapshot.entries
    )
