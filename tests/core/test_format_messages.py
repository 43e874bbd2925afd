"""Format Messages tests — denials and listing text."""

from rosterboard.core.errors import (
    DuplicateEntryError, EntryNotFoundError, InvalidPositionError, StorageError,
)
from rosterboard.core.format_messages import (
    EMPTY_LIST, GENERIC_FAILURE, format_added, format_denial, format_moved,
    format_roster_list,
)
from rosterboard.core.roster_state import RosterSnapshot


def test_confirmations_quote_the_name():
    assert format_added("Anna") == "Added `Anna`."
    assert format_moved("Anna", 2) == "Moved `Anna` to position 2."


def test_duplicate_denial():
    assert format_denial(DuplicateEntryError("A")) == "`A` already exists."


def test_not_found_denial():
    assert format_denial(EntryNotFoundError("Z")) == "Could not find `Z`."


def test_invalid_position_denial_names_the_range():
    assert format_denial(InvalidPositionError(9, 3)) == "Position must be between 1 and 3."


def test_denial_never_exposes_error_codes():
    text = format_denial(StorageError("disk full", "save"))
    assert text == GENERIC_FAILURE
    assert "UNEXPECTED" not in text
    assert "disk full" not in text


def test_empty_roster_listing():
    assert format_roster_list(RosterSnapshot()) == EMPTY_LIST


def test_listing_marks_claimed_entries_in_order():
    snapshot = RosterSnapshot(entries=("A", "B", "C"), claimed=frozenset({"B"}))
    assert format_roster_list(snapshot) == "⬜ A\n✅ B\n⬜ C"
