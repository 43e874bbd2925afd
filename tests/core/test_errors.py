"""Error hierarchy tests — codes, categories and the REST envelope."""

from rosterboard.core.errors import (
    BadAddressError, DuplicateEntryError, EntryNotFoundError, ErrorCategory,
    ErrorContext, InvalidPositionError, RosterError, StorageError,
)


def test_user_errors_are_400_level():
    for error in (
        DuplicateEntryError("A"),
        EntryNotFoundError("A"),
        InvalidPositionError(0, 3),
        BadAddressError("x", "bad"),
    ):
        assert isinstance(error, RosterError)
        assert error.is_user_error


def test_storage_error_is_unexpected():
    error = StorageError("boom", "save")
    assert error.code == "UNEXPECTED"
    assert error.category == ErrorCategory.DATABASE
    assert not error.is_user_error


def test_to_response_envelope_carries_context():
    error = EntryNotFoundError("A", ErrorContext(group_id="g1", command="remove"))
    body = error.to_response()["error"]
    assert body["code"] == "NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["context"]["group_id"] == "g1"
    assert body["context"]["command"] == "remove"


def test_bad_address_records_custom_id_in_context():
    error = BadAddressError("toggle:x", "not an integer")
    assert error.context.custom_id == "toggle:x"
