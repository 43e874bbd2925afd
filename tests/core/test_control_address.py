"""Control Address tests — typed variants at the identifier boundary."""

import pytest

from rosterboard.core.control_address import (
    ReservedControl, SpacerAddress, ToggleAddress,
    decode_control_id, encode_control_id,
)
from rosterboard.core.errors import BadAddressError


def test_encode_toggle_wire_format():
    assert encode_control_id(ToggleAddress(entry_index=7, page_index=0)) == "toggle:7:chunk:0"


def test_encode_spacer_wire_format():
    assert encode_control_id(SpacerAddress(page_index=1, slot=3)) == "spacer:1:3"


def test_decode_toggle():
    assert decode_control_id("toggle:21:chunk:1") == ToggleAddress(21, 1)


def test_decode_spacer_is_not_addressable():
    address = decode_control_id("spacer:0:2")
    assert address == SpacerAddress(0, 2)
    assert not address.is_addressable


def test_unknown_discriminant_is_reserved():
    address = decode_control_id("vote:1:chunk:0")
    assert address == ReservedControl("vote")
    assert not address.is_addressable


@pytest.mark.parametrize("custom_id", [
    "toggle:abc:chunk:0",
    "toggle:1:chunk:x",
    "toggle:1.5:chunk:0",
    "toggle:-1:chunk:0",
    "toggle:+1:chunk:0",
    "toggle: 1:chunk:0",
    "toggle::chunk:0",
])
def test_non_integer_index_fields_rejected(custom_id):
    with pytest.raises(BadAddressError):
        decode_control_id(custom_id)


@pytest.mark.parametrize("custom_id", [
    "toggle",
    "toggle:1",
    "toggle:1:chunk",
    "toggle:1:chunk:0:extra",
    "toggle:1:page:0",
    "spacer:0",
    "",
])
def test_malformed_shapes_rejected(custom_id):
    with pytest.raises(BadAddressError) as exc_info:
        decode_control_id(custom_id)
    assert exc_info.value.code == "BAD_ADDRESS"
    assert exc_info.value.custom_id == custom_id
