"""Inbound schema tests — command and interaction bodies."""

import pytest
from pydantic import ValidationError

from rosterboard.schemas.command import CommandRequest, InteractionRequest


def test_command_is_stripped():
    assert CommandRequest(command="  add ").command == "add"


def test_options_default_empty():
    assert CommandRequest(command="list").options == {}


def test_options_accept_str_and_int():
    request = CommandRequest(command="move", options={"name": "A", "position": 2})
    assert request.options == {"name": "A", "position": 2}


@pytest.mark.parametrize("value", [True, 1.5, None, ["A"]])
def test_options_reject_other_types(value):
    with pytest.raises(ValidationError):
        CommandRequest(command="move", options={"position": value})


@pytest.mark.parametrize("command", ["", "   ", "x" * 65])
def test_command_rejects_blank_and_oversized(command):
    with pytest.raises(ValidationError):
        CommandRequest(command=command)


def test_interaction_custom_id_limit():
    assert InteractionRequest(custom_id="toggle:0:chunk:0").custom_id == "toggle:0:chunk:0"
    with pytest.raises(ValidationError):
        InteractionRequest(custom_id="t" * 101)
