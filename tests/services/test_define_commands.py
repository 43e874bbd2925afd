"""Command definitions — the published surface matches the dispatcher."""

from rosterboard.core.domain_types import CommandName
from rosterboard.services.command_dispatch import CommandDispatch
from rosterboard.services.define_commands import COMMANDS


def test_every_command_name_defined_once():
    names = [c["name"] for c in COMMANDS]
    assert sorted(names) == sorted(c.value for c in CommandName)
    assert len(names) == len(set(names))


def test_definitions_match_dispatcher(store):
    assert [c["name"] for c in COMMANDS] == CommandDispatch(store).command_names


def test_required_options():
    options = {c["name"]: {o["name"]: o for o in c["options"]} for c in COMMANDS}
    assert options["add"]["name"]["required"]
    assert options["remove"]["name"]["required"]
    assert options["move"]["position"]["type"] == "integer"
    assert options["list"] == {}
    assert options["show-panel"] == {}
