"""Inbound Schemas — typed command and control events at the API boundary.

Invariants:
    - CommandRequest.command: 1-64 chars; unknown names are the dispatcher's concern
    - options values are strict str or int (bools and floats rejected)
    - InteractionRequest.custom_id: at most 100 chars (platform limit); decoding
      happens in core/control_address.py, not here

Design Decisions:
    - Strict types so "position": true never reaches the store as 1
    - Argument presence/emptiness validated by handlers: the same rules apply to
      every transport, not just HTTP
"""

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


class CommandRequest(BaseModel):
    """A command with its named options, e.g. {"command": "move", "options": {"name": "A", "position": 1}}."""
    command: str = Field(min_length=1, max_length=64)
    options: dict[str, StrictStr | StrictInt] = Field(default_factory=dict)

    @field_validator("command")
    @classmethod
    def strip_command(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("command cannot be empty or whitespace")
        return v


class InteractionRequest(BaseModel):
    """A click on a previously rendered control."""
    custom_id: str = Field(max_length=100)
