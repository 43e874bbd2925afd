"""Command Routes — submit a command-with-arguments, receive a render-or-text result.

Invariants:
    - Body validated by CommandRequest before reaching the dispatcher
    - Always 200 with a ReplyResponse: denials are replies, not HTTP errors
    - group_id scopes every operation; groups share no state

Design Decisions:
    - Thin route: dispatch + serialize, nothing else (ADR: impureim sandwich)
    - GET /commands publishes the command surface for an external registrar
"""

import logging

from fastapi import APIRouter, Depends, Path

from rosterboard.core.domain_types import GroupId
from rosterboard.schemas.command import CommandRequest
from rosterboard.schemas.reply import ReplyResponse
from rosterboard.services.command_dispatch import CommandDispatch
from rosterboard.services.define_commands import COMMANDS
from rosterboard.api.dependencies import get_dispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["commands"])


@router.get("/commands")
async def list_commands():
    """Command definitions in platform registration format."""
    return {"commands": COMMANDS}


@router.post("/groups/{group_id}/commands", response_model=ReplyResponse)
async def submit_command(
    body: CommandRequest,
    group_id: str = Path(min_length=1, max_length=64),
    dispatch: CommandDispatch = Depends(get_dispatch),
):
    """Run one command for a group."""
    reply = await dispatch.execute(GroupId(group_id), body.command, body.options)
    return ReplyResponse.from_reply(reply)
