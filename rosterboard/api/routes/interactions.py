"""Interaction Routes — submit an opaque control identifier, receive the updated page.

Invariants:
    - Always 200: malformed ids reply "Could not update the panel.", reserved ids reply noop
    - A page_update reply holds exactly one page (the one that was clicked)

Design Decisions:
    - Decoding stays in core: the route never splits custom_id itself
"""

from fastapi import APIRouter, Depends, Path

from rosterboard.core.domain_types import GroupId
from rosterboard.schemas.command import InteractionRequest
from rosterboard.schemas.reply import ReplyResponse
from rosterboard.services.interaction_router import InteractionRouter
from rosterboard.api.dependencies import get_router

router = APIRouter(prefix="/api/v1/groups", tags=["interactions"])


@router.post("/{group_id}/interactions", response_model=ReplyResponse)
async def submit_interaction(
    body: InteractionRequest,
    group_id: str = Path(min_length=1, max_length=64),
    interactions: InteractionRouter = Depends(get_router),
):
    """Apply one control click for a group."""
    reply = await interactions.handle(GroupId(group_id), body.custom_id)
    return ReplyResponse.from_reply(reply)
