"""Reply Schemas — wire shape of render-or-text results.

Invariants:
    - type discriminates the payload: text | list | panel | page_update | noop
    - Every page carries non-empty content (zero-width space) next to its rows
    - Controls serialize their encoded custom_id; filler ids are spacer:* and disabled

Design Decisions:
    - from_reply() is the single core → wire conversion (routes stay thin)
    - One flat model with optional fields over a union: simple for the delivery side
"""

from typing import Literal

from pydantic import BaseModel

from rosterboard.core.domain_types import BLANK_LABEL, ControlStyle
from rosterboard.core.render_page import PageLayout
from rosterboard.core.replies import ListReply, PageUpdate, PanelReply, Reply, TextReply


class ControlResponse(BaseModel):
    custom_id: str
    label: str
    style: ControlStyle
    disabled: bool = False


class PageResponse(BaseModel):
    page_index: int
    content: str = BLANK_LABEL
    rows: list[list[ControlResponse]]

    @classmethod
    def from_layout(cls, layout: PageLayout) -> "PageResponse":
        return cls(
            page_index=layout.page_index,
            rows=[
                [
                    ControlResponse(
                        custom_id=control.custom_id,
                        label=control.label,
                        style=control.style,
                        disabled=control.disabled,
                    )
                    for control in row
                ]
                for row in layout.rows
            ],
        )


class ReplyResponse(BaseModel):
    """Serialized Reply — pages[0] is primary for panels, the rest follow in order."""
    type: Literal["text", "list", "panel", "page_update", "noop"]
    content: str | None = None
    ephemeral: bool = False
    title: str | None = None
    body: str | None = None
    color: int | None = None
    pages: list[PageResponse] = []

    @classmethod
    def from_reply(cls, reply: Reply | None) -> "ReplyResponse":
        if reply is None:
            return cls(type="noop")
        if isinstance(reply, TextReply):
            return cls(type="text", content=reply.content, ephemeral=reply.ephemeral)
        if isinstance(reply, ListReply):
            return cls(
                type="list", title=reply.title, body=reply.body,
                color=reply.color, ephemeral=reply.ephemeral,
            )
        if isinstance(reply, PanelReply):
            return cls(
                type="panel",
                pages=[PageResponse.from_layout(page) for page in reply.pages],
            )
        if isinstance(reply, PageUpdate):
            return cls(
                type="page_update", pages=[PageResponse.from_layout(reply.page)],
            )
        raise TypeError(f"Unsupported reply type: {type(reply).__name__}")
