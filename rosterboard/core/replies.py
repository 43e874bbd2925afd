"""Replies — render-or-text results returned to the delivery collaborator.

Invariants:
    - Every command yields exactly one Reply
    - PanelReply.pages[0] is the primary message; later pages are follow-ons, in order
    - PageUpdate replaces the message that held the clicked control

Design Decisions:
    - Frozen dataclasses, serialized by the API layer (ADR: core knows no JSON shapes)
    - ephemeral defaults to True: confirmations and denials go only to the caller
"""

from dataclasses import dataclass

from rosterboard.core.domain_types import LIST_COLOR
from rosterboard.core.render_page import PageLayout


@dataclass(frozen=True)
class TextReply:
    content: str
    ephemeral: bool = True


@dataclass(frozen=True)
class ListReply:
    """Embed-style roster listing."""
    title: str
    body: str
    color: int = LIST_COLOR
    ephemeral: bool = True


@dataclass(frozen=True)
class PanelReply:
    """Initial multi-page render — visible to the whole group."""
    pages: tuple[PageLayout, ...]

    @property
    def primary(self) -> PageLayout:
        return self.pages[0]

    @property
    def follow_ups(self) -> tuple[PageLayout, ...]:
        return self.pages[1:]


@dataclass(frozen=True)
class PageUpdate:
    page: PageLayout


Reply = TextReply | ListReply | PanelReply | PageUpdate
