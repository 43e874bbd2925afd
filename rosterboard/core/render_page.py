"""Page Renderer — pure mapping from roster state + page range to a control grid.

Invariants:
    - One live control per index in [start, end), bound to (index, page_index)
    - Rows hold exactly ROW_WIDTH controls except that nothing pads a full page
    - A partial final row is padded with disabled SpacerAddress fillers only
      while the page has fewer than MAX_ROWS rows
    - Labels never exceed LABEL_MAX characters after the glyph prefix
    - No IO, no mutation of inputs

Design Decisions:
    - Returns plain dataclasses, not platform widgets: the API layer serializes
    - Fillers get unique spacer ids (page + slot) since platforms reject duplicate ids
"""

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from rosterboard.core.control_address import (
    SpacerAddress, ToggleAddress, encode_control_id,
)
from rosterboard.core.domain_types import (
    BLANK_LABEL, CLAIMED_GLYPH, ELLIPSIS, LABEL_MAX, MAX_ROWS, ROW_WIDTH,
    UNCLAIMED_GLYPH, ControlStyle,
)
from rosterboard.core.plan_pages import plan_pages
from rosterboard.core.roster_state import RosterSnapshot


@dataclass(frozen=True)
class ControlDescriptor:
    """One control on a page — live toggle or inert filler."""
    address: ToggleAddress | SpacerAddress
    label: str
    claimed: bool = False
    disabled: bool = False

    @property
    def is_addressable(self) -> bool:
        return self.address.is_addressable

    @property
    def style(self) -> ControlStyle:
        return ControlStyle.SUCCESS if self.claimed else ControlStyle.SECONDARY

    @property
    def custom_id(self) -> str:
        return encode_control_id(self.address)


@dataclass(frozen=True)
class PageLayout:
    """Rendered grid for one page."""
    page_index: int
    rows: tuple[tuple[ControlDescriptor, ...], ...] = ()

    @property
    def controls(self) -> list[ControlDescriptor]:
        return [control for row in self.rows for control in row]

    @property
    def live_controls(self) -> list[ControlDescriptor]:
        return [c for c in self.controls if c.is_addressable]


def truncate_label(name: str, limit: int = LABEL_MAX) -> str:
    """Cut name to limit chars, the ellipsis counted inside the budget."""
    if len(name) <= limit:
        return name
    return name[: limit - len(ELLIPSIS)] + ELLIPSIS


def build_label(name: str, claimed: bool) -> str:
    glyph = CLAIMED_GLYPH if claimed else UNCLAIMED_GLYPH
    return f"{glyph} {truncate_label(name)}"


def render_page(
    entries: Sequence[str],
    claimed: Collection[str],
    start: int,
    end: int,
    page_index: int,
) -> PageLayout:
    """Render entries[start:end] as rows of ROW_WIDTH controls."""
    rows: list[tuple[ControlDescriptor, ...]] = []
    row: list[ControlDescriptor] = []

    for index in range(start, end):
        name = entries[index]
        is_claimed = name in claimed
        row.append(ControlDescriptor(
            address=ToggleAddress(entry_index=index, page_index=page_index),
            label=build_label(name, is_claimed),
            claimed=is_claimed,
        ))
        if len(row) == ROW_WIDTH:
            rows.append(tuple(row))
            row = []
            if len(rows) == MAX_ROWS:
                break

    if row and len(rows) < MAX_ROWS:
        while len(row) < ROW_WIDTH:
            row.append(ControlDescriptor(
                address=SpacerAddress(page_index=page_index, slot=len(row)),
                label=BLANK_LABEL,
                disabled=True,
            ))
        rows.append(tuple(row))

    return PageLayout(page_index=page_index, rows=tuple(rows))


def render_panel(snapshot: RosterSnapshot) -> list[PageLayout]:
    """Render every planned page of snapshot in page order."""
    return [
        render_page(snapshot.entries, snapshot.claimed, page.start, page.end, index)
        for index, page in enumerate(plan_pages(len(snapshot)))
    ]
