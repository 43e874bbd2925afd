"""Interaction Router — control click → decode → toggle → re-render the owning page.

Invariants:
    - Stateless across events: Idle → Decoding → Mutating → Rendering → Idle
    - Malformed identifiers (BadAddressError) never mutate; reply "Could not update the panel."
    - Stale index (entry gone): no mutation and no write, still re-render current
      truth for that page
    - Page plan recomputed from the post-mutation length; missing page → empty [0, 0)
    - Only the originating page is rendered; other displayed pages stay stale

Design Decisions:
    - Stale clicks are a policy, not a fault: fresh truth beats a stale-click error
    - Reserved discriminants (spacer, unknown) return None — the caller acknowledges
      without touching the displayed message
    - Mutation and snapshot happen under ONE store lock; rendering is pure and
      runs after the lock is released
"""

import logging

from rosterboard.core.control_address import ToggleAddress, decode_control_id
from rosterboard.core.domain_types import GroupId
from rosterboard.core.errors import RosterError
from rosterboard.core.format_messages import PANEL_UPDATE_FAILED
from rosterboard.core.plan_pages import page_for, plan_pages
from rosterboard.core.render_page import render_page
from rosterboard.core.replies import PageUpdate, Reply, TextReply
from rosterboard.services.roster_store import RosterStore

logger = logging.getLogger(__name__)


class InteractionRouter:
    """Handles control events for one process; holds no per-event state."""

    def __init__(self, store: RosterStore):
        self.store = store

    async def handle(self, group_id: GroupId, custom_id: str) -> Reply | None:
        """Apply one control event. None means the control kind is ignored."""
        log_extra = {"group_id": group_id, "custom_id": custom_id}
        try:
            # ── PURE: decode ──
            address = decode_control_id(custom_id)
            if not isinstance(address, ToggleAddress):
                logger.debug("Ignoring reserved control", extra=log_extra)
                return None

            # ── IMPURE: mutate + snapshot atomically ──
            mutated, snapshot = await self.store.toggle_claim_at(
                group_id, address.entry_index,
            )
            if not mutated:
                logger.info(
                    f"Stale control address {address.entry_index}, re-rendering only",
                    extra={**log_extra, "page_index": address.page_index},
                )

            # ── PURE: re-plan and render the originating page ──
            page = page_for(plan_pages(len(snapshot)), address.page_index)
            layout = render_page(
                snapshot.entries, snapshot.claimed,
                page.start, page.end, address.page_index,
            )
            return PageUpdate(page=layout)
        except RosterError as e:
            e.context.custom_id = custom_id
            error_extra = {
                "group_id": e.context.group_id or group_id,
                "custom_id": e.context.custom_id,
                "error_code": e.code,
            }
            if e.is_user_error:
                logger.warning(f"Dropping control event: {e.message}", extra=error_extra)
            else:
                logger.error(
                    f"Control event failed: {e.message}",
                    extra=error_extra, exc_info=True,
                )
            return TextReply(PANEL_UPDATE_FAILED)
        except Exception as e:
            logger.error(
                f"Unexpected error handling control: {e}",
                extra={**log_extra, "error_code": "UNEXPECTED"}, exc_info=True,
            )
            return TextReply(PANEL_UPDATE_FAILED)
