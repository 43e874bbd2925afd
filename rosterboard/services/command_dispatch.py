"""Command Dispatch — explicit routing from command name to roster handler.

Invariants:
    - Every command->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown commands return a text reply (never raises)
    - User input errors (Duplicate/NotFound/InvalidPosition) become short denials
    - Anything else is logged with traceback and surfaced as a generic failure
    - execute() always returns exactly one Reply

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Error conversion lives here, once, instead of in every handler
    - No retries: the user re-issues the command
"""

import logging

from rosterboard.core.domain_types import CommandName, GroupId
from rosterboard.core.errors import RosterError
from rosterboard.core.format_messages import (
    GENERIC_FAILURE, format_denial, format_unknown_command,
)
from rosterboard.core.replies import Reply, TextReply
from rosterboard.services.handle_roster import RosterCommandHandlers
from rosterboard.services.roster_store import RosterStore

logger = logging.getLogger(__name__)


class CommandDispatch:
    """Routes command name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, store: RosterStore):
        roster = RosterCommandHandlers(store)

        # ADR: every mapping explicit — adding a command requires editing this dict
        self._handlers = {
            CommandName.ADD.value: roster.add,
            CommandName.REMOVE.value: roster.remove,
            CommandName.LIST.value: roster.list,
            CommandName.RESET.value: roster.reset,
            CommandName.SHOW_PANEL.value: roster.show_panel,
            CommandName.MOVE.value: roster.move,
        }

    @property
    def command_names(self) -> list[str]:
        return list(self._handlers)

    async def execute(
        self, group_id: GroupId, command: str, options: dict | None = None,
    ) -> Reply:
        """Route command to handler. Returns a reply, never raises."""
        handler = self._handlers.get(command)
        log_extra = {"group_id": group_id, "command": command}
        if not handler:
            logger.info(f"Unknown command '{command}'", extra=log_extra)
            return TextReply(format_unknown_command(command))
        try:
            return await handler(group_id, options or {})
        except RosterError as e:
            e.context.command = command
            error_extra = {
                "group_id": e.context.group_id or group_id,
                "command": e.context.command,
                "error_code": e.code,
            }
            if e.is_user_error:
                logger.info(f"Command denied: {e.message}", extra=error_extra)
                return TextReply(format_denial(e))
            logger.error(
                f"Command failed: {e.message}", extra=error_extra, exc_info=True,
            )
            return TextReply(GENERIC_FAILURE)
        except Exception as e:
            logger.error(
                f"Unexpected error in command '{command}': {e}",
                extra={**log_extra, "error_code": "UNEXPECTED"}, exc_info=True,
            )
            return TextReply(GENERIC_FAILURE)
