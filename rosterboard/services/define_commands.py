"""Command Definitions — the command surface in platform registration format.

Invariants:
    - One definition per CommandName, same order the dispatcher registers them
    - Options marked required=True are validated by the handlers, not trusted
    - Definitions are static data: publishing them to a platform happens elsewhere

Design Decisions:
    - Plain dicts mirroring the platform's slash-command JSON: an external registrar
      can PUT them verbatim (GET /api/v1/commands)
"""

from rosterboard.core.domain_types import CommandName

COMMANDS = [
    {
        "name": CommandName.ADD.value,
        "description": "Add an entry to the roster",
        "options": [
            {
                "name": "name",
                "type": "string",
                "required": True,
                "description": "Entry name",
            },
        ],
    },
    {
        "name": CommandName.REMOVE.value,
        "description": "Remove an entry from the roster",
        "options": [
            {
                "name": "name",
                "type": "string",
                "required": True,
                "description": "Entry name (exact match)",
            },
        ],
    },
    {
        "name": CommandName.LIST.value,
        "description": "Show the roster",
        "options": [],
    },
    {
        "name": CommandName.RESET.value,
        "description": "Clear all entries and claims",
        "options": [],
    },
    {
        "name": CommandName.SHOW_PANEL.value,
        "description": "Show every entry as a toggle button (20 per message)",
        "options": [],
    },
    {
        "name": CommandName.MOVE.value,
        "description": "Move an entry to another position",
        "options": [
            {
                "name": "name",
                "type": "string",
                "required": True,
                "description": "Entry name",
            },
            {
                "name": "position",
                "type": "integer",
                "required": True,
                "description": "New position (1 = top)",
            },
        ],
    },
]
