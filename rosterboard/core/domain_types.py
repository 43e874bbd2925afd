"""Domain Types — rich types and policy constants shared across the codebase.

Invariants:
    - GroupId wraps str — never pass a bare string where a group key is meant
    - PAGE_CAPACITY == ROW_WIDTH * MAX_ROWS (policy of the rendering layer, not per call)
    - All command names and control kinds encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: replies are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GroupId = NewType("GroupId", str)


# ─── Rendering Policy ────────────────────────────────────────────

ROW_WIDTH = 4
MAX_ROWS = 5
PAGE_CAPACITY = ROW_WIDTH * MAX_ROWS   # 20 controls per page
LABEL_MAX = 20                         # ellipsis counted inside the budget
ELLIPSIS = "…"
CLAIMED_GLYPH = "✅"
UNCLAIMED_GLYPH = "⬜"
BLANK_LABEL = "\u200b"                  # zero-width space: non-empty but invisible
LIST_COLOR = 0x2B2D31


# ─── Enums ───────────────────────────────────────────────────────

class CommandName(str, Enum):
    """Commands accepted by the dispatcher."""
    ADD = "add"
    REMOVE = "remove"
    LIST = "list"
    RESET = "reset"
    SHOW_PANEL = "show-panel"
    MOVE = "move"


class ControlKind(str, Enum):
    """Discriminant of an encoded control identifier."""
    TOGGLE = "toggle"
    SPACER = "spacer"


class ControlStyle(str, Enum):
    """Visual style of a control — claimed entries stand out."""
    SUCCESS = "success"
    SECONDARY = "secondary"
