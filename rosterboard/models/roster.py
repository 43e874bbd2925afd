"""Roster ORM — one row per group holding the whole roster.

Invariants:
    - group_id is the primary key (one roster per group)
    - entries is an ordered JSON array of unique names
    - claimed is a JSON array, subset of entries, stored in roster order

Design Decisions:
    - JSON columns over an entries table: the roster is always read and written whole
      (ADR: whole-snapshot persistence, no partial updates)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from rosterboard.db.base import Base


class RosterRecord(Base):
    """Persisted roster for one group."""
    __tablename__ = "rosters"

    group_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    entries: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    claimed: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
