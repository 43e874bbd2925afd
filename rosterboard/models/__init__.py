"""ORM Models — SQLAlchemy declarative models for persisted roster state.

Invariants:
    - All models inherit from Base (db/base.py)
    - RosterRecord is keyed by group_id; groups share no rows

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is populated before create_all
"""

from rosterboard.models.roster import RosterRecord  # noqa: F401
