"""Rosters table — one whole-roster record per group.

Revision ID: 001_rosters
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_rosters"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "rosters",
        sa.Column("group_id", sa.String(64), primary_key=True),
        sa.Column("entries", sa.JSON, nullable=False),
        sa.Column("claimed", sa.JSON, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("rosters")
