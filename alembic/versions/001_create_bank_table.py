"""Create bank table with an ordered index on update_at.

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "bank",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("currency", sa.String(10), nullable=False),
        sa.Column("url", sa.Text, nullable=False, server_default=""),
        sa.Column("create_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("create_by", sa.String(200), nullable=False, server_default=""),
        sa.Column("update_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("update_by", sa.String(200), nullable=False, server_default=""),
        comment="Bank registry, paged by update_at",
    )

    # Serves both "update_at > :c ORDER BY update_at, id" and the DESC mirror
    op.create_index("idx_bank_update_at_id", "bank", ["update_at", "id"])


def downgrade() -> None:
    op.drop_index("idx_bank_update_at_id", table_name="bank")
    op.drop_table("bank")
