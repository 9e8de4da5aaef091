"""Create mazes table.

Revision ID: 001_mazes
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_mazes"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "mazes",
        sa.Column("id", sa.String(14), primary_key=True),
        sa.Column("grid_size", sa.Integer, nullable=False),
        sa.Column("start_node", sa.JSON, nullable=False),
        sa.Column("end_node", sa.JSON, nullable=False),
        sa.Column("walls", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("mazes")
