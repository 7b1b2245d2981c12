"""add_paste_table

Revision ID: 3f1a9c2e7b40
Revises:
Create Date: 2026-10-19 10:12:41.518204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "paste",
        sa.Column("key", sa.String(), nullable=False),
        sa.Column("delete_key", sa.String(), nullable=True),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("key"),
    )
    op.create_index("ix_paste_timestamp", "paste", ["timestamp"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_paste_timestamp", table_name="paste")
    op.drop_table("paste")
