"""add_tags_table

Revision ID: 3f1a9c2d7b40
Revises:
Create Date: 2026-10-18 10:12:41.508113

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create tags table with case-insensitive unique names."""
    op.create_table(
        "tags",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_tags_name_lower",
        "tags",
        [sa.text("lower(name)")],
        unique=True,
    )


def downgrade() -> None:
    """Drop tags table."""
    op.drop_index("uq_tags_name_lower", table_name="tags")
    op.drop_table("tags")
