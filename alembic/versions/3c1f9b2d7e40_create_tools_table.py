"""Create tools table

Revision ID: 3c1f9b2d7e40
Revises:
Create Date: 2026-10-19 10:02:11.418207

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f9b2d7e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tools",
        sa.Column("code", sa.String(length=10), nullable=False),
        sa.Column("tool_type", sa.String(length=30), nullable=False),
        sa.Column("brand", sa.String(length=30), nullable=False),
        sa.Column("daily_charge", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("weekday_charge", sa.Boolean(), nullable=False),
        sa.Column("weekend_charge", sa.Boolean(), nullable=False),
        sa.Column("holiday_charge", sa.Boolean(), nullable=False),
        sa.Column("available", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("code"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("tools")
