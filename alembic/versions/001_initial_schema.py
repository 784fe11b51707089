"""Initial schema — technician roster and postal → region mapping.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Technician roster
    op.create_table(
        "technicians",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("tech_id", sa.String(50), unique=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("region", sa.String(10), nullable=True),
        sa.Column("postal", sa.String(10), nullable=True),
    )
    op.create_index("idx_technicians_postal", "technicians", ["postal"])

    # Optional postal → province/state mapping
    op.create_table(
        "postal_regions",
        sa.Column("postal", sa.String(10), primary_key=True),
        sa.Column("region", sa.String(10), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("postal_regions")
    op.drop_index("idx_technicians_postal", table_name="technicians")
    op.drop_table("technicians")
