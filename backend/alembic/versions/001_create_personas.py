"""Create personas table.

Revision ID: 001_create_personas
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_personas"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "personas",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(255), nullable=True),
        sa.Column("apellido", sa.String(255), nullable=True),
        sa.Column("edad", sa.Integer, nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("personas")
