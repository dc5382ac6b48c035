"""Create pokemon table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `pokemon` table (id, name, type) and the name lookup index.
How:   Portable column types only, so the same revision runs on PostgreSQL
       and SQLite.

Rollback: downgrade() drops the table entirely (all records lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pokemon",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Database-assigned identity",
        ),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Pokemon name, used for exact-match lookups",
        ),
        sa.Column(
            "type",
            sa.String(100),
            nullable=False,
            comment="Free-form type label",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Non-unique: duplicate names are allowed
    op.create_index("idx_pokemon_name", "pokemon", ["name"])


def downgrade() -> None:
    op.drop_index("idx_pokemon_name", table_name="pokemon")
    op.drop_table("pokemon")
