"""create persons and skills

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

_Id = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "persons",
        sa.Column("id", _Id, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("display_name", sa.Text(), nullable=False),
    )
    op.create_table(
        "skills",
        sa.Column("id", _Id, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("level", sa.SmallInteger(), nullable=False),
        sa.Column(
            "person_id",
            _Id,
            sa.ForeignKey("persons.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_skills_person_id", "skills", ["person_id"])


def downgrade() -> None:
    op.drop_index("ix_skills_person_id", table_name="skills")
    op.drop_table("skills")
    op.drop_table("persons")
