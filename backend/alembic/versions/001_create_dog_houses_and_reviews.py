"""Create dog_houses and reviews tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the two resource tables and the reviews → dog_houses
       foreign key, with an index on reviews.dog_house_id for the nested
       listing query.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

IdentifierType = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def timestamps():
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "dog_houses",
        sa.Column("id", IdentifierType, autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False, comment="Listing name"),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "reviews",
        sa.Column("id", IdentifierType, autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("dog_house_id", IdentifierType, nullable=False, comment="Owning dog house"),
        *timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dog_house_id"], ["dog_houses.id"]),
    )

    op.create_index("ix_reviews_dog_house_id", "reviews", ["dog_house_id"])


def downgrade() -> None:
    op.drop_index("ix_reviews_dog_house_id", table_name="reviews")
    op.drop_table("reviews")
    op.drop_table("dog_houses")
