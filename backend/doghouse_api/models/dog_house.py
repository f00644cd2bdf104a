"""
Dog House API - DogHouse SQLAlchemy Model
=========================================

What:  ORM model for the `dog_houses` table.
Who:   Read by the store for DogHouse.show and for embedding a review's
       dog house. Rows are created out of band (seed command, migrations).

A dog house owns zero or more reviews through `reviews.dog_house_id`.
No ORM relationship is declared: handlers fetch children with an explicit
query so nothing is ever lazy-loaded behind an await.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from doghouse_api.database import Base

# BIGINT on PostgreSQL; SQLite only autoincrements INTEGER primary keys
IdentifierType = BigInteger().with_variant(Integer(), "sqlite")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DogHouse(Base):
    """A dog house listing."""

    __tablename__ = "dog_houses"

    # Display name used in not-found messages
    display_name = "Dog house"

    id: Mapped[int] = mapped_column(
        IdentifierType,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Listing name",
    )

    address: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        default=None,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<DogHouse(id={self.id}, name='{self.name}')>"
