"""
Dog House API - Review SQLAlchemy Model
=======================================

What:  ORM model for the `reviews` table.
Who:   Created by Review.create; read by Review.index/show and embedded in
       DogHouse.show.

Every review references exactly one dog house through `dog_house_id`.
`__parent_key__` names that column so the store can filter children by
parent without knowing about specific models.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from doghouse_api.database import Base
from doghouse_api.models.dog_house import IdentifierType, utcnow


class Review(Base):
    """A user's review of a dog house."""

    __tablename__ = "reviews"
    __parent_key__ = "dog_house_id"

    display_name = "Review"

    id: Mapped[int] = mapped_column(
        IdentifierType,
        primary_key=True,
        autoincrement=True,
    )

    username: Mapped[str] = mapped_column(String(255), nullable=False)

    comment: Mapped[str] = mapped_column(Text, nullable=False)

    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    dog_house_id: Mapped[int] = mapped_column(
        IdentifierType,
        ForeignKey("dog_houses.id"),
        nullable=False,
        index=True,
        comment="Owning dog house",
    )

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
        return (
            f"<Review(id={self.id}, dog_house_id={self.dog_house_id}, "
            f"rating={self.rating})>"
        )
