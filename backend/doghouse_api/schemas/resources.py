"""
Dog House API - Resource Schemas
================================

What:  Pydantic models defining the JSON representations of the resources.
How:   Base representations are validated straight from ORM rows
       (`from_attributes`). Embedded variants add exactly one level of
       related data and are assembled explicitly by the services:

           DogHouseWithReviews  = DogHouseResponse + reviews: [ReviewResponse]
           ReviewWithDogHouse   = ReviewResponse   + dog_house: DogHouseResponse

       Embedded children are never expanded further.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class DogHouseResponse(BaseModel):
    """A dog house without its reviews (used when embedded in a review)."""
    id: int = Field(description="Dog house identifier")
    name: str = Field(description="Listing name")
    address: Optional[str] = Field(default=None, description="Street address")
    description: Optional[str] = Field(default=None, description="Free-form description")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewResponse(BaseModel):
    """
    A review without its dog house.

    Returned by POST /reviews and embedded in DogHouse.show.
    """
    id: int = Field(description="Review identifier")
    username: str
    comment: str
    rating: int
    dog_house_id: int = Field(description="Identifier of the reviewed dog house")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DogHouseWithReviews(DogHouseResponse):
    """GET /dog_houses/{id}: the dog house and all of its reviews."""
    reviews: List[ReviewResponse] = Field(default_factory=list)


class ReviewWithDogHouse(ReviewResponse):
    """GET /reviews, /reviews/{id} and their nested forms."""
    dog_house: DogHouseResponse


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ReviewCreate(BaseModel):
    """
    Body of POST /reviews.

    Allow-list semantics: only these fields are read, anything else in the
    payload is dropped silently. `dog_house_id` is required so that every
    stored review references a dog house.
    """
    username: str
    comment: str
    rating: int
    dog_house_id: int

    model_config = ConfigDict(extra="ignore")
