"""
Dog House API - Response Shaping
================================

Assembles embedded representations from rows that were fetched explicitly.
No relationship traversal happens here; callers pass every related row in.
"""

from typing import Iterable, List, Mapping

from doghouse_api.models import DogHouse, Review
from doghouse_api.schemas.resources import (
    DogHouseResponse,
    DogHouseWithReviews,
    ReviewResponse,
    ReviewWithDogHouse,
)


def render_review(review: Review) -> ReviewResponse:
    return ReviewResponse.model_validate(review)


def render_review_with_dog_house(review: Review, dog_house: DogHouse) -> ReviewWithDogHouse:
    return ReviewWithDogHouse(
        **render_review(review).model_dump(),
        dog_house=DogHouseResponse.model_validate(dog_house),
    )


def render_reviews_with_dog_houses(
    reviews: Iterable[Review],
    dog_houses: Mapping[int, DogHouse],
) -> List[ReviewWithDogHouse]:
    """Embed each review's dog house, looked up in `dog_houses` by id."""
    return [
        render_review_with_dog_house(review, dog_houses[review.dog_house_id])
        for review in reviews
    ]


def render_dog_house_with_reviews(
    dog_house: DogHouse,
    reviews: Iterable[Review],
) -> DogHouseWithReviews:
    return DogHouseWithReviews(
        **DogHouseResponse.model_validate(dog_house).model_dump(),
        reviews=[render_review(review) for review in reviews],
    )
