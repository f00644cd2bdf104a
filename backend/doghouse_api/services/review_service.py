"""
Dog House API - Review Resource Handler
=======================================

What:  list, single-item and create operations for reviews.
Who:   Called by both the nested (/dog_houses/{dog_house_id}/reviews...) and
       the top-level (/reviews...) endpoints.

The parent scope arrives as an optional argument; `index` is the only place
that branches on it. `show` ignores the access path entirely, so a review
renders identically whichever route reached it.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from doghouse_api.exceptions import DatabaseError, NotFoundError, ValidationError
from doghouse_api.models import DogHouse, Review
from doghouse_api.schemas.resources import ReviewCreate, ReviewResponse, ReviewWithDogHouse
from doghouse_api.services.rendering import (
    render_review,
    render_review_with_dog_house,
    render_reviews_with_dog_houses,
)
from doghouse_api.store import Store

logger = logging.getLogger(__name__)


class ReviewService:
    """Handler for reviews. Stateless; one shared instance."""

    async def index(
        self,
        store: Store,
        parent_id: Optional[Any] = None,
    ) -> List[ReviewWithDogHouse]:
        """
        List reviews, each with its dog house embedded, in id order.

        With `parent_id`: only reviews of that dog house; NotFoundError if
        the dog house does not exist. Without: every review in the store.
        """
        try:
            if parent_id is not None:
                dog_house = await store.find(DogHouse, parent_id)
                if dog_house is None:
                    logger.warning("Dog house %s not found", parent_id)
                    raise NotFoundError(DogHouse.display_name, parent_id)
                reviews = await store.find_all_where(Review, dog_house.id)
                dog_houses = {dog_house.id: dog_house}
            else:
                reviews = await store.find_all(Review)
                dog_houses = await store.find_many(
                    DogHouse, {review.dog_house_id for review in reviews}
                )

            orphans = [r.id for r in reviews if dog_houses.get(r.dog_house_id) is None]
            if orphans:
                # Only reachable when the database does not enforce the foreign key
                raise DatabaseError(
                    message="Could not retrieve reviews. Please try again.",
                    context={"review_ids": orphans},
                )
            return render_reviews_with_dog_houses(reviews, dog_houses)

        except SQLAlchemyError as e:
            logger.error("Database error listing reviews: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve reviews. Please try again.",
                context={"parent_id": parent_id, "error_type": type(e).__name__},
            )

    async def show(self, store: Store, review_id: Any) -> ReviewWithDogHouse:
        """
        Return one review with its dog house embedded.

        Raises:
            NotFoundError: no review has that identifier (→ 404)
        """
        try:
            review = await store.find(Review, review_id)
            if review is None:
                logger.warning("Review %s not found", review_id)
                raise NotFoundError(Review.display_name, review_id)

            dog_house = await store.find(DogHouse, review.dog_house_id)
            if dog_house is None:
                # Only reachable when the database does not enforce the foreign key
                raise DatabaseError(
                    message="Could not retrieve the review. Please try again.",
                    context={"review_id": review.id, "dog_house_id": review.dog_house_id},
                )
            return render_review_with_dog_house(review, dog_house)

        except SQLAlchemyError as e:
            logger.error("Database error fetching review %s: %s", review_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the review. Please try again.",
                context={"review_id": str(review_id), "error_type": type(e).__name__},
            )

    async def create(self, store: Store, payload: ReviewCreate) -> ReviewResponse:
        """
        Create a review from the allow-listed fields of `payload`.

        Raises:
            ValidationError: dog_house_id references no dog house (→ 422)
            DatabaseError: the insert failed (→ 500)
        """
        fields = payload.model_dump(include={"username", "comment", "rating", "dog_house_id"})
        try:
            if await store.find(DogHouse, fields["dog_house_id"]) is None:
                raise ValidationError(
                    message="Dog house must exist",
                    field="dog_house_id",
                    context={"dog_house_id": fields["dog_house_id"]},
                )

            review = await store.create(Review, fields)
            logger.info(
                "Review %s created for dog house %s by %s",
                review.id,
                review.dog_house_id,
                review.username,
            )
            return render_review(review)

        except SQLAlchemyError as e:
            logger.error("Database error creating review: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the review. Please try again.",
                context={"error_type": type(e).__name__},
            )


review_service = ReviewService()
