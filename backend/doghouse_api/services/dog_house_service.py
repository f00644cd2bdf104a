"""
Dog House API - DogHouse Resource Handler
=========================================

What:  Single-item retrieval of a dog house with its reviews embedded.
Who:   Called by GET /dog_houses/{id}.

Query plan:
    SELECT * FROM dog_houses WHERE id = :id
    SELECT * FROM reviews WHERE dog_house_id = :id ORDER BY id
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from doghouse_api.exceptions import DatabaseError, NotFoundError
from doghouse_api.models import DogHouse, Review
from doghouse_api.schemas.resources import DogHouseWithReviews
from doghouse_api.services.rendering import render_dog_house_with_reviews
from doghouse_api.store import Store

logger = logging.getLogger(__name__)


class DogHouseService:
    """Read-only handler for dog houses. Stateless; one shared instance."""

    async def show(self, store: Store, dog_house_id: Any) -> DogHouseWithReviews:
        """
        Return one dog house and exactly the reviews that reference it.

        Raises:
            NotFoundError: no dog house has that identifier (→ 404)
            DatabaseError: a query failed (→ 500)
        """
        try:
            dog_house = await store.find(DogHouse, dog_house_id)
            if dog_house is None:
                logger.warning("Dog house %s not found", dog_house_id)
                raise NotFoundError(DogHouse.display_name, dog_house_id)

            reviews = await store.find_all_where(Review, dog_house.id)
            return render_dog_house_with_reviews(dog_house, reviews)

        except SQLAlchemyError as e:
            logger.error("Database error fetching dog house %s: %s", dog_house_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the dog house. Please try again.",
                context={"dog_house_id": str(dog_house_id), "error_type": type(e).__name__},
            )


dog_house_service = DogHouseService()
