"""
Dog House API - DogHouse Endpoints
==================================

Registered by the route table at GET /dog_houses/{id}.
"""

from fastapi import Depends, Path

from doghouse_api.schemas.resources import DogHouseWithReviews
from doghouse_api.services.dog_house_service import dog_house_service
from doghouse_api.store import Store, get_store


async def show_dog_house(
    dog_house_id: str = Path(alias="id", description="Dog house identifier"),
    store: Store = Depends(get_store),
) -> DogHouseWithReviews:
    """Return a dog house with its reviews embedded."""
    return await dog_house_service.show(store, dog_house_id)
