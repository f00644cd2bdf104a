"""
Dog House API - Review Endpoints
================================

The same three endpoints serve the nested and the top-level review routes.
`list_reviews` receives the parent scope from the route table's binding
(None at /reviews); `show_review` has no use for it.
"""

from typing import List, Optional

from fastapi import Depends, Path

from doghouse_api.routes.scope import get_parent_scope
from doghouse_api.schemas.resources import ReviewCreate, ReviewResponse, ReviewWithDogHouse
from doghouse_api.services.review_service import review_service
from doghouse_api.store import Store, get_store


async def list_reviews(
    parent_id: Optional[str] = Depends(get_parent_scope),
    store: Store = Depends(get_store),
) -> List[ReviewWithDogHouse]:
    """List reviews, restricted to one dog house when reached through it."""
    return await review_service.index(store, parent_id=parent_id)


async def show_review(
    review_id: str = Path(alias="id", description="Review identifier"),
    store: Store = Depends(get_store),
) -> ReviewWithDogHouse:
    """Return one review with its dog house embedded."""
    return await review_service.show(store, review_id)


async def create_review(
    payload: ReviewCreate,
    store: Store = Depends(get_store),
) -> ReviewResponse:
    """Create a review. Fields outside the allow-list are ignored."""
    return await review_service.create(store, payload)
