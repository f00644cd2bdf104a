"""
Dog House API - Route Table
===========================

What:  The declarative (verb, path) → endpoint mapping for the resources.
How:   Each Route states its verb, path template, endpoint, name and the
       parent-scope parameter it injects (None for top-level routes).
       build_router() checks every entry and registers it on an APIRouter.

Nesting rule:
    A path may carry at most one parent-scope segment. Anything deeper,
    or a `{..._id}` segment the route does not declare, is rejected when the
    router is built, so a bad table fails at startup rather than per request.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from fastapi import APIRouter, Depends

from doghouse_api.routes import dog_houses, reviews
from doghouse_api.routes.scope import (
    bind_parent_scope,
    collection_path,
    member_path,
    nested_path,
    parent_param,
)
from doghouse_api.schemas.common import ErrorResponse
from doghouse_api.schemas.resources import (
    DogHouseWithReviews,
    ReviewResponse,
    ReviewWithDogHouse,
)

_PATH_PARAM = re.compile(r"{(\w+)(?::\w+)?}")

NOT_FOUND = {404: {"description": "Not found", "model": ErrorResponse}}


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    name: str
    parent_param: Optional[str] = None
    status_code: int = 200
    response_model: Any = None
    summary: Optional[str] = None
    tags: Sequence[str] = ()
    responses: Dict[int, Dict[str, Any]] = field(default_factory=dict)


def path_params(path: str) -> List[str]:
    return _PATH_PARAM.findall(path)


def check_route(route: Route) -> None:
    """
    Enforce the one-level nesting rule for a single table entry.

    Raises:
        ValueError: more than one parent segment, or a parent segment that
                    does not match the declared parent_param
    """
    scopes = [name for name in path_params(route.path) if name != "id"]
    if len(scopes) > 1:
        raise ValueError(
            f"Route '{route.name}' nests more than one level deep: {route.path}"
        )
    declared = [route.parent_param] if route.parent_param else []
    if scopes != declared:
        raise ValueError(
            f"Route '{route.name}' declares parent scope {route.parent_param!r} "
            f"but its path {route.path} carries {scopes or 'none'}"
        )


DOG_HOUSES = "dog_houses"
REVIEWS = "reviews"

ROUTES: Sequence[Route] = (
    Route(
        "GET", member_path(DOG_HOUSES), dog_houses.show_dog_house, "dog_houses.show",
        response_model=DogHouseWithReviews,
        summary="Get a dog house with its reviews",
        tags=["Dog Houses"],
        responses=NOT_FOUND,
    ),
    Route(
        "GET", nested_path(DOG_HOUSES, REVIEWS), reviews.list_reviews, "dog_house_reviews.index",
        parent_param=parent_param(DOG_HOUSES),
        response_model=List[ReviewWithDogHouse],
        summary="List the reviews of one dog house",
        tags=["Reviews"],
        responses=NOT_FOUND,
    ),
    Route(
        "GET", nested_path(DOG_HOUSES, REVIEWS, member=True), reviews.show_review,
        "dog_house_reviews.show",
        parent_param=parent_param(DOG_HOUSES),
        response_model=ReviewWithDogHouse,
        summary="Get a review through its dog house",
        tags=["Reviews"],
        responses=NOT_FOUND,
    ),
    Route(
        "GET", collection_path(REVIEWS), reviews.list_reviews, "reviews.index",
        response_model=List[ReviewWithDogHouse],
        summary="List all reviews",
        tags=["Reviews"],
    ),
    Route(
        "GET", member_path(REVIEWS), reviews.show_review, "reviews.show",
        response_model=ReviewWithDogHouse,
        summary="Get a review",
        tags=["Reviews"],
        responses=NOT_FOUND,
    ),
    Route(
        "POST", collection_path(REVIEWS), reviews.create_review, "reviews.create",
        status_code=201,
        response_model=ReviewResponse,
        summary="Create a review",
        tags=["Reviews"],
        responses={422: {"description": "Invalid review", "model": ErrorResponse}},
    ),
)


def build_router(routes: Sequence[Route] = ROUTES) -> APIRouter:
    """Check every route and register it on a new APIRouter."""
    router = APIRouter()
    for route in routes:
        check_route(route)
        dependencies = []
        if route.parent_param:
            dependencies.append(Depends(bind_parent_scope(route.parent_param)))
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            name=route.name,
            status_code=route.status_code,
            response_model=route.response_model,
            summary=route.summary,
            tags=list(route.tags),
            responses=dict(route.responses),
            dependencies=dependencies,
        )
    return router
