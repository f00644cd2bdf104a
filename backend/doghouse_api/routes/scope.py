"""
Dog House API - Parent Scope Binding
====================================

What:  Naming convention and request binding for parent-scope parameters.
How:   A nested route declares the path parameter that carries its parent's
       identifier (e.g. `dog_house_id`). The route table attaches
       `bind_parent_scope(<name>)` to that route; the dependency reads the
       parameter and stores it on the request. Endpoints shared by nested and
       top-level routes read it back with `get_parent_scope`, which yields
       None on top-level routes.
"""

from typing import Any, Callable, Optional

from fastapi import Path, Request


def singular(collection: str) -> str:
    """dog_houses → dog_house, categories → category, sheep → sheep."""
    if collection.endswith("ies"):
        return collection[:-3] + "y"
    if collection.endswith("s"):
        return collection[:-1]
    return collection


def parent_param(collection: str) -> str:
    """Name of the path parameter holding a `collection` member's id."""
    return f"{singular(collection)}_id"


def collection_path(collection: str) -> str:
    return f"/{collection}"


def member_path(collection: str) -> str:
    return f"/{collection}/{{id}}"


def nested_path(parent: str, child: str, member: bool = False) -> str:
    """
    Path template for `child` scoped under one `parent` member.

        nested_path("dog_houses", "reviews")        → /dog_houses/{dog_house_id}/reviews
        nested_path("dog_houses", "reviews", True)  → /dog_houses/{dog_house_id}/reviews/{id}
    """
    path = f"/{parent}/{{{parent_param(parent)}}}/{child}"
    if member:
        path += "/{id}"
    return path


def bind_parent_scope(param: str) -> Callable[..., Any]:
    """Dependency that copies path parameter `param` into the request's parent scope."""

    async def dependency(
        request: Request,
        value: str = Path(alias=param, description="Identifier of the parent resource"),
    ) -> None:
        request.state.parent_scope = value

    dependency.__name__ = f"bind_{param}"
    return dependency


async def get_parent_scope(request: Request) -> Optional[str]:
    """The parent identifier bound for this request, or None on top-level routes."""
    return getattr(request.state, "parent_scope", None)
