"""
Dog House API - Route Table Tests
=================================

What:  The explicit routing table: naming convention for parent-scope
       parameters, path templates, the one-level nesting rule, and the
       registered (verb, path) → endpoint mapping.
"""

import pytest
from fastapi.routing import APIRoute

from doghouse_api.routes import dog_houses, reviews
from doghouse_api.routes.scope import (
    collection_path,
    member_path,
    nested_path,
    parent_param,
    singular,
)
from doghouse_api.routes.table import ROUTES, Route, build_router, check_route


class TestNamingConvention:

    @pytest.mark.parametrize("collection, expected", [
        ("dog_houses", "dog_house"),
        ("reviews", "review"),
        ("categories", "category"),
        ("sheep", "sheep"),
    ])
    def test_singular(self, collection, expected):
        assert singular(collection) == expected

    def test_parent_param_is_distinct_from_id(self):
        assert parent_param("dog_houses") == "dog_house_id"
        assert parent_param("dog_houses") != "id"

    def test_paths(self):
        assert collection_path("reviews") == "/reviews"
        assert member_path("dog_houses") == "/dog_houses/{id}"
        assert nested_path("dog_houses", "reviews") == "/dog_houses/{dog_house_id}/reviews"
        assert (
            nested_path("dog_houses", "reviews", member=True)
            == "/dog_houses/{dog_house_id}/reviews/{id}"
        )


class TestNestingRule:

    def test_rejects_two_levels(self):
        route = Route(
            "GET",
            "/cities/{city_id}/dog_houses/{dog_house_id}/reviews",
            reviews.list_reviews,
            "too_deep",
            parent_param="dog_house_id",
        )
        with pytest.raises(ValueError, match="more than one level"):
            check_route(route)

    def test_rejects_undeclared_parent_segment(self):
        route = Route("GET", "/dog_houses/{dog_house_id}/reviews", reviews.list_reviews, "undeclared")
        with pytest.raises(ValueError, match="declares parent scope None"):
            check_route(route)

    def test_rejects_parent_missing_from_path(self):
        route = Route("GET", "/reviews", reviews.list_reviews, "bad", parent_param="dog_house_id")
        with pytest.raises(ValueError):
            check_route(route)

    def test_build_router_fails_on_bad_table(self):
        bad = Route("GET", "/a/{a_id}/b/{b_id}/c", reviews.list_reviews, "bad", parent_param="b_id")
        with pytest.raises(ValueError):
            build_router(list(ROUTES) + [bad])

    def test_every_declared_route_passes(self):
        for route in ROUTES:
            check_route(route)


class TestRouteTable:

    def test_table_contents(self):
        table = {(r.method, r.path): (r.endpoint, r.parent_param) for r in ROUTES}
        assert table == {
            ("GET", "/dog_houses/{id}"): (dog_houses.show_dog_house, None),
            ("GET", "/dog_houses/{dog_house_id}/reviews"): (reviews.list_reviews, "dog_house_id"),
            ("GET", "/dog_houses/{dog_house_id}/reviews/{id}"): (reviews.show_review, "dog_house_id"),
            ("GET", "/reviews"): (reviews.list_reviews, None),
            ("GET", "/reviews/{id}"): (reviews.show_review, None),
            ("POST", "/reviews"): (reviews.create_review, None),
        }

    def test_build_router_registers_every_route(self):
        router = build_router()
        registered = {
            (method, route.path)
            for route in router.routes
            if isinstance(route, APIRoute)
            for method in route.methods
        }
        assert registered == {(r.method, r.path) for r in ROUTES}

    def test_nested_routes_get_a_scope_binding(self):
        router = build_router()
        by_name = {route.name: route for route in router.routes}
        assert len(by_name["dog_house_reviews.index"].dependencies) == 1
        assert len(by_name["dog_house_reviews.show"].dependencies) == 1
        assert by_name["reviews.index"].dependencies == []

    def test_create_returns_created_status(self):
        router = build_router()
        create = next(r for r in router.routes if r.name == "reviews.create")
        assert create.status_code == 201
