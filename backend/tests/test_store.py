"""
Dog House API - Store Tests
===========================

What:  Store queries against a real (temporary SQLite) database.
"""

import pytest

from doghouse_api.models import DogHouse, Review
from doghouse_api.store import Store, parse_identifier


class TestParseIdentifier:

    @pytest.mark.parametrize("value, expected", [
        ("1", 1),
        (" 42 ", 42),
        (7, 7),
        ("abc", None),
        ("1.5", None),
        ("-3", None),
        ("0", None),
        ("", None),
        (True, None),
        ("²", None),
        ("9" * 30, None),
        (2**63, None),
        (str(2**63 - 1), 2**63 - 1),
    ])
    def test_parse_identifier(self, value, expected):
        assert parse_identifier(value) == expected


class TestStoreQueries:

    @pytest.mark.asyncio
    async def test_find(self, seeded):
        async with seeded() as session:
            store = Store(session)
            dog_house = await store.find(DogHouse, "1")
            assert dog_house.name == "Cozy Kennel"
            assert await store.find(DogHouse, "999") is None
            assert await store.find(Review, "not-a-number") is None

    @pytest.mark.asyncio
    async def test_find_all_is_in_id_order(self, seeded):
        async with seeded() as session:
            reviews = await Store(session).find_all(Review)
            assert [r.id for r in reviews] == [10, 11, 12]

    @pytest.mark.asyncio
    async def test_find_all_where_filters_by_parent(self, seeded):
        async with seeded() as session:
            store = Store(session)
            assert [r.id for r in await store.find_all_where(Review, 1)] == [10, 11]
            assert [r.id for r in await store.find_all_where(Review, "2")] == [12]
            assert await store.find_all_where(Review, 3) == []

    @pytest.mark.asyncio
    async def test_find_all_where_requires_parent_key(self, seeded):
        async with seeded() as session:
            with pytest.raises(TypeError):
                await Store(session).find_all_where(DogHouse, 1)

    @pytest.mark.asyncio
    async def test_find_many(self, seeded):
        async with seeded() as session:
            found = await Store(session).find_many(DogHouse, [1, 2, 2, 99])
            assert sorted(found) == [1, 2]
            assert found[2].name == "Doggie Condo"
            assert await Store(session).find_many(DogHouse, []) == {}

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, seeded):
        async with seeded() as session:
            review = await Store(session).create(Review, {
                "username": "rex",
                "comment": "Roomy.",
                "rating": 3,
                "dog_house_id": 2,
            })
            await session.commit()

        assert review.id is not None
        assert review.created_at is not None

        async with seeded() as session:
            stored = await Store(session).find(Review, review.id)
            assert stored.username == "rex"
            assert stored.dog_house_id == 2
