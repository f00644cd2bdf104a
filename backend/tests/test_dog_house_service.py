"""
Dog House API - DogHouse Handler Unit Tests
===========================================
"""

import pytest

from doghouse_api.exceptions import NotFoundError
from doghouse_api.models import DogHouse, Review
from doghouse_api.services.dog_house_service import DogHouseService


class TestDogHouseServiceShow:

    def setup_method(self):
        self.service = DogHouseService()

    @pytest.mark.asyncio
    async def test_show_embeds_reviews(self, mock_store, make_dog_house, make_review):
        mock_store.find.return_value = make_dog_house(id=1)
        mock_store.find_all_where.return_value = [make_review(id=10), make_review(id=11)]

        result = await self.service.show(mock_store, "1")

        assert result.id == 1
        assert [r.id for r in result.reviews] == [10, 11]
        mock_store.find.assert_awaited_once_with(DogHouse, "1")
        mock_store.find_all_where.assert_awaited_once_with(Review, 1)

    @pytest.mark.asyncio
    async def test_embedded_reviews_are_not_expanded(
        self, mock_store, make_dog_house, make_review
    ):
        mock_store.find.return_value = make_dog_house(id=1)
        mock_store.find_all_where.return_value = [make_review(id=10)]

        result = await self.service.show(mock_store, 1)

        assert "dog_house" not in result.model_dump()["reviews"][0]

    @pytest.mark.asyncio
    async def test_show_without_reviews(self, mock_store, make_dog_house):
        mock_store.find.return_value = make_dog_house(id=3)

        result = await self.service.show(mock_store, "3")

        assert result.reviews == []

    @pytest.mark.asyncio
    async def test_show_not_found(self, mock_store):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.show(mock_store, "999")

        assert exc_info.value.message == "Dog house not found"
        assert exc_info.value.context["identifier"] == "999"
        mock_store.find_all_where.assert_not_awaited()
