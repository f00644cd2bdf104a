"""
Dog House API - ORM Models
==========================

Importing this package registers every table with `Base.metadata`
(used by Alembic autogenerate and by the seed command).
"""

from doghouse_api.models.dog_house import DogHouse
from doghouse_api.models.review import Review

__all__ = ["DogHouse", "Review"]
