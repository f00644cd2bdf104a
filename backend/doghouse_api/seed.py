"""
Dog House API - Seed Data
=========================

What:  Creates missing tables and inserts sample dog houses and reviews.
When:  Local development and demos. Dog houses have no create endpoint, so
       this is how they come to exist outside of migrations.
How:   python -m doghouse_api.seed

Does nothing when the dog_houses table already holds rows.
"""

import asyncio
import logging
import sys

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from doghouse_api.database import async_session_factory, create_tables, dispose_engine
from doghouse_api.models import DogHouse, Review

logger = logging.getLogger(__name__)

SAMPLE_DOG_HOUSES = [
    {
        "name": "Cozy Kennel",
        "address": "12 Bark Street",
        "description": "Insulated cedar house with a covered porch.",
        "reviews": [
            {"username": "rover", "comment": "Warm all winter.", "rating": 5},
            {"username": "spot", "comment": "Porch is a bit small.", "rating": 4},
        ],
    },
    {
        "name": "Doggie Condo",
        "address": "7 Fetch Avenue",
        "description": "Two floors, ramp included.",
        "reviews": [
            {"username": "fido", "comment": "The ramp is great for my hips.", "rating": 5},
        ],
    },
]


async def seed(session: AsyncSession) -> int:
    """Insert the sample data; returns the number of dog houses created."""
    existing = (await session.execute(select(func.count(DogHouse.id)))).scalar() or 0
    if existing:
        logger.info("Database already holds %d dog houses; skipping seed", existing)
        return 0

    for entry in SAMPLE_DOG_HOUSES:
        dog_house = DogHouse(
            name=entry["name"],
            address=entry["address"],
            description=entry["description"],
        )
        session.add(dog_house)
        await session.flush()
        for review in entry["reviews"]:
            session.add(Review(dog_house_id=dog_house.id, **review))

    await session.flush()
    logger.info("Seeded %d dog houses", len(SAMPLE_DOG_HOUSES))
    return len(SAMPLE_DOG_HOUSES)


async def main() -> None:
    await create_tables()
    try:
        async with async_session_factory() as session:
            async with session.begin():
                await seed(session)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    asyncio.run(main())
