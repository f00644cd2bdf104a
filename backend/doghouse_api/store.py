"""
Dog House API - Persistence Store
=================================

What:  The narrow data-access interface the resource handlers consume.
How:   Wraps one AsyncSession (one per request) and issues explicit SELECTs.
       Results are always ordered by primary key ("index order").
Who:   Built per request by the `get_store` dependency; handlers receive it
       as their first argument, tests replace it with an AsyncMock.

Interface:
    find(model, id)                  → instance | None
    find_all(model)                  → [instances]
    find_all_where(model, parent_id) → [instances whose parent key == parent_id]
    find_many(model, ids)            → {id: instance}
    create(model, fields)            → new instance (flushed, id assigned)
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from doghouse_api.database import Base, get_db_session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Largest value a BIGINT primary key can hold
MAX_IDENTIFIER = 2**63 - 1


def parse_identifier(value: Any) -> Optional[int]:
    """
    Coerce a path identifier to an integer primary key.

    Returns None for values that can never match a row ("abc", "1.5", "-3",
    "²", anything beyond BIGINT), so a malformed identifier behaves exactly
    like an absent one.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            return None
        number = int(text)
    return number if 0 < number <= MAX_IDENTIFIER else None


class Store:
    """SQLAlchemy-backed persistence store for one request."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find(self, model: Type[ModelT], identifier: Any) -> Optional[ModelT]:
        pk = parse_identifier(identifier)
        if pk is None:
            return None
        result = await self.session.execute(select(model).where(model.id == pk))
        return result.scalar_one_or_none()

    async def find_all(self, model: Type[ModelT]) -> List[ModelT]:
        result = await self.session.execute(select(model).order_by(model.id))
        return list(result.scalars().all())

    async def find_all_where(self, model: Type[ModelT], parent_id: Any) -> List[ModelT]:
        """Children of `parent_id`, filtered on the model's `__parent_key__` column."""
        parent_key = getattr(model, "__parent_key__", None)
        if parent_key is None:
            raise TypeError(f"{model.__name__} has no parent key")
        pk = parse_identifier(parent_id)
        if pk is None:
            return []
        column = getattr(model, parent_key)
        result = await self.session.execute(
            select(model).where(column == pk).order_by(model.id)
        )
        return list(result.scalars().all())

    async def find_many(self, model: Type[ModelT], identifiers: Iterable[Any]) -> Dict[int, ModelT]:
        pks = {pk for pk in (parse_identifier(i) for i in identifiers) if pk is not None}
        if not pks:
            return {}
        result = await self.session.execute(select(model).where(model.id.in_(pks)))
        return {row.id: row for row in result.scalars().all()}

    async def create(self, model: Type[ModelT], fields: Mapping[str, Any]) -> ModelT:
        """
        Insert a row and flush so the generated id is available.

        The commit happens in get_db_session once the request succeeds.
        """
        instance = model(**dict(fields))
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        logger.debug("Created %r", instance)
        return instance


async def get_store(db: AsyncSession = Depends(get_db_session)) -> Store:
    """FastAPI dependency: a Store bound to the request's session."""
    return Store(db)
