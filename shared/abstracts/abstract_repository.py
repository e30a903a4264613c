from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import PersistenceError


class AbstractRepository(ABC):
    """
    Minimal repository contract over one table.

    Filters are keyword arguments naming columns of ``model``: a scalar value is
    an equality predicate, a list/tuple/set is a membership (``IN``) predicate.
    The session is injected per request; repositories never own it.
    """

    model: Any = None

    def __init__(self, db: AsyncSession):
        self.db = db

    @abstractmethod
    async def get(self, entity_id): ...

    @abstractmethod
    async def list(self, **filters): ...

    async def find_one(self, **filters) -> Optional[Any]:
        res = await self.db.execute(self._select(filters))
        return res.scalars().first()

    async def find(self, **filters) -> List[Any]:
        res = await self.db.execute(self._select(filters))
        return list(res.scalars().all())

    async def insert(self, obj):
        self.db.add(obj)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(
                f"Failed to insert into {self.model.__tablename__}", details=str(e)
            ) from e
        return obj

    def _predicates(self, filters: dict) -> Iterable:
        for field, value in filters.items():
            column = getattr(self.model, field)
            if isinstance(value, (list, tuple, set, frozenset)):
                yield column.in_(list(value))
            else:
                yield column == value

    def _select(self, filters: dict):
        # always overwrite identity-map state with what the database holds
        return (
            select(self.model)
            .where(*self._predicates(filters))
            .execution_options(populate_existing=True)
        )
