"""Базовый репозиторий."""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Базовый репозиторий для работы с БД."""

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def get_by_id(self, id: int) -> ModelType | None:
        """Получить по первичному ключу."""
        return await self.session.get(self.model, id)

    async def get_all(self, limit: int | None = None, offset: int = 0) -> list[ModelType]:
        """Получить все записи."""
        query = select(self.model).order_by(self.model.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(self, **kwargs) -> ModelType:
        """Создать запись."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        return instance

