"""Репозиторий для работы с командами."""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from member_search.db.models import Team
from member_search.db.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Репозиторий команд."""

    def __init__(self, session: AsyncSession):
        super().__init__(Team, session)

    async def get_by_id(self, team_id: int, load_members: bool = False) -> Optional[Team]:
        """Получить команду по ID."""
        query = select(Team).where(Team.id == team_id)
        if load_members:
            query = query.options(selectinload(Team.members))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> list[Team]:
        """Получить команды с указанным названием."""
        result = await self.session.execute(select(Team).where(Team.name == name).order_by(Team.id))
        return list(result.scalars().all())

    async def exists(self, team_id: int) -> bool:
        """Проверить существование команды."""
        result = await self.session.execute(select(Team.id).where(Team.id == team_id))
        return result.scalar_one_or_none() is not None
