"""Сервис для работы с командами."""

from sqlalchemy.ext.asyncio import AsyncSession

from member_search.core.exceptions import NotFoundException
from member_search.db.models import Team
from member_search.db.repositories.team_repository import TeamRepository
from member_search.domain.base_service import BaseService


class TeamService(BaseService):
    """Сервис для работы с командами."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.team_repo = TeamRepository(session)

    async def create_team(self, name: str) -> dict:
        """Создать команду без участников."""
        team = await self.team_repo.create(name=name)
        return {"team": {"team_id": team.id, "name": team.name, "members": []}}

    async def get_team(self, team_id: int) -> dict:
        """Получить команду с участниками."""
        team = await self.team_repo.get_by_id(team_id, load_members=True)
        if not team:
            raise NotFoundException("Team")
        return {"team": self._team_to_schema(team)}

    def _team_to_schema(self, team: Team) -> dict:
        """Преобразовать модель в схему."""
        return {
            "team_id": team.id,
            "name": team.name,
            "members": [
                {
                    "member_id": member.id,
                    "username": member.username,
                    "age": member.age,
                }
                for member in sorted(team.members, key=lambda m: m.id)
            ],
        }
