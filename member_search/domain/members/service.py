"""Сервис для работы с участниками."""

import json
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from member_search.core.exceptions import NotFoundException
from member_search.core.pagination import Page, PageRequest
from member_search.db.models import Member
from member_search.db.repositories.member_repository import MemberRepository
from member_search.db.repositories.team_repository import TeamRepository
from member_search.domain.base_service import BaseService
from member_search.schemas.member import MemberSearchCondition, MemberTeamDto

logger = logging.getLogger(__name__)


class MemberService(BaseService):
    """Сервис для работы с участниками."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.member_repo = MemberRepository(session)
        self.team_repo = TeamRepository(session)

    async def search(self, condition: MemberSearchCondition) -> List[MemberTeamDto]:
        """Поиск участников без пагинации (результат кешируется)."""
        cache_service = await self._get_cache_service()
        cache_key = f"members:search:{json.dumps(condition.model_dump(), sort_keys=True)}"

        cached_result = await cache_service.get(cache_key)
        if cached_result is not None:
            return [MemberTeamDto(**item) for item in cached_result]

        result = await self.member_repo.search(condition)
        await cache_service.set(cache_key, [dto.model_dump() for dto in result])
        return result

    async def search_page_simple(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """Постраничный поиск, count-запрос выполняется всегда."""
        return await self.member_repo.search_page_simple(condition, page_request)

    async def search_page_optimized(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """Постраничный поиск с пропуском лишних count-запросов."""
        return await self.member_repo.search_page_optimized(condition, page_request)

    async def create_member(
        self, username: str, age: int, team_id: Optional[int] = None
    ) -> MemberTeamDto:
        """Создать участника."""
        team = None
        if team_id is not None:
            team = await self.team_repo.get_by_id(team_id)
            if not team:
                raise NotFoundException("Team")

        member = await self.member_repo.save(Member(username=username, age=age, team=team))
        await self._commit_and_invalidate_search_cache()
        logger.info("Created member %s (team=%s)", member.id, team_id)
        return self._to_dto(member)

    async def get_member(self, member_id: int) -> MemberTeamDto:
        """Получить участника с его командой."""
        member = await self.member_repo.get_by_id(member_id, load_team=True)
        if not member:
            raise NotFoundException("Member")
        return self._to_dto(member)

    async def change_team(self, member_id: int, team_id: Optional[int]) -> MemberTeamDto:
        """Перевести участника в другую команду или убрать из команды."""
        member = await self.member_repo.get_by_id(member_id, load_team=True)
        if not member:
            raise NotFoundException("Member")

        team = None
        if team_id is not None:
            team = await self.team_repo.get_by_id(team_id, load_members=True)
            if not team:
                raise NotFoundException("Team")

        member.change_team(team)
        await self._commit_and_invalidate_search_cache()
        return self._to_dto(member)

    def _to_dto(self, member: Member) -> MemberTeamDto:
        """Преобразовать модель в схему."""
        return MemberTeamDto(
            member_id=member.id,
            username=member.username,
            age=member.age,
            team_id=member.team.id if member.team else None,
            team_name=member.team.name if member.team else None,
        )
