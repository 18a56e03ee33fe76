"""Репозиторий для работы с участниками."""

import logging
from typing import List, Optional

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from member_search.core.exceptions import InvalidSortException
from member_search.core.pagination import Page, PageRequest, get_page
from member_search.db.models import Member, Team
from member_search.db.predicates import build_search_clause, references_team, search_predicates
from member_search.db.repositories.base import BaseRepository
from member_search.schemas.member import MemberSearchCondition, MemberTeamDto

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "memberId": Member.id,
    "username": Member.username,
    "age": Member.age,
    "teamId": Team.id,
    "teamName": Team.name,
}


class MemberRepository(BaseRepository[Member]):
    """Репозиторий участников."""

    def __init__(self, session: AsyncSession):
        super().__init__(Member, session)

    async def get_by_id(self, member_id: int, load_team: bool = False) -> Optional[Member]:
        """Получить участника по ID."""
        query = select(Member).where(Member.id == member_id)
        if load_team:
            query = query.options(selectinload(Member.team))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def save(self, member: Member) -> Member:
        """Сохранить участника."""
        self.session.add(member)
        await self.session.flush()
        return member

    async def find_by_username(self, username: str) -> List[Member]:
        """Получить участников с указанным именем."""
        result = await self.session.execute(
            select(Member).where(Member.username == username).order_by(Member.id)
        )
        return list(result.scalars().all())

    async def find_all_by(self, *criteria: ColumnElement[bool]) -> List[Member]:
        """Получить участников по произвольным условиям над полями Member (без join)."""
        result = await self.session.execute(select(Member).where(*criteria).order_by(Member.id))
        return list(result.scalars().all())

    async def search_by_builder(self, condition: MemberSearchCondition) -> List[MemberTeamDto]:
        """Поиск с условием, собранным по одному полю."""
        query = self._member_team_query().where(build_search_clause(condition)).order_by(Member.id)
        return await self._fetch_dtos(query)

    async def search(self, condition: MemberSearchCondition) -> List[MemberTeamDto]:
        """Поиск: в WHERE попадают только заданные поля условия."""
        query = self._member_team_query().where(*search_predicates(condition)).order_by(Member.id)
        return await self._fetch_dtos(query)

    async def search_page_simple(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """Страница результатов; count-запрос всегда выполняется и повторяет join."""
        content = await self._fetch_dtos(self._content_query(condition, page_request))
        total = await self._count(condition, join_team=True)
        return Page(content, page_request, total)

    async def search_page_complex(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """Страница результатов; count-запрос без join, если фильтр не касается Team."""
        content = await self._fetch_dtos(self._content_query(condition, page_request))
        total = await self._count(condition, join_team=references_team(condition))
        return Page(content, page_request, total)

    async def search_page_optimized(
        self, condition: MemberSearchCondition, page_request: PageRequest
    ) -> Page[MemberTeamDto]:
        """Как search_page_complex, но count выполняется только если итог нельзя вывести."""
        content = await self._fetch_dtos(self._content_query(condition, page_request))

        async def count() -> int:
            return await self._count(condition, join_team=references_team(condition))

        return await get_page(content, page_request, count)

    def _member_team_query(self) -> Select:
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )

    def _content_query(self, condition: MemberSearchCondition, page_request: PageRequest) -> Select:
        return (
            self._member_team_query()
            .where(*search_predicates(condition))
            .order_by(*self._order_by(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )

    def count_query(self, condition: MemberSearchCondition, join_team: bool) -> Select:
        """Запрос количества участников, удовлетворяющих условию."""
        query = select(func.count(Member.id)).select_from(Member)
        if join_team:
            query = query.outerjoin(Member.team)
        return query.where(*search_predicates(condition))

    async def _count(self, condition: MemberSearchCondition, join_team: bool) -> int:
        logger.debug("running count query (join_team=%s)", join_team)
        result = await self.session.execute(self.count_query(condition, join_team))
        return result.scalar_one()

    def _order_by(self, page_request: PageRequest) -> list:
        if not page_request.sort:
            return [Member.id]
        columns = []
        for order in page_request.sort:
            column = SORTABLE_COLUMNS.get(order.name)
            if column is None:
                raise InvalidSortException(order.name)
            columns.append(column.desc() if order.is_descending else column.asc())
        # одинаковые значения сортировки не должны перемешивать страницы
        columns.append(Member.id)
        return columns

    async def _fetch_dtos(self, query: Select) -> List[MemberTeamDto]:
        result = await self.session.execute(query)
        return [
            MemberTeamDto(
                member_id=row.member_id,
                username=row.username,
                age=row.age,
                team_id=row.team_id,
                team_name=row.team_name,
            )
            for row in result.all()
        ]
