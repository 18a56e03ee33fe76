"""Зависимости для API."""

from typing import Optional

from fastapi import Query

from member_search.core.config import settings
from member_search.core.database import get_db
from member_search.core.pagination import MAX_OFFSET, PageRequest, parse_sort
from member_search.schemas.member import MemberSearchCondition


async def get_session():
    """Получить сессию БД."""
    async for session in get_db():
        yield session


def get_search_condition(
    username: Optional[str] = None,
    team_name: Optional[str] = Query(None, alias="teamName"),
    age_goe: Optional[int] = Query(None, alias="ageGoe"),
    age_loe: Optional[int] = Query(None, alias="ageLoe"),
) -> MemberSearchCondition:
    """Условие поиска из query-параметров."""
    return MemberSearchCondition(
        username=username, team_name=team_name, age_goe=age_goe, age_loe=age_loe
    )


def get_page_request(
    page: int = Query(
        0,
        ge=0,
        le=MAX_OFFSET // settings.MAX_PAGE_SIZE,
        description="Номер страницы, начиная с 0",
    ),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    sort: list[str] = Query(default=[], description="Поле и направление: username,desc"),
) -> PageRequest:
    """Параметры страницы из query-параметров."""
    return PageRequest(page, size, tuple(parse_sort(s) for s in sort))
