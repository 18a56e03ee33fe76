"""Схемы для участников."""

from typing import Optional

from pydantic import Field

from member_search.schemas.base import CamelModel


class MemberSearchCondition(CamelModel):
    """Условие поиска: любое подмножество полей может отсутствовать."""

    username: Optional[str] = None
    team_name: Optional[str] = None
    age_goe: Optional[int] = None
    age_loe: Optional[int] = None


class MemberTeamDto(CamelModel):
    """Участник вместе с данными его команды."""

    member_id: int
    username: str
    age: int
    team_id: Optional[int] = None
    team_name: Optional[str] = None


class MemberDto(CamelModel):
    """Краткая схема участника."""

    username: str
    age: int


class MemberResponse(CamelModel):
    """Ответ с участником."""

    member: MemberTeamDto


class CreateMemberRequest(CamelModel):
    """Запрос на создание участника."""

    username: str = Field(min_length=1, max_length=255)
    age: int = Field(default=0, ge=0)
    team_id: Optional[int] = None


class ChangeTeamRequest(CamelModel):
    """Запрос на перевод участника в другую команду (None - без команды)."""

    team_id: Optional[int] = None
