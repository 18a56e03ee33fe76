"""Схемы для команд."""

from pydantic import Field

from member_search.schemas.base import CamelModel
from member_search.schemas.member import MemberDto


class TeamMemberSchema(MemberDto):
    """Схема участника команды."""

    member_id: int


class TeamSchema(CamelModel):
    """Схема команды."""

    team_id: int
    name: str
    members: list[TeamMemberSchema]


class TeamResponse(CamelModel):
    """Ответ с командой."""

    team: TeamSchema


class CreateTeamRequest(CamelModel):
    """Запрос на создание команды."""

    name: str = Field(min_length=1, max_length=255)
