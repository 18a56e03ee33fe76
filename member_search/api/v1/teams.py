"""API эндпоинты для команд."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.api.dependencies import get_session
from member_search.domain.teams.service import TeamService
from member_search.schemas.team import CreateTeamRequest, TeamResponse

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.post("", response_model=TeamResponse, status_code=201)
async def create_team(
    request: CreateTeamRequest,
    session: AsyncSession = Depends(get_session),
):
    """Создать команду."""
    return await TeamService(session).create_team(request.name)


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: int,
    session: AsyncSession = Depends(get_session),
):
    """Получить команду с участниками."""
    return await TeamService(session).get_team(team_id)
