"""API эндпоинты для участников."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.api.dependencies import get_page_request, get_search_condition, get_session
from member_search.core.pagination import PageRequest
from member_search.domain.members.service import MemberService
from member_search.schemas.member import (
    ChangeTeamRequest,
    CreateMemberRequest,
    MemberResponse,
    MemberSearchCondition,
    MemberTeamDto,
)
from member_search.schemas.page import PageResponse

router = APIRouter(tags=["Members"])


@router.get("/v1/members", response_model=list[MemberTeamDto])
async def search_members_v1(
    condition: MemberSearchCondition = Depends(get_search_condition),
    session: AsyncSession = Depends(get_session),
):
    """Поиск участников без пагинации."""
    return await MemberService(session).search(condition)


@router.get("/v2/members", response_model=PageResponse[MemberTeamDto])
async def search_members_v2(
    condition: MemberSearchCondition = Depends(get_search_condition),
    page_request: PageRequest = Depends(get_page_request),
    session: AsyncSession = Depends(get_session),
):
    """Постраничный поиск, количество считается всегда."""
    page = await MemberService(session).search_page_simple(condition, page_request)
    return PageResponse[MemberTeamDto].from_page(page)


@router.get("/v3/members", response_model=PageResponse[MemberTeamDto])
async def search_members_v3(
    condition: MemberSearchCondition = Depends(get_search_condition),
    page_request: PageRequest = Depends(get_page_request),
    session: AsyncSession = Depends(get_session),
):
    """Постраничный поиск без лишних count-запросов."""
    page = await MemberService(session).search_page_optimized(condition, page_request)
    return PageResponse[MemberTeamDto].from_page(page)


@router.post("/members", response_model=MemberResponse, status_code=201)
async def create_member(
    request: CreateMemberRequest,
    session: AsyncSession = Depends(get_session),
):
    """Создать участника."""
    member = await MemberService(session).create_member(
        request.username, request.age, request.team_id
    )
    return MemberResponse(member=member)


@router.get("/members/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: int,
    session: AsyncSession = Depends(get_session),
):
    """Получить участника с командой."""
    return MemberResponse(member=await MemberService(session).get_member(member_id))


@router.put("/members/{member_id}/team", response_model=MemberResponse)
async def change_team(
    member_id: int,
    request: ChangeTeamRequest,
    session: AsyncSession = Depends(get_session),
):
    """Перевести участника в другую команду."""
    member = await MemberService(session).change_team(member_id, request.team_id)
    return MemberResponse(member=member)
