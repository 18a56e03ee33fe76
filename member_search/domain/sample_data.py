"""Тестовые данные для локального запуска."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.db.models import Member, Team

logger = logging.getLogger(__name__)

SAMPLE_MEMBER_COUNT = 100


async def populate(session: AsyncSession) -> bool:
    """
    Заполнить пустую БД: команды teamA и teamB и 100 участников.
    Участник member{i} имеет возраст i, чётные в teamA, нечётные в teamB.
    Возвращает False, если участники уже есть.
    """
    existing = await session.execute(select(func.count(Member.id)))
    if existing.scalar_one():
        logger.info("Sample data skipped: members table is not empty")
        return False

    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    session.add_all([team_a, team_b])

    for i in range(SAMPLE_MEMBER_COUNT):
        team = team_a if i % 2 == 0 else team_b
        session.add(Member(username=f"member{i}", age=i, team=team))

    await session.flush()
    logger.info("Sample data created: 2 teams, %d members", SAMPLE_MEMBER_COUNT)
    return True
