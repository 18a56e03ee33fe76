"""Проверка работоспособности."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from member_search.api.dependencies import get_session

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(session: AsyncSession = Depends(get_session)):
    """Проверить доступность сервиса и БД."""
    await session.execute(text("SELECT 1"))
    return {"status": "ok"}
