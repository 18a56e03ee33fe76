"""Базовый класс для сервисов."""

from sqlalchemy.ext.asyncio import AsyncSession

from member_search.core.cache import CacheService, get_cache

SEARCH_CACHE_PATTERN = "members:search:*"


class BaseService:
    """Базовый класс для всех сервисов."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_cache_service(self) -> CacheService:
        """Получить сервис кеширования."""
        redis_client = await get_cache()
        return CacheService(redis_client)

    async def _commit_and_invalidate_search_cache(self):
        """Зафиксировать изменения и затем сбросить кеш поиска участников."""
        await self.session.commit()
        cache_service = await self._get_cache_service()
        await cache_service.delete_pattern(SEARCH_CACHE_PATTERN)
