"""Конфигурация тестов."""

import fnmatch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from member_search.api.dependencies import get_session
from member_search.core.database import Base
from member_search.db.models import Member, Team
from member_search.main import app


@pytest.fixture(scope="function")
async def engine():
    """Движок тестовой БД в памяти."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_db(engine):
    """Фабрика сессий тестовой БД."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def session(test_db):
    """Создать сессию БД для теста."""
    async with test_db() as session:
        yield session


@pytest.fixture(scope="function")
def sql_log(engine):
    """Список SQL-запросов, выполненных движком во время теста."""
    statements: list[str] = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        statements.append(" ".join(statement.split()))

    event.listen(engine.sync_engine, "before_cursor_execute", before_cursor_execute)
    yield statements
    event.remove(engine.sync_engine, "before_cursor_execute", before_cursor_execute)


@pytest.fixture(scope="function")
async def mock_cache(monkeypatch):
    """Mock Redis кеш."""
    cache_dict = {}

    class MockRedis:
        async def get(self, key: str):
            return cache_dict.get(key)

        async def setex(self, key: str, ttl: int, value: str):
            cache_dict[key] = value

        async def delete(self, *keys):
            for key in keys:
                cache_dict.pop(key, None)

        async def keys(self, pattern: str):
            return [k for k in cache_dict.keys() if fnmatch.fnmatch(k, pattern)]

        async def aclose(self):
            pass

    mock_redis = MockRedis()

    async def get_mock_cache():
        return mock_redis

    monkeypatch.setattr("member_search.core.cache.redis_client", mock_redis)
    monkeypatch.setattr("member_search.domain.base_service.get_cache", get_mock_cache)
    mock_redis.storage = cache_dict
    return mock_redis


@pytest.fixture
async def sample_members(session):
    """Создать teamA (member1, member2) и teamB (member3, member4)."""
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    session.add_all([team_a, team_b])

    members = [
        Member(username="member1", age=10, team=team_a),
        Member(username="member2", age=20, team=team_a),
        Member(username="member3", age=30, team=team_b),
        Member(username="member4", age=40, team=team_b),
    ]
    session.add_all(members)

    await session.commit()
    return {"teamA": team_a, "teamB": team_b, "members": members}


@pytest.fixture
async def client(session, mock_cache):
    """HTTP клиент приложения, работающий с тестовой сессией."""

    async def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
