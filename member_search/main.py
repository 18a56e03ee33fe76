"""Главный модуль FastAPI приложения."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from member_search.api.v1 import health, members, teams
from member_search.core.cache import close_cache
from member_search.core.config import settings
from member_search.core.database import async_session_maker, close_db, init_db
from member_search.core.exceptions import (
    http_exception_handler,
    service_exception_handler,
    validation_exception_handler,
    ServiceException,
)
from member_search.core.logging_config import configure_logging
from member_search.domain import sample_data

configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle events."""
    # Startup
    await init_db()
    if settings.SEED_SAMPLE_DATA:
        async with async_session_maker() as session:
            await sample_data.populate(session)
            await session.commit()
    yield
    # Shutdown
    await close_cache()
    await close_db()


app = FastAPI(
    title="Member Search Service",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Регистрируем обработчики исключений
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Регистрируем роутеры
app.include_router(health.router)
app.include_router(members.router)
app.include_router(teams.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
