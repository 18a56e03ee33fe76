"""Обработка исключений."""

import logging

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ServiceException(HTTPException):
    """Базовое исключение сервиса."""

    def __init__(
        self, error_code: str, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ):
        super().__init__(status_code=http_status, detail={"code": error_code, "message": message})


class NotFoundException(ServiceException):
    """Ресурс не найден."""

    def __init__(self, resource: str = "resource"):
        super().__init__("NOT_FOUND", f"{resource} not found", status.HTTP_404_NOT_FOUND)


class InvalidSortException(ServiceException):
    """Сортировка по неизвестному полю или в неизвестном направлении."""

    def __init__(self, sort: str):
        super().__init__("INVALID_SORT", f"cannot sort by '{sort}'", status.HTTP_400_BAD_REQUEST)


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    """Обработчик исключений сервиса."""
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Обработчик HTTP исключений."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": "HTTP_ERROR", "message": exc.detail}},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Обработчик ошибок валидации."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation error",
                "details": jsonable_encoder(exc.errors()),
            }
        },
    )
