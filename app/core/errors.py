"""Ошибки каталога и их отображение в HTTP ответы."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Базовая ошибка каталога."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CategoryNotFoundError(CatalogError):
    """Категория не найдена."""

    def __init__(self, category_id: int):
        super().__init__(f"Categoría con ID {category_id} no encontrada")
        self.category_id = category_id


class InvalidSortError(CatalogError):
    """Некорректный параметр сортировки."""


async def category_not_found_handler(request: Request, exc: CategoryNotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


async def invalid_sort_handler(request: Request, exc: InvalidSortError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Ошибки разбора тела и query параметров отдаем как 400, а не 422."""
    logger.warning(f"{request.method} {request.url.path}: некорректный запрос")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Подключить обработчики ошибок к приложению."""
    app.add_exception_handler(CategoryNotFoundError, category_not_found_handler)
    app.add_exception_handler(InvalidSortError, invalid_sort_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
