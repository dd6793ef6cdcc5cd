"""Пагинация и сортировка списков.

Формат ответа совпадает с конвертом страницы Spring Data
(``content``, ``pageable``, ``totalElements``, ``totalPages`` и т.д.),
чтобы существующие клиенты каталога работали без изменений.
"""
import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field

from app.config import settings
from app.core.errors import InvalidSortError

T = TypeVar("T")

ASC = "asc"
DESC = "desc"

# page * max_page_size должно помещаться в BIGINT смещения
MAX_PAGE = 2**31 - 1


@dataclass(frozen=True)
class SortOrder:
    """Одно поле сортировки."""

    key: str
    direction: str = ASC

    @property
    def is_descending(self) -> bool:
        return self.direction == DESC


@dataclass(frozen=True)
class PageRequest:
    """Запрос страницы: номер (с нуля), размер и порядок сортировки."""

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = field(default_factory=tuple)

    @property
    def offset(self) -> int:
        return self.page * self.size


def parse_sort(values: list[str] | None) -> tuple[SortOrder, ...]:
    """Разобрать параметры ``sort=свойство[,asc|desc]``."""
    orders: list[SortOrder] = []
    for value in values or []:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            continue
        if len(parts) > 2:
            raise InvalidSortError(f"Некорректный параметр сортировки: '{value}'")

        direction = ASC
        if len(parts) == 2:
            direction = parts[1].lower()
            if direction not in (ASC, DESC):
                raise InvalidSortError(f"Некорректное направление сортировки: '{parts[1]}'")

        orders.append(SortOrder(key=parts[0], direction=direction))
    return tuple(orders)


def get_page_request(
    page: int = Query(0, ge=0, le=MAX_PAGE, description="Номер страницы (с нуля)"),
    size: int | None = Query(None, ge=1, description="Размер страницы"),
    sort: list[str] | None = Query(None, description="Сортировка: свойство[,asc|desc]"),
) -> PageRequest:
    """Dependency для получения параметров пагинации из query."""
    if size is None:
        size = settings.default_page_size
    # Слишком большой размер страницы не ошибка, а ограничение
    size = min(size, settings.max_page_size)
    return PageRequest(page=page, size=size, sort=parse_sort(sort))


class SortInfo(BaseModel):
    """Информация о сортировке страницы."""

    empty: bool
    sorted: bool
    unsorted: bool

    @classmethod
    def of(cls, orders: tuple[SortOrder, ...]) -> "SortInfo":
        return cls(empty=not orders, sorted=bool(orders), unsorted=not orders)


class PageableInfo(BaseModel):
    """Параметры запрошенной страницы."""

    model_config = ConfigDict(populate_by_name=True)

    page_number: int = Field(alias="pageNumber")
    page_size: int = Field(alias="pageSize")
    sort: SortInfo
    offset: int
    paged: bool = True
    unpaged: bool = False


class Page(BaseModel, Generic[T]):
    """Страница результатов с метаданными."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[T]
    pageable: PageableInfo
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")
    last: bool
    first: bool
    size: int
    number: int
    sort: SortInfo
    number_of_elements: int = Field(alias="numberOfElements")
    empty: bool

    @classmethod
    def build(cls, content: list, request: PageRequest, total: int) -> "Page":
        """Собрать страницу из элементов, запроса и общего количества."""
        total_pages = math.ceil(total / request.size) if request.size else 1
        sort_info = SortInfo.of(request.sort)
        return cls(
            content=content,
            pageable=PageableInfo(
                page_number=request.page,
                page_size=request.size,
                sort=sort_info,
                offset=request.offset,
            ),
            total_elements=total,
            total_pages=total_pages,
            last=request.page + 1 >= total_pages,
            first=request.page == 0,
            size=request.size,
            number=request.page,
            sort=sort_info,
            number_of_elements=len(content),
            empty=not content,
        )
