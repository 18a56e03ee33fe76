"""Постраничная выборка.

Номер страницы начинается с нуля. ``get_page`` решает, нужен ли отдельный
count-запрос: если итог можно вывести из размера самой страницы, он не
выполняется.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, Sequence, TypeVar

from member_search.core.exceptions import InvalidSortException

logger = logging.getLogger(__name__)

T = TypeVar("T")

ASC = "asc"
DESC = "desc"

# смещение передаётся в БД как BIGINT
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class SortOrder:
    """Порядок сортировки по одному полю."""

    name: str
    direction: str = ASC

    @property
    def is_descending(self) -> bool:
        return self.direction == DESC


def parse_sort(value: str) -> SortOrder:
    """Разобрать строку вида ``"username,desc"``."""
    parts = [part.strip() for part in value.split(",")]
    if not parts[0] or len(parts) > 2:
        raise InvalidSortException(value)
    direction = parts[1].lower() if len(parts) == 2 and parts[1] else ASC
    if direction not in (ASC, DESC):
        raise InvalidSortException(value)
    return SortOrder(parts[0], direction)


@dataclass(frozen=True)
class PageRequest:
    """Запрос страницы: номер (с нуля), размер и сортировка."""

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("page index must not be less than zero")
        if self.size < 1:
            raise ValueError("page size must not be less than one")
        if self.page * self.size > MAX_OFFSET:
            raise ValueError("page offset is out of range")

    @classmethod
    def of(cls, page: int, size: int, *sort: str) -> "PageRequest":
        return cls(page, size, tuple(parse_sort(s) for s in sort))

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """Страница результатов и общее число элементов."""

    content: list[T]
    request: PageRequest
    total: int

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.content


async def get_page(
    content: Sequence[T],
    request: PageRequest,
    count: Callable[[], Awaitable[int]],
) -> Page[T]:
    """Собрать страницу, вызывая ``count`` только когда итог нельзя вывести."""
    content = list(content)

    if request.offset == 0:
        if request.size > len(content):
            logger.debug("count query skipped: first page is not full (%d rows)", len(content))
            return Page(content, request, len(content))
        return Page(content, request, await count())

    if content and request.size > len(content):
        logger.debug("count query skipped: last page at offset %d", request.offset)
        return Page(content, request, request.offset + len(content))

    return Page(content, request, await count())
