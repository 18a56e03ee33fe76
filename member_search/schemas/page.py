"""Схема страницы результатов."""

from typing import Generic, TypeVar

from member_search.core.pagination import Page
from member_search.schemas.base import CamelModel

T = TypeVar("T")


class PageResponse(CamelModel, Generic[T]):
    """Страница в формате ответа API."""

    content: list[T]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def from_page(cls, page: Page) -> "PageResponse":
        return cls(
            content=page.content,
            number=page.number,
            size=page.size,
            total_elements=page.total,
            total_pages=page.total_pages,
            number_of_elements=page.number_of_elements,
            first=page.is_first,
            last=page.is_last,
            empty=page.is_empty,
        )
