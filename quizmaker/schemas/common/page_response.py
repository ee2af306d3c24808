from typing import List, Generic, TypeVar

from quizmaker.models.common.paging import PagedResult
from quizmaker.schemas.common.camel import CamelModel

T = TypeVar("T")


class PageResponse(CamelModel, Generic[T]):
    items: List[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def from_result(cls, result: PagedResult, items: List[T]) -> "PageResponse[T]":
        return cls(
            items=items,
            total_count=result.total_count,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
        )
