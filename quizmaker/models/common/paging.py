from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class PagedResult(Generic[T]):
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 1

    def __post_init__(self):
        self.total_count = max(self.total_count, 0)
        self.page = max(self.page, 1)
        self.page_size = max(self.page_size, 1)

    @property
    def total_pages(self) -> int:
        return (self.total_count + self.page_size - 1) // self.page_size


def clamp_paging(page: int, page_size: int, max_page_size: int):
    page = max(page or 1, 1)
    page_size = min(max(page_size or 1, 1), max_page_size)
    return page, page_size
