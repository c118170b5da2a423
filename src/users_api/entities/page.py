"""Page of entities returned by list queries."""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of an ordered collection.

    Attributes:
        items: Entities in the current window, in store order
        total_count: Size of the whole collection
        page_size: Maximum number of items per page
        current_page: 1-based index of this page
    """

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page_size: int = 10
    current_page: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
