"""Page window normalization and pagination links.

``PageWindow`` turns optional query parameters into a valid window;
``PaginationLinkBuilder`` describes a page for the X-Pagination header.
"""

from dataclasses import dataclass

from users_api.dto import PaginationHeader
from users_api.entities import Page
from users_api.protocols import LinkBuilder

DEFAULT_PAGE_NUMBER = 1
MIN_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 20

USERS_ROUTE = "get_users"


@dataclass(frozen=True)
class PageWindow:
    """A normalized (page number, page size) pair."""

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(cls, page_number: int | None, page_size: int | None) -> "PageWindow":
        """Normalize client-supplied values.

        Out-of-range values are pulled into range instead of rejected:
        the page number is at least 1 and the size is clamped to [1, 20].
        """
        number = DEFAULT_PAGE_NUMBER if page_number is None else page_number
        size = DEFAULT_PAGE_SIZE if page_size is None else page_size
        return cls(
            page_number=max(number, MIN_PAGE_NUMBER),
            page_size=min(max(size, MIN_PAGE_SIZE), MAX_PAGE_SIZE),
        )


class PaginationLinkBuilder:
    """Builds the pagination header for a page of the users collection.

    Previous and next links point at the list route with the adjusted
    page number and the same page size.
    """

    def __init__(self, links: LinkBuilder, route_name: str = USERS_ROUTE) -> None:
        self._links = links
        self._route_name = route_name

    def page_link(self, page_number: int, page_size: int) -> str:
        return self._links.build(
            self._route_name,
            query_params={"pageNumber": page_number, "pageSize": page_size},
        )

    def build(self, page: Page) -> PaginationHeader:
        previous_link = None
        if page.has_previous:
            previous_link = self.page_link(page.current_page - 1, page.page_size)

        next_link = None
        if page.has_next:
            next_link = self.page_link(page.current_page + 1, page.page_size)

        return PaginationHeader(
            previous_page_link=previous_link,
            next_page_link=next_link,
            total_count=page.total_count,
            page_size=page.page_size,
            current_page=page.current_page,
            total_pages=page.total_pages,
        )
