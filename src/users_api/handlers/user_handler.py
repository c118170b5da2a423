"""HTTP handlers for user resource operations.

Handlers convert between service results and HTTP responses.
They own status codes and response headers (Location, X-Pagination, Allow);
errors raised by the service are translated by the API's exception handlers.
"""

from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

from users_api.dto import UserView
from users_api.mapping import to_view
from users_api.pagination import PaginationLinkBuilder
from users_api.protocols import LinkBuilder
from users_api.services import UserService

USER_ROUTE = "get_user_by_id"
PAGINATION_HEADER = "X-Pagination"
COLLECTION_METHODS = ("GET", "POST", "OPTIONS")


class UserHandler:
    """HTTP handlers for the users resource.

    A handler is built per request: it borrows the shared UserService and
    a LinkBuilder bound to the current request.

    Example:
        ```python
        handler = UserHandler(user_service=service, links=RequestLinkBuilder(request))

        @router.get("/{user_id}", response_model=UserView)
        async def get_user(user_id: str, handler: HandlerDep):
            return await handler.get_user(user_id)
        ```
    """

    def __init__(self, user_service: UserService, links: LinkBuilder) -> None:
        """Initialize the user handler.

        Args:
            user_service: The user service for business logic (required).
            links: Builds absolute URIs for Location and pagination links.
        """
        self._users = user_service
        self._links = links
        self._pagination = PaginationLinkBuilder(links)

    def _created(self, user_id: Any) -> JSONResponse:
        location = self._links.build(USER_ROUTE, path_params={"user_id": str(user_id)})
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=str(user_id),
            headers={"Location": location},
        )

    async def get_user(self, user_id: str) -> UserView:
        """Handle GET /users/{id} requests."""
        return to_view(self._users.get_user(user_id))

    async def head_user(self, user_id: str) -> Response:
        """Handle HEAD /users/{id} requests.

        Runs the same lookup as GET; the response never has a body.
        """
        self._users.get_user(user_id)
        return Response(status_code=status.HTTP_200_OK, media_type="application/json")

    async def get_users(self, page_number: int | None, page_size: int | None) -> JSONResponse:
        """Handle GET /users requests.

        Returns:
            The page of users, with the X-Pagination header set
        """
        page = self._users.list_users(page_number, page_size)
        header = self._pagination.build(page)

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=[to_view(user).model_dump(mode="json", by_alias=True) for user in page.items],
            headers={PAGINATION_HEADER: header.model_dump_json(by_alias=True)},
        )

    async def create_user(self, payload: Any) -> JSONResponse:
        """Handle POST /users requests.

        Returns:
            201 with the new id as body and Location pointing at the user
        """
        created = self._users.create_user(payload)
        return self._created(created.id)

    async def update_user(self, user_id: str, payload: Any) -> Response:
        """Handle PUT /users/{id} requests.

        Returns:
            201 when the user was inserted, 204 when it was replaced
        """
        user, inserted = self._users.upsert_user(user_id, payload)
        if inserted:
            return self._created(user.id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    async def patch_user(self, user_id: str, document: Any) -> Response:
        """Handle PATCH /users/{id} requests."""
        self._users.patch_user(user_id, document)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    async def delete_user(self, user_id: str) -> Response:
        """Handle DELETE /users/{id} requests."""
        self._users.delete_user(user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    async def options(self) -> Response:
        """Handle OPTIONS /users requests."""
        return Response(
            status_code=status.HTTP_200_OK,
            headers={"Allow": ", ".join(COLLECTION_METHODS)},
        )
