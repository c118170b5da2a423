"""Users resource routes.

Route functions only bind HTTP inputs; every decision is made by
UserHandler and UserService. Bodies are bound as raw JSON so that an
absent body, identifier checks and field validation are reported in the
handler's order rather than by FastAPI's own body validation.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Query, Response, status

from users_api.api.dependencies import HandlerDep, ServiceDep
from users_api.config import settings
from users_api.dto import HealthCheckResponse, UserView

router = APIRouter(prefix="/users", tags=["users"])
health_router = APIRouter(tags=["health"])

JsonBody = Annotated[Any, Body()]


@router.get("/{user_id}", name="get_user_by_id", response_model=UserView)
async def get_user_by_id(user_id: str, handler: HandlerDep) -> UserView:
    """Get a single user."""
    return await handler.get_user(user_id)


@router.head("/{user_id}", name="head_user_by_id")
async def head_user_by_id(user_id: str, handler: HandlerDep) -> Response:
    """Check that a user exists."""
    return await handler.head_user(user_id)


@router.get("", name="get_users", response_model=list[UserView])
async def get_users(
    handler: HandlerDep,
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
) -> Response:
    """List users one page at a time.

    Pagination metadata is returned in the X-Pagination header.
    """
    return await handler.get_users(page_number, page_size)


@router.post("", name="create_user", status_code=status.HTTP_201_CREATED)
async def create_user(handler: HandlerDep, payload: JsonBody = None) -> Response:
    """Create a user and return its id."""
    return await handler.create_user(payload)


@router.put("/{user_id}", name="update_user")
async def update_user(user_id: str, handler: HandlerDep, payload: JsonBody = None) -> Response:
    """Replace a user, creating it when the id is unknown."""
    return await handler.update_user(user_id, payload)


@router.patch("/{user_id}", name="partially_update_user", status_code=status.HTTP_204_NO_CONTENT)
async def partially_update_user(user_id: str, handler: HandlerDep, document: JsonBody = None) -> Response:
    """Apply a JSON Patch document to a user."""
    return await handler.patch_user(user_id, document)


@router.delete("/{user_id}", name="delete_user", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, handler: HandlerDep) -> Response:
    """Delete a user."""
    return await handler.delete_user(user_id)


@router.options("", name="get_users_options")
async def get_users_options(handler: HandlerDep) -> Response:
    """Describe the methods supported by the collection."""
    return await handler.options()


@health_router.get("/health", response_model=HealthCheckResponse)
async def health(service: ServiceDep) -> HealthCheckResponse:
    """Health check endpoint."""
    if not service.is_healthy():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"User store ({settings.store_backend}) is not reachable",
        )
    return HealthCheckResponse(status="healthy", store=settings.store_backend)
