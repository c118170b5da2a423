"""Projections between request DTOs, entities and views."""

from dataclasses import replace
from uuid import UUID

from users_api.dto import CreateUserRequest, UpdateUserRequest, UserView
from users_api.entities import UserEntity


def entity_from_create(request: CreateUserRequest) -> UserEntity:
    """Build a new, not yet stored, user. The store assigns the id."""
    return UserEntity(
        id=None,
        login=request.login,
        first_name=request.first_name,
        last_name=request.last_name,
    )


def entity_from_update(user_id: UUID, request: UpdateUserRequest) -> UserEntity:
    """Build the full replacement for ``user_id``.

    Fields the request does not carry go back to their defaults.
    """
    return UserEntity(
        id=user_id,
        login=request.login,
        first_name=request.first_name,
        last_name=request.last_name,
    )


def to_view(user: UserEntity) -> UserView:
    return UserView(
        id=user.id,
        login=user.login,
        full_name=f"{user.last_name} {user.first_name}",
        games_played=user.games_played,
        current_game_id=user.current_game_id,
    )


def to_update_request(user: UserEntity) -> UpdateUserRequest:
    """Project a stored user onto its mutable view."""
    return UpdateUserRequest(
        login=user.login,
        first_name=user.first_name,
        last_name=user.last_name,
    )


def merge_update(request: UpdateUserRequest, user: UserEntity) -> UserEntity:
    """Apply a validated view onto a stored user, keeping the other fields."""
    return replace(
        user,
        login=request.login,
        first_name=request.first_name,
        last_name=request.last_name,
    )
