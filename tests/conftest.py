"""Shared fixtures for the users API tests."""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from users_api.api.app import create_app
from users_api.entities import UserEntity
from users_api.repositories import InMemoryUserRepository
from users_api.services import UserService

NEO_ID = UUID("77777777-7777-7777-7777-777777777777")


@pytest.fixture
def store() -> InMemoryUserRepository:
    """Empty in-memory store."""
    return InMemoryUserRepository()


@pytest.fixture
def service(store: InMemoryUserRepository) -> UserService:
    """UserService over the in-memory store."""
    return UserService.create(store=store)


@pytest.fixture
def neo() -> UserEntity:
    """A stored user with game statistics."""
    return UserEntity(
        id=NEO_ID,
        login="neo",
        first_name="Thomas",
        last_name="Anderson",
        games_played=3,
    )


@pytest.fixture
def client(store: InMemoryUserRepository):
    """Test client serving the shared in-memory store."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
