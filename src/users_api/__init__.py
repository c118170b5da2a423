"""Users API - a paginated users resource with upsert and JSON Patch.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (UserStore, LinkBuilder)
    - repositories: Data access implementations (memory, Redis)
    - services: Resource logic and patch interpretation
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from users_api.repositories import InMemoryUserRepository
    from users_api.services import UserService

    users = UserService.create(store=InMemoryUserRepository())
    ```

For HTTP API:
    ```python
    from users_api.api.app import app
    ```
"""

from users_api.config import get_redis_client, settings
from users_api.dto import CreateUserRequest, UpdateUserRequest, UserView
from users_api.entities import Page, UserEntity
from users_api.handlers import UserHandler
from users_api.protocols import LinkBuilder, UserStore
from users_api.repositories import InMemoryUserRepository, RedisUserRepository
from users_api.services import UserService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "UserStore",
    "LinkBuilder",
    # Services (business logic)
    "UserService",
    # Handlers (HTTP)
    "UserHandler",
    # Repositories (data access)
    "InMemoryUserRepository",
    "RedisUserRepository",
    # Entities (domain models)
    "UserEntity",
    "Page",
    # DTOs (API contracts)
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserView",
]
