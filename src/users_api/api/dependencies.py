"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Store and service created in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - A fresh handler and link builder per request, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from users_api.api.links import RequestLinkBuilder
from users_api.config import Settings, settings
from users_api.handlers import UserHandler
from users_api.logging_setup import setup_logging
from users_api.protocols import UserStore
from users_api.repositories import InMemoryUserRepository, RedisUserRepository
from users_api.services import UserService

logger = logging.getLogger(__name__)


def build_store(config: Settings = settings) -> UserStore:
    """Create the user store selected by ``USER_STORE_BACKEND``."""
    if config.uses_redis:
        return RedisUserRepository.create(key_prefix=config.user_key_prefix)
    return InMemoryUserRepository()


def get_user_service(request: Request) -> UserService:
    """Dependency injection for UserService from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The UserService instance from app.state

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise RuntimeError("UserService not initialized. Check lifespan setup.")
    return service


def get_handler(
    request: Request,
    user_service: UserService = Depends(get_user_service),
) -> UserHandler:
    """Build a UserHandler bound to the current request."""
    return UserHandler(user_service=user_service, links=RequestLinkBuilder(request))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Store (data access) - taken from app.state.user_store if the app
       factory was given one, otherwise built from settings
    2. Service (business logic) - stored in app.state.user_service

    Cleanup:
        Removes the service and store from app.state on shutdown
    """
    setup_logging(settings.log_level)

    store = getattr(app.state, "user_store", None)
    if store is None:
        store = build_store()

    app.state.user_store = store
    app.state.user_service = UserService.create(store=store)

    logger.info("User service initialized (store=%s)", type(store).__name__)
    if not store.health_check():
        logger.warning("User store is not reachable, requests will fail until it is")

    yield

    del app.state.user_service
    del app.state.user_store
    logger.info("User service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[UserHandler, Depends(get_handler)]
ServiceDep = Annotated[UserService, Depends(get_user_service)]
