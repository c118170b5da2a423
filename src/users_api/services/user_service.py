"""User service for core resource logic.

This service owns identifier resolution, payload validation, existence
checks, upsert and patch semantics. It talks to storage only through the
UserStore protocol and reports failures as UserApiError subclasses.
"""

import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError

from users_api.dto import CreateUserRequest, PatchDocument, UpdateUserRequest
from users_api.entities import Page, UserEntity
from users_api.errors import (
    InvalidIdentifierError,
    MalformedPayloadError,
    MissingPayloadError,
    UserNotFoundError,
    ValidationFailedError,
)
from users_api.mapping import entity_from_create, entity_from_update, merge_update, to_update_request
from users_api.pagination import PageWindow
from users_api.protocols import UserStore
from users_api.services.patching import PatchApplyError, apply_patch
from users_api.validation import ValidationErrors, validate_login_characters, validate_model

logger = logging.getLogger(__name__)


def _login_of(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return getattr(payload, "login", None)
    if isinstance(payload, dict):
        return payload.get("login")
    return None


class UserService:
    """Core user resource service.

    This service depends on the UserStore PROTOCOL, not a concrete
    backend, so the in-memory and Redis stores are interchangeable.

    Payload arguments accept either parsed JSON (dicts, lists) or the
    matching DTO instance; ``None`` always means the body was absent.

    Example:
        ```python
        from users_api.repositories import InMemoryUserRepository
        from users_api.services import UserService

        users = UserService.create(store=InMemoryUserRepository())
        created = users.create_user({"login": "neo"})
        users.get_user(str(created.id))
        ```
    """

    def __init__(self, store: UserStore) -> None:
        """Initialize the user service.

        Args:
            store: User storage backend (required).
        """
        self._store = store

    @classmethod
    def create(cls, store: UserStore) -> "UserService":
        """Factory method to create UserService.

        Args:
            store: User storage backend (required).

        Returns:
            Configured UserService instance
        """
        return cls(store=store)

    @staticmethod
    def resolve_id(raw_id: str) -> UUID:
        """Parse a route identifier in canonical 8-4-4-4-12 form.

        Raises:
            InvalidIdentifierError: If ``raw_id`` is not a canonical UUID
        """
        try:
            user_id = UUID(raw_id)
        except (TypeError, ValueError) as e:
            raise InvalidIdentifierError(raw_id) from e

        # UUID() also accepts braces, urn prefixes and stray dashes
        if str(user_id) != raw_id.lower():
            raise InvalidIdentifierError(raw_id)
        return user_id

    def _get_existing(self, raw_id: str) -> UserEntity:
        # Malformed identifiers are reported exactly like absent users
        try:
            user_id = self.resolve_id(raw_id)
        except InvalidIdentifierError as e:
            raise UserNotFoundError(raw_id) from e

        user = self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(raw_id)
        return user

    def get_user(self, raw_id: str) -> UserEntity:
        """Look up a user for read access.

        Raises:
            UserNotFoundError: If the id is malformed or no user has it
        """
        return self._get_existing(raw_id)

    def list_users(self, page_number: int | None = None, page_size: int | None = None) -> Page[UserEntity]:
        """Return one page of users after normalizing the window."""
        window = PageWindow.from_query(page_number, page_size)
        return self._store.get_page(window.page_number, window.page_size)

    def create_user(self, payload: Any) -> UserEntity:
        """Validate and insert a new user.

        Raises:
            MissingPayloadError: If there is no body
            ValidationFailedError: If any field rule fails
        """
        if payload is None:
            raise MissingPayloadError()

        errors = ValidationErrors()
        request = validate_model(CreateUserRequest, payload, errors)
        validate_login_characters(_login_of(payload), errors)
        errors.raise_if_invalid()

        created = self._store.insert(entity_from_create(request))
        logger.info("User created", extra={"user_id": str(created.id), "login": created.login})
        return created

    def upsert_user(self, raw_id: str, payload: Any) -> tuple[UserEntity, bool]:
        """Replace the user with ``raw_id``, creating it if absent.

        Returns:
            Tuple (stored user, True if it was inserted)

        Raises:
            InvalidIdentifierError: If the id is malformed
            MissingPayloadError: If there is no body
            ValidationFailedError: If any field rule fails
        """
        user_id = self.resolve_id(raw_id)
        if payload is None:
            raise MissingPayloadError()

        errors = ValidationErrors()
        request = validate_model(UpdateUserRequest, payload, errors)
        validate_login_characters(_login_of(payload), errors)
        errors.raise_if_invalid()

        user, inserted = self._store.update_or_insert(entity_from_update(user_id, request))
        logger.info(
            "User upserted",
            extra={"user_id": str(user_id), "inserted": inserted},
        )
        return user, inserted

    def patch_user(self, raw_id: str, document: Any) -> UserEntity:
        """Apply a JSON Patch document to an existing user.

        The patch is all-or-nothing: nothing reaches the store unless every
        operation applies and the patched view passes validation.

        Raises:
            UserNotFoundError: If the id is malformed or no user has it
            MissingPayloadError: If there is no patch document
            MalformedPayloadError: If the document is not a list of operations
            ValidationFailedError: If an operation fails or the result is invalid
        """
        existing = self._get_existing(raw_id)
        if document is None:
            raise MissingPayloadError("Patch document is required")

        try:
            operations = PatchDocument.validate_python(document)
        except ValidationError as e:
            raise MalformedPayloadError(f"Invalid patch document: {e.error_count()} error(s)") from e

        errors = ValidationErrors()
        try:
            patched = apply_patch(operations, to_update_request(existing))
        except PatchApplyError as e:
            errors.add(e.path, e.message)
            raise ValidationFailedError(errors.as_dict()) from e

        view = validate_model(UpdateUserRequest, patched, errors)
        validate_login_characters(patched.get("login"), errors)
        errors.raise_if_invalid()

        updated = merge_update(view, existing)
        self._store.update(updated)
        logger.info(
            "User patched",
            extra={"user_id": str(existing.id), "operations": len(operations)},
        )
        return updated

    def delete_user(self, raw_id: str) -> None:
        """Remove an existing user.

        Raises:
            UserNotFoundError: If the id is malformed or no user has it
        """
        existing = self._get_existing(raw_id)
        self._store.delete(existing.id)
        logger.info("User deleted", extra={"user_id": str(existing.id)})

    def is_healthy(self) -> bool:
        return self._store.health_check()
