"""User storage protocol.

Defines the interface for any backend that can persist users and
return them one page at a time.

Implementations include:
- In-process dictionary (default, also used by tests)
- Redis hashes with a sorted-set index
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from users_api.entities import Page, UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from users_api.protocols import UserStore

        store: UserStore = InMemoryUserRepository()
        store: UserStore = RedisUserRepository.create()
        ```
    """

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        """Look up a user.

        Args:
            user_id: The user identifier

        Returns:
            The stored user, or None if absent
        """
        ...

    def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        """Return one page of users in a stable order.

        Args:
            page_number: 1-based page index
            page_size: Maximum users per page

        Returns:
            The page, with totals describing the whole collection
        """
        ...

    def insert(self, user: UserEntity) -> UserEntity:
        """Store a new user, assigning a fresh identifier.

        Args:
            user: The user to store; its id is ignored

        Returns:
            The stored user with its assigned id
        """
        ...

    def update_or_insert(self, user: UserEntity) -> tuple[UserEntity, bool]:
        """Replace the user with ``user.id``, or insert it when absent.

        Args:
            user: The user to store; id is required

        Returns:
            Tuple (stored user, True if inserted)
        """
        ...

    def update(self, user: UserEntity) -> None:
        """Replace an existing user.

        Args:
            user: The user to store; id is required
        """
        ...

    def delete(self, user_id: UUID) -> None:
        """Remove a user.

        Args:
            user_id: The user identifier
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
