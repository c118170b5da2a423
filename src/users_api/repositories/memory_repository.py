"""In-memory implementation of UserStore.

Keeps users in a dictionary for the lifetime of the process. It is the
default backend and the one the test suite runs against.
"""

import threading
from dataclasses import replace
from uuid import UUID, uuid4

from users_api.entities import Page, UserEntity


class InMemoryUserRepository:
    """Dictionary-backed user store.

    This class satisfies the UserStore protocol through structural
    typing. Users are paged in insertion order; a lock serializes
    writers so concurrent requests never observe a half-applied change.
    """

    def __init__(self, users: list[UserEntity] | None = None) -> None:
        """Initialize the repository.

        Args:
            users: Users to seed the store with. Each must carry an id.
        """
        self._users: dict[UUID, UserEntity] = {}
        self._lock = threading.Lock()
        for user in users or []:
            if user.id is None:
                raise ValueError("Seeded users must have an id")
            self._users[user.id] = user

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        return self._users.get(user_id)

    def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        with self._lock:
            users = list(self._users.values())

        start = (page_number - 1) * page_size
        return Page(
            items=users[start : start + page_size],
            total_count=len(users),
            page_size=page_size,
            current_page=page_number,
        )

    def insert(self, user: UserEntity) -> UserEntity:
        with self._lock:
            user_id = uuid4()
            while user_id in self._users:
                user_id = uuid4()
            stored = replace(user, id=user_id)
            self._users[user_id] = stored
        return stored

    def update_or_insert(self, user: UserEntity) -> tuple[UserEntity, bool]:
        if user.id is None:
            raise ValueError("update_or_insert requires a user id")

        with self._lock:
            inserted = user.id not in self._users
            self._users[user.id] = user
        return user, inserted

    def update(self, user: UserEntity) -> None:
        if user.id is None:
            raise ValueError("update requires a user id")

        with self._lock:
            if user.id not in self._users:
                raise LookupError(f"User {user.id} does not exist")
            self._users[user.id] = user

    def delete(self, user_id: UUID) -> None:
        with self._lock:
            self._users.pop(user_id, None)

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._users)
