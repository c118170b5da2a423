"""Redis implementation of UserStore.

Each user is a Redis hash under ``<prefix>:<id>``. A sorted set
``<prefix>:index`` scored by an insertion counter keeps page order stable.
"""

from dataclasses import replace
from uuid import UUID, uuid4

import redis

from users_api.config import get_redis_client, settings
from users_api.entities import Page, UserEntity


class RedisUserRepository:
    """Redis hash-per-user store.

    This class satisfies the UserStore protocol through structural
    typing - no explicit inheritance needed.

    Expects a client created with ``decode_responses=True`` so hash
    fields come back as strings.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis user repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for every key this repository writes.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.user_key_prefix
        self._index_key = f"{self._prefix}:index"
        self._sequence_key = f"{self._prefix}:sequence"

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisUserRepository":
        """Factory method to create RedisUserRepository with defaults.

        Args:
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisUserRepository
        """
        return cls(key_prefix=key_prefix)

    def _user_key(self, user_id: UUID) -> str:
        return f"{self._prefix}:{user_id}"

    @staticmethod
    def _to_mapping(user: UserEntity) -> dict[str, str]:
        return {
            "login": user.login,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "games_played": str(user.games_played),
            # Hashes cannot hold None, an empty string stands for "no game"
            "current_game_id": str(user.current_game_id) if user.current_game_id else "",
        }

    @staticmethod
    def _from_mapping(user_id: UUID, data: dict[str, str]) -> UserEntity:
        current_game_id = data.get("current_game_id") or None
        return UserEntity(
            id=user_id,
            login=data["login"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            games_played=int(data.get("games_played", "0")),
            current_game_id=UUID(current_game_id) if current_game_id else None,
        )

    def _write(self, user: UserEntity, index: bool) -> None:
        pipe = self._client.pipeline()
        pipe.delete(self._user_key(user.id))
        pipe.hset(self._user_key(user.id), mapping=self._to_mapping(user))
        if index:
            position = self._client.incr(self._sequence_key)
            pipe.zadd(self._index_key, {str(user.id): position}, nx=True)
        pipe.execute()

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        data: dict[str, str] = self._client.hgetall(self._user_key(user_id))  # type: ignore[assignment]
        if not data:
            return None
        return self._from_mapping(user_id, data)

    def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        start = (page_number - 1) * page_size
        total: int = self._client.zcard(self._index_key)  # type: ignore[assignment]
        ids: list[str] = self._client.zrange(  # type: ignore[assignment]
            self._index_key, start, start + page_size - 1
        )

        pipe = self._client.pipeline()
        for raw_id in ids:
            pipe.hgetall(f"{self._prefix}:{raw_id}")
        rows = pipe.execute() if ids else []

        users = [
            self._from_mapping(UUID(raw_id), data)
            for raw_id, data in zip(ids, rows)
            if data
        ]
        return Page(
            items=users,
            total_count=total,
            page_size=page_size,
            current_page=page_number,
        )

    def insert(self, user: UserEntity) -> UserEntity:
        stored = replace(user, id=uuid4())
        self._write(stored, index=True)
        return stored

    def update_or_insert(self, user: UserEntity) -> tuple[UserEntity, bool]:
        if user.id is None:
            raise ValueError("update_or_insert requires a user id")

        inserted = not self._client.exists(self._user_key(user.id))
        self._write(user, index=inserted)
        return user, inserted

    def update(self, user: UserEntity) -> None:
        if user.id is None:
            raise ValueError("update requires a user id")

        if not self._client.exists(self._user_key(user.id)):
            raise LookupError(f"User {user.id} does not exist")
        self._write(user, index=False)

    def delete(self, user_id: UUID) -> None:
        pipe = self._client.pipeline()
        pipe.delete(self._user_key(user_id))
        pipe.zrem(self._index_key, str(user_id))
        pipe.execute()

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            result = self._client.ping()
            return bool(result)
        except redis.RedisError:
            return False
