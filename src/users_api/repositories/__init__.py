"""Repository layer for data access.

This layer hides the storage backend behind the UserStore protocol.
The repositories are protocol-based (structural typing), not
inheritance-based. Any class implementing the required methods will
satisfy the protocol.
"""

from users_api.protocols import UserStore

from .memory_repository import InMemoryUserRepository
from .redis_repository import RedisUserRepository

__all__ = [
    "UserStore",
    "InMemoryUserRepository",
    "RedisUserRepository",
]
