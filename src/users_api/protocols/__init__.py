"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (memory -> Redis, request links -> static links)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .link_builder import LinkBuilder
from .user_store import UserStore

__all__ = [
    "LinkBuilder",
    "UserStore",
]
