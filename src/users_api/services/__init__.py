"""Service layer for business logic.

This layer contains the core resource logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .patching import PatchApplyError, apply_patch
from .user_service import UserService

__all__ = [
    "UserService",
    "PatchApplyError",
    "apply_patch",
]
