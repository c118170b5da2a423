"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .patch import (
    AddOperation,
    CopyOperation,
    MoveOperation,
    PatchDocument,
    PatchOperation,
    RemoveOperation,
    ReplaceOperation,
    TestOperation,
)
from .requests import CreateUserRequest, UpdateUserRequest
from .responses import ErrorResponse, HealthCheckResponse, PaginationHeader, UserView

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "PatchOperation",
    "PatchDocument",
    "AddOperation",
    "ReplaceOperation",
    "RemoveOperation",
    "MoveOperation",
    "CopyOperation",
    "TestOperation",
    "UserView",
    "PaginationHeader",
    "ErrorResponse",
    "HealthCheckResponse",
]
