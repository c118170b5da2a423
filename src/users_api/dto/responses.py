"""Response DTOs for API endpoints."""

from uuid import UUID

from pydantic import Field

from .requests import CamelModel


class UserView(CamelModel):
    """Externally visible projection of a user."""

    id: UUID = Field(..., description="User identifier")
    login: str = Field(..., description="Login name")
    full_name: str = Field(..., description="Last name followed by first name")
    games_played: int = Field(0, description="Number of finished games", ge=0)
    current_game_id: UUID | None = Field(None, description="Game in progress, if any")


class PaginationHeader(CamelModel):
    """Payload of the X-Pagination response header.

    Link members are null when there is no previous or next page.
    """

    previous_page_link: str | None = Field(None, description="Absolute URI of the previous page")
    next_page_link: str | None = Field(None, description="Absolute URI of the next page")
    total_count: int = Field(..., description="Total number of users", ge=0)
    page_size: int = Field(..., description="Users per page", ge=1)
    current_page: int = Field(..., description="1-based page index", ge=1)
    total_pages: int = Field(..., description="Number of pages", ge=0)


class ErrorResponse(CamelModel):
    """Body of every error response produced by the API."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Stable machine-readable error code")
    errors: dict[str, list[str]] | None = Field(
        None,
        description="Field-scoped validation messages, keyed by field name",
    )


class HealthCheckResponse(CamelModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store: str = Field(..., description="Configured store backend")
