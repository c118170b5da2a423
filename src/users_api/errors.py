"""Application exceptions.

Every failure the service reports to a client is a ``UserApiError``.
The API layer translates them into responses in ``users_api.api.errors``.
"""


class UserApiError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 400
    code = "APPLICATION_ERROR"

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class InvalidIdentifierError(UserApiError):
    """Route identifier is not a canonical UUID."""

    code = "INVALID_IDENTIFIER"

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(f"'{raw_id}' is not a valid user identifier")


class MissingPayloadError(UserApiError):
    """Request body is absent or null."""

    code = "MISSING_PAYLOAD"

    def __init__(self, message: str = "Request body is required") -> None:
        super().__init__(message)


class MalformedPayloadError(UserApiError):
    """Request body cannot be read as the expected document."""

    code = "MALFORMED_PAYLOAD"


class UserNotFoundError(UserApiError):
    """No user matches the route identifier."""

    status_code = 404
    code = "USER_NOT_FOUND"

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(f"User '{raw_id}' not found")


class ValidationFailedError(UserApiError):
    """One or more field rules failed.

    Attributes:
        errors: Messages keyed by field name
    """

    status_code = 422
    code = "VALIDATION_FAILED"

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        super().__init__("One or more validation errors occurred")
