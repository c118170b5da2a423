"""Request-scoped validation helpers.

A ``ValidationErrors`` collection is created per operation and passed
explicitly to every rule, so errors from structural checks, patch
application and semantic rules are reported together.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from users_api.errors import ValidationFailedError

ModelT = TypeVar("ModelT", bound=BaseModel)

LOGIN_FIELD = "login"
LOGIN_CHARACTERS_MESSAGE = "Login should contain only letters or digits"


class ValidationErrors:
    """Accumulates field-scoped error messages for a single request."""

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    def add_pydantic(self, exc: ValidationError) -> None:
        """Record every error from a pydantic ValidationError."""
        self.add_details(exc.errors())

    def add_details(self, details: Iterable[Mapping[str, Any]]) -> None:
        """Record pydantic-style error details.

        Nested locations are joined with dots; errors about the document
        itself are keyed as ``$``.
        """
        for error in details:
            field = ".".join(str(part) for part in error["loc"]) or "$"
            self.add(field, error["msg"])

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def as_dict(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def raise_if_invalid(self) -> None:
        """Raise ValidationFailedError carrying every accumulated message."""
        if not self.is_valid:
            raise ValidationFailedError(self.as_dict())

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._errors.values())


def validate_login_characters(login: Any, errors: ValidationErrors) -> None:
    """Require every character of a non-empty login to be a letter or digit.

    Empty or non-string logins are left to structural validation.
    """
    if not isinstance(login, str) or not login:
        return

    # Letters and decimal digits only, isalnum() also admits fractions and roman numerals
    if any(not (ch.isalpha() or ch.isdecimal()) for ch in login):
        errors.add(LOGIN_FIELD, LOGIN_CHARACTERS_MESSAGE)


def validate_model(
    model: type[ModelT],
    payload: Any,
    errors: ValidationErrors,
) -> ModelT | None:
    """Run structural validation of ``payload`` against ``model``.

    Returns:
        The validated model, or None when errors were recorded
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors.add_pydantic(exc)
        return None
