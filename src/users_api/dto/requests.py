"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanged in lower camel case on the wire.

    Python field names are accepted on input as well.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    """Request DTO for creating a user.

    The store assigns the identifier, so there is no id field here.
    """

    login: str = Field(..., description="Login name, letters and digits only", min_length=1)
    first_name: str = Field("John", description="Given name")
    last_name: str = Field("Doe", description="Family name")


class UpdateUserRequest(CamelModel):
    """Request DTO for replacing a user.

    Also the mutable view that patch documents are applied to.
    """

    login: str = Field(..., description="Login name, letters and digits only", min_length=1)
    first_name: str = Field(..., description="Given name", min_length=1)
    last_name: str = Field(..., description="Family name", min_length=1)
