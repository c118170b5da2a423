"""JSON Patch (RFC 6902) operation DTOs.

Each operation kind is its own model; the ``op`` member selects the variant.
Interpretation lives in ``users_api.services.patching``.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str = Field(..., description="JSON Pointer to the target member")


class AddOperation(_Operation):
    op: Literal["add"]
    value: Any = None


class ReplaceOperation(_Operation):
    op: Literal["replace"]
    value: Any = None


class RemoveOperation(_Operation):
    op: Literal["remove"]


class MoveOperation(_Operation):
    op: Literal["move"]
    from_: str = Field(..., alias="from", description="JSON Pointer to the source member")


class CopyOperation(_Operation):
    op: Literal["copy"]
    from_: str = Field(..., alias="from", description="JSON Pointer to the source member")


class TestOperation(_Operation):
    # Keep pytest from collecting this as a test class
    __test__ = False

    op: Literal["test"]
    value: Any = None


PatchOperation = Annotated[
    Union[
        AddOperation,
        ReplaceOperation,
        RemoveOperation,
        MoveOperation,
        CopyOperation,
        TestOperation,
    ],
    Field(discriminator="op"),
]

PatchDocument = TypeAdapter(list[PatchOperation])
