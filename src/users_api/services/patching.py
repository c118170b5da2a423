"""JSON Patch interpretation against a flat, schema-known view.

Operations run in order on a plain copy of the view, so earlier
operations are visible to later ones. Paths are resolved against the
view model's fields (by wire alias or Python name, case-insensitively);
anything else fails the whole batch.
"""

import copy
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from users_api.dto import (
    AddOperation,
    CopyOperation,
    MoveOperation,
    PatchOperation,
    RemoveOperation,
    ReplaceOperation,
    TestOperation,
)


class PatchApplyError(Exception):
    """A patch operation could not be applied.

    Attributes:
        path: JSON Pointer of the failing operation
        message: Human-readable reason
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)


def _field_lookup(model: type[BaseModel]) -> dict[str, str]:
    lookup: dict[str, str] = {}
    for name, field in model.model_fields.items():
        alias = field.alias or name
        lookup[name.lower()] = alias
        lookup[alias.lower()] = alias
    return lookup


def _resolve(pointer: str, lookup: dict[str, str]) -> str:
    """Map a JSON Pointer to the wire name of a view field."""
    if not pointer.startswith("/"):
        raise PatchApplyError(pointer, f"'{pointer}' is not a valid JSON Pointer")

    segments = [
        segment.replace("~1", "/").replace("~0", "~")
        for segment in pointer[1:].split("/")
    ]
    if len(segments) == 1 and segments[0].lower() in lookup:
        return lookup[segments[0].lower()]

    raise PatchApplyError(
        pointer,
        f"The target location specified by path segment '{segments[0]}' was not found",
    )


def apply_patch(operations: Sequence[PatchOperation], view: BaseModel) -> dict[str, Any]:
    """Apply ``operations`` to a copy of ``view``.

    Args:
        operations: Patch operations, applied in order
        view: The current state; never modified

    Returns:
        The patched document keyed by wire alias, ready for re-validation

    Raises:
        PatchApplyError: On the first operation that cannot be applied
    """
    lookup = _field_lookup(type(view))
    document = view.model_dump(by_alias=True)

    for operation in operations:
        target = _resolve(operation.path, lookup)

        if isinstance(operation, (AddOperation, ReplaceOperation)):
            document[target] = copy.deepcopy(operation.value)

        elif isinstance(operation, RemoveOperation):
            # Fields of a flat view cannot disappear, removing resets to null
            document[target] = None

        elif isinstance(operation, MoveOperation):
            source = _resolve(operation.from_, lookup)
            if source != target:
                document[target] = document[source]
                document[source] = None

        elif isinstance(operation, CopyOperation):
            source = _resolve(operation.from_, lookup)
            document[target] = copy.deepcopy(document[source])

        elif isinstance(operation, TestOperation):
            if document[target] != operation.value:
                raise PatchApplyError(
                    operation.path,
                    f"The current value '{document[target]}' at path '{operation.path}' "
                    f"is not equal to the test value '{operation.value}'",
                )

    return document
