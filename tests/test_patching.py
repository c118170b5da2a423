"""
Tests for JSON Patch interpretation.
"""

import pytest
from pydantic import ValidationError

from users_api.dto import PatchDocument, ReplaceOperation, UpdateUserRequest
from users_api.services.patching import PatchApplyError, apply_patch


@pytest.fixture
def view() -> UpdateUserRequest:
    return UpdateUserRequest(login="neo", first_name="Thomas", last_name="Anderson")


def patch(view, *operations):
    return apply_patch(PatchDocument.validate_python(list(operations)), view)


def test_replace(view):
    document = patch(view, {"op": "replace", "path": "/login", "value": "neo2"})
    assert document == {"login": "neo2", "firstName": "Thomas", "lastName": "Anderson"}


def test_view_is_not_modified(view):
    patch(view, {"op": "replace", "path": "/login", "value": "neo2"})
    assert view.login == "neo"


@pytest.mark.parametrize("path", ["/firstName", "/first_name", "/FIRSTNAME"])
def test_paths_resolve_by_alias_or_name(view, path):
    document = patch(view, {"op": "add", "path": path, "value": "Neo"})
    assert document["firstName"] == "Neo"


def test_remove_resets_to_null(view):
    document = patch(view, {"op": "remove", "path": "/lastName"})
    assert document["lastName"] is None


def test_operations_apply_in_order(view):
    """Test later operations see the result of earlier ones."""
    document = patch(
        view,
        {"op": "move", "from": "/firstName", "path": "/lastName"},
        {"op": "test", "path": "/lastName", "value": "Thomas"},
        {"op": "add", "path": "/firstName", "value": "Neo"},
    )
    assert document == {"login": "neo", "firstName": "Neo", "lastName": "Thomas"}


def test_copy(view):
    document = patch(view, {"op": "copy", "from": "/login", "path": "/firstName"})
    assert document["firstName"] == "neo"
    assert document["login"] == "neo"


def test_move_onto_itself_is_noop(view):
    document = patch(view, {"op": "move", "from": "/login", "path": "/login"})
    assert document["login"] == "neo"


def test_failed_test_operation(view):
    with pytest.raises(PatchApplyError) as exc_info:
        patch(view, {"op": "test", "path": "/login", "value": "smith"})
    assert exc_info.value.path == "/login"


@pytest.mark.parametrize("path", ["/email", "/login/first", "login", ""])
def test_unknown_paths_fail_closed(view, path):
    with pytest.raises(PatchApplyError) as exc_info:
        patch(view, {"op": "replace", "path": path, "value": "x"})
    assert exc_info.value.path == path


def test_unknown_source_fails(view):
    with pytest.raises(PatchApplyError):
        patch(view, {"op": "copy", "from": "/email", "path": "/login"})


def test_document_is_typed():
    operations = PatchDocument.validate_python([{"op": "replace", "path": "/login", "value": 1}])
    assert isinstance(operations[0], ReplaceOperation)


@pytest.mark.parametrize(
    "document",
    [
        {"op": "replace", "path": "/login"},
        [{"op": "rename", "path": "/login"}],
        [{"op": "move", "path": "/login"}],
        [{"path": "/login", "value": "x"}],
    ],
)
def test_malformed_documents(document):
    with pytest.raises(ValidationError):
        PatchDocument.validate_python(document)
