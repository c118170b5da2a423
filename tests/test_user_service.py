"""
Tests for the user service.
"""

from uuid import UUID, uuid4

import pytest

from users_api.dto import CreateUserRequest
from users_api.errors import (
    InvalidIdentifierError,
    MalformedPayloadError,
    MissingPayloadError,
    UserNotFoundError,
    ValidationFailedError,
)
from users_api.mapping import to_view
from users_api.repositories import InMemoryUserRepository
from users_api.services import UserService

NEO_ID = UUID("77777777-7777-7777-7777-777777777777")


@pytest.fixture
def seeded(neo) -> UserService:
    return UserService.create(store=InMemoryUserRepository([neo]))


def test_resolve_id():
    assert UserService.resolve_id(str(NEO_ID)) == NEO_ID
    with pytest.raises(InvalidIdentifierError):
        UserService.resolve_id("42")
    with pytest.raises(InvalidIdentifierError):
        UserService.resolve_id(f"urn:uuid:{NEO_ID}")
    assert UserService.resolve_id(str(NEO_ID).upper()) == NEO_ID


def test_get_user(seeded, neo):
    assert seeded.get_user(str(NEO_ID)) == neo


@pytest.mark.parametrize("raw_id", [str(uuid4()), "not-a-guid", ""])
def test_read_paths_report_not_found(seeded, raw_id):
    """Test malformed and absent ids look the same on read paths."""
    with pytest.raises(UserNotFoundError):
        seeded.get_user(raw_id)
    with pytest.raises(UserNotFoundError):
        seeded.delete_user(raw_id)
    with pytest.raises(UserNotFoundError):
        seeded.patch_user(raw_id, [])


def test_upsert_rejects_malformed_id(seeded):
    with pytest.raises(InvalidIdentifierError):
        seeded.upsert_user("not-a-guid", {"login": "a", "firstName": "b", "lastName": "c"})


def test_list_users_normalizes_window(service):
    page = service.list_users(0, 100)
    assert (page.current_page, page.page_size) == (1, 20)

    page = service.list_users(-5, 5)
    assert (page.current_page, page.page_size) == (1, 5)


def test_create_user(service, store):
    created = service.create_user({"login": "neo"})

    assert created.id is not None
    assert store.find_by_id(created.id) == created
    assert (created.first_name, created.last_name) == ("John", "Doe")


def test_create_user_accepts_dto(service):
    created = service.create_user(CreateUserRequest(login="neo", first_name="Thomas"))
    assert created.first_name == "Thomas"


def test_create_user_requires_payload(service):
    with pytest.raises(MissingPayloadError):
        service.create_user(None)


def test_create_user_reports_all_errors(service, store):
    with pytest.raises(ValidationFailedError) as exc_info:
        service.create_user({"login": "bad login", "firstName": 7})

    errors = exc_info.value.errors
    assert errors["login"] == ["Login should contain only letters or digits"]
    assert len(errors) == 2
    assert len(store) == 0


def test_upsert_is_idempotent(service, store):
    raw_id = str(uuid4())
    body = {"login": "morpheus", "firstName": "Laurence", "lastName": "Fishburne"}

    first, inserted = service.upsert_user(raw_id, body)
    assert inserted
    second, inserted = service.upsert_user(raw_id, body)
    assert not inserted

    assert first == second
    assert len(store) == 1


def test_upsert_replaces_every_field(seeded, neo):
    """Test a full replace resets fields the request does not carry."""
    replaced, inserted = seeded.upsert_user(
        str(NEO_ID), {"login": "neo", "firstName": "Thomas", "lastName": "Anderson"}
    )
    assert not inserted
    assert replaced.games_played == 0


def test_upsert_requires_payload(service):
    with pytest.raises(MissingPayloadError):
        service.upsert_user(str(uuid4()), None)


def test_patch_keeps_other_fields(seeded):
    updated = seeded.patch_user(str(NEO_ID), [{"op": "replace", "path": "/login", "value": "neo2"}])

    assert updated.login == "neo2"
    assert updated.games_played == 3
    assert seeded.get_user(str(NEO_ID)) == updated


def test_patch_is_all_or_nothing(seeded, neo):
    with pytest.raises(ValidationFailedError):
        seeded.patch_user(
            str(NEO_ID),
            [
                {"op": "replace", "path": "/login", "value": "neo2"},
                {"op": "remove", "path": "/firstName"},
            ],
        )
    assert seeded.get_user(str(NEO_ID)) == neo


def test_patch_apply_failure_is_validation_error(seeded, neo):
    with pytest.raises(ValidationFailedError) as exc_info:
        seeded.patch_user(str(NEO_ID), [{"op": "test", "path": "/login", "value": "smith"}])
    assert list(exc_info.value.errors) == ["/login"]
    assert seeded.get_user(str(NEO_ID)) == neo


def test_patch_rejects_non_string_login(seeded):
    with pytest.raises(ValidationFailedError) as exc_info:
        seeded.patch_user(str(NEO_ID), [{"op": "replace", "path": "/login", "value": 42}])
    assert "login" in exc_info.value.errors


def test_patch_document_checks(seeded):
    with pytest.raises(MissingPayloadError):
        seeded.patch_user(str(NEO_ID), None)
    with pytest.raises(MalformedPayloadError):
        seeded.patch_user(str(NEO_ID), "replace everything")


def test_test_only_patch_changes_nothing(seeded, neo):
    assert seeded.patch_user(str(NEO_ID), [{"op": "test", "path": "/login", "value": "neo"}]) == neo


def test_delete_user(seeded):
    seeded.delete_user(str(NEO_ID))
    with pytest.raises(UserNotFoundError):
        seeded.get_user(str(NEO_ID))


def test_view_projection(neo):
    view = to_view(neo)
    assert view.full_name == "Anderson Thomas"
    assert view.model_dump(by_alias=True)["gamesPlayed"] == 3
