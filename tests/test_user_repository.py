import pytest
from sqlalchemy import func, select

from app.core.errors import Conflict, StoreFailure
from app.models.user import User
from app.schemas.user import UserCredentials, UserOut


def test_create_and_find_by_id(users):
    created = users.create("Ada", "ada@example.com", "digest")
    found = users.find_by_id(created.id)
    assert found.email == "ada@example.com"
    assert found.name == "Ada"
    assert found.created_at is not None


def test_find_by_email_hides_password_by_default(users):
    users.create("Ada", "ada@example.com", "digest")
    found = users.find_by_email("ada@example.com")
    assert type(found) is UserOut
    assert "password" not in found.model_dump()


def test_find_by_email_with_password(users):
    users.create("Ada", "ada@example.com", "digest")
    found = users.find_by_email("ada@example.com", include_password=True)
    assert isinstance(found, UserCredentials)
    assert found.password == "digest"


def test_missing_user_is_none(users):
    assert users.find_by_id("nope") is None
    assert users.find_by_email("ghost@example.com") is None
    assert users.update("nope", name="Ghost") is None


def test_duplicate_email_conflicts(users, db_session):
    users.create("Ada", "ada@example.com", "digest")
    with pytest.raises(Conflict):
        users.create("Imposter", "ada@example.com", "other")
    assert db_session.scalar(select(func.count()).select_from(User)) == 1


def test_update_fields(users):
    created = users.create("Ada", "ada@example.com", "digest")
    updated = users.update(created.id, name="Ada Lovelace")
    assert updated.name == "Ada Lovelace"
    assert users.find_by_email("ada@example.com").name == "Ada Lovelace"


def test_update_rejects_unknown_fields(users):
    created = users.create("Ada", "ada@example.com", "digest")
    with pytest.raises(ValueError):
        users.update(created.id, id="other")


def test_update_to_taken_email_conflicts(users):
    users.create("Ada", "ada@example.com", "digest")
    grace = users.create("Grace", "grace@example.com", "digest")
    with pytest.raises(Conflict):
        users.update(grace.id, email="ada@example.com")


def test_store_errors_surface_as_store_failure(users, database):
    database.drop_all()
    with pytest.raises(StoreFailure):
        users.find_by_email("ada@example.com")
