"""
Unit tests for the User aggregate.
"""

import pytest

from commerce_service.core.errors import (
    InvalidEmailError,
    InvalidNameError,
    InvalidPasswordError,
)
from commerce_service.domain.user import User


@pytest.fixture
def user():
    return User.create(email="john@example.com", name="John", password="s3cret-pass")


class TestUserCreate:

    def test_create(self, user):
        assert user.id is None
        assert user.email == "john@example.com"
        assert user.name == "John"
        assert user.created_at == user.updated_at
        assert not user.is_deleted()

    @pytest.mark.parametrize("email,name,password,error", [
        ("", "John", "pw", InvalidEmailError),
        ("john@example.com", "", "pw", InvalidNameError),
        ("john@example.com", "John", "", InvalidPasswordError),
        ("", "", "", InvalidEmailError),
        ("john@example.com", "", "", InvalidNameError),
    ])
    def test_required_fields_in_order(self, email, name, password, error):
        with pytest.raises(error):
            User.create(email=email, name=name, password=password)

    def test_password_not_in_repr(self, user):
        assert "s3cret-pass" not in repr(user)


class TestUserUpdate:

    def test_update_name_only(self, user):
        user.update_info(name="Jane", email="")

        assert user.name == "Jane"
        assert user.email == "john@example.com"

    def test_update_email_only(self, user):
        user.update_info(email="jane@example.com")

        assert user.name == "John"
        assert user.email == "jane@example.com"

    def test_update_nothing_still_bumps_timestamp(self, user):
        before = user.updated_at
        user.update_info()

        assert user.name == "John"
        assert user.updated_at >= before

    def test_change_password(self, user):
        user.change_password("another-pass")
        assert user.password == "another-pass"

    def test_change_password_empty(self, user):
        with pytest.raises(InvalidPasswordError):
            user.change_password("")
        assert user.password == "s3cret-pass"


class TestUserSoftDelete:

    def test_delete_and_activate(self, user):
        user.mark_as_deleted()
        assert user.is_deleted()
        assert user.deleted_at == user.updated_at

        user.activate()
        assert not user.is_deleted()


class TestEntityIdentity:

    def test_equal_by_id(self, user):
        other = User.create(email="other@example.com", name="Other", password="pw")
        user.id = 5
        other.id = 5

        assert user == other
        assert hash(user) == hash(other)

    def test_unpersisted_equal_only_to_itself(self, user):
        twin = user.model_copy()

        assert user == user
        assert user != twin
