"""Tests for the User aggregate and its addresses."""

import pytest
from protean.exceptions import ValidationError

from storefront.user.user import MAX_ADDRESSES, Role, User


def _user():
    return User.register(firstname="John", lastname="Doe", email="John@Example.com", password_hash="hash")


def _address_fields(**overrides):
    fields = {
        "firstname": "John",
        "lastname": "Doe",
        "street": "123 Main St",
        "city": "Springfield",
        "state": "IL",
        "zipcode": "62701",
        "country": "US",
        "phone": "+15551234567",
    }
    fields.update(overrides)
    return fields


class TestUserRegister:
    def test_register_normalizes_email(self):
        assert _user().email == "john@example.com"

    def test_register_defaults_to_customer(self):
        assert _user().role == Role.CUSTOMER.value

    def test_register_admin(self):
        user = User.register(firstname="A", lastname="B", email="a@b.com", password_hash="h", role=Role.ADMIN)
        assert user.role == Role.ADMIN.value

    def test_register_stamps_timestamps_in_utc(self):
        user = _user()
        assert user.created_at.utcoffset().total_seconds() == 0
        assert user.updated_at == user.created_at

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValueError):
            User.register(firstname="A", lastname="B", email="a@b.com", password_hash="h", role="OWNER")

    def test_name(self):
        assert _user().name == "John Doe"


class TestUserProfile:
    def test_partial_update_keeps_other_fields(self):
        user = _user()
        user.update_profile(mobilenumber="+15550000000")
        assert user.mobilenumber == "+15550000000"
        assert user.firstname == "John"

    def test_empty_firstname_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _user().update_profile(firstname="")
        assert exc.value.messages["firstname"] == ["First name cannot be empty"]

    def test_avatar_can_be_cleared(self):
        user = _user()
        user.update_profile(avatar="https://cdn.example.com/a.png")
        user.update_profile(avatar=None)
        assert user.avatar is None


class TestUserSession:
    def test_start_and_end_session(self):
        user = _user()
        user.start_session("refresh-token")
        assert user.refresh_token == "refresh-token"
        user.end_session()
        assert user.refresh_token is None


class TestUserAddresses:
    def test_first_address_becomes_default(self):
        user = _user()
        address = user.add_address(**_address_fields())
        assert address.is_default is True

    def test_new_default_clears_previous(self):
        user = _user()
        first = user.add_address(**_address_fields())
        second = user.add_address(**_address_fields(city="Chicago"), is_default=True)
        assert first.is_default is False
        assert second.is_default is True

    def test_non_default_address_leaves_default_alone(self):
        user = _user()
        first = user.add_address(**_address_fields())
        second = user.add_address(**_address_fields(city="Chicago"))
        assert first.is_default is True
        assert second.is_default is False

    def test_addresses_keep_insertion_order(self):
        user = _user()
        user.add_address(**_address_fields())
        user.add_address(**_address_fields(city="Chicago"))
        assert [a.city for a in user.ordered_addresses] == ["Springfield", "Chicago"]

    def test_address_lookup_accepts_any_id_form(self):
        user = _user()
        address = user.add_address(**_address_fields())
        assert user.address(str(address.id)) is address
        assert user.address("missing") is None

    def test_removing_default_promotes_next_address(self):
        user = _user()
        first = user.add_address(**_address_fields())
        second = user.add_address(**_address_fields(city="Chicago"))

        user.remove_address(first.id)

        assert user.addresses == [second]
        assert second.is_default is True

    def test_removing_unknown_address_returns_none(self):
        assert _user().remove_address("missing") is None

    def test_address_limit(self):
        user = _user()
        for _ in range(MAX_ADDRESSES):
            user.add_address(**_address_fields())
        with pytest.raises(ValidationError):
            user.add_address(**_address_fields())

    def test_missing_address_field_is_rejected(self):
        with pytest.raises(ValidationError):
            _user().add_address(**_address_fields(city=""))
