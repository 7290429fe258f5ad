"""User aggregate root with Address entity."""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Integer, String

from storefront.domain import storefront

MAX_ADDRESSES = 10

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Role(str, Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


@storefront.entity(part_of="User")
class Address:
    """A shipping address owned by a user. Orders copy it at purchase time."""

    firstname = String(required=True, max_length=100)
    lastname = String(required=True, max_length=100)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zipcode = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    phone = String(required=True, max_length=20)
    is_default = Boolean(default=False)
    position = Integer(default=0)


@storefront.aggregate
class User:
    """A registered account: credentials, profile, role and addresses."""

    firstname = String(required=True, max_length=100)
    lastname = String(required=True, max_length=100)
    email = String(required=True, max_length=254, unique=True)
    mobilenumber = String(max_length=20)
    avatar = String(max_length=500, sanitize=False)
    password = String(required=True, max_length=255, sanitize=False)
    role = String(max_length=20, choices=Role, default=Role.CUSTOMER.value)
    refresh_token = String(max_length=255, sanitize=False)
    addresses = HasMany(Address)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def addresses_cannot_exceed_maximum(self):
        if len(self.addresses) > MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Cannot have more than {MAX_ADDRESSES} addresses"]})

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(
        cls,
        firstname,
        lastname,
        email,
        password_hash,
        mobilenumber=None,
        avatar=None,
        role=Role.CUSTOMER,
    ):
        now = datetime.now(UTC)
        return cls(
            firstname=firstname,
            lastname=lastname,
            email=email.lower(),
            password=password_hash,
            mobilenumber=mobilenumber,
            avatar=avatar,
            role=Role(role).value,
            created_at=now,
            updated_at=now,
        )

    @property
    def name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()

    @property
    def ordered_addresses(self) -> list[Address]:
        return sorted(self.addresses, key=lambda a: a.position)

    def update_profile(self, firstname=_UNSET, lastname=_UNSET, mobilenumber=_UNSET, avatar=_UNSET):
        if firstname is not _UNSET:
            if not firstname:
                raise ValidationError({"firstname": ["First name cannot be empty"]})
            self.firstname = firstname
        if lastname is not _UNSET:
            if not lastname:
                raise ValidationError({"lastname": ["Last name cannot be empty"]})
            self.lastname = lastname
        if mobilenumber is not _UNSET:
            self.mobilenumber = mobilenumber
        if avatar is not _UNSET:
            self.avatar = avatar
        self.updated_at = datetime.now(UTC)

    def start_session(self, refresh_token: str) -> None:
        self.refresh_token = refresh_token

    def end_session(self) -> None:
        self.refresh_token = None

    def address(self, address_id) -> Address | None:
        return next((a for a in self.addresses if str(a.id) == str(address_id)), None)

    def add_address(
        self,
        firstname,
        lastname,
        street,
        city,
        state,
        zipcode,
        country,
        phone,
        is_default=False,
    ):
        if len(self.addresses) >= MAX_ADDRESSES:
            raise ValidationError({"addresses": [f"Cannot have more than {MAX_ADDRESSES} addresses"]})

        # First address is always the default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for existing in self.addresses:
                    if existing.is_default:
                        existing.is_default = False

            address = Address(
                firstname=firstname,
                lastname=lastname,
                street=street,
                city=city,
                state=state,
                zipcode=zipcode,
                country=country,
                phone=phone,
                is_default=is_default,
                position=max((a.position for a in self.addresses), default=-1) + 1,
            )
            self.add_addresses(address)

        self.updated_at = datetime.now(UTC)
        return address

    def remove_address(self, address_id):
        address = self.address(address_id)
        if address is None:
            return None

        with atomic_change(self):
            self.remove_addresses(address)
            remaining = self.ordered_addresses
            if address.is_default and remaining:
                remaining[0].is_default = True

        self.updated_at = datetime.now(UTC)
        return address
