"""Read models returned by the user service."""

from storefront.shared.model import CamelModel, UtcDateTime


class UserProfile(CamelModel):
    id: str
    firstname: str
    lastname: str
    email: str
    mobilenumber: str | None = None
    avatar: str | None = None
    role: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class LoginResult(CamelModel):
    id: str
    name: str
    email: str
    role: str
    token: str
    refresh_token: str
    expires_at: UtcDateTime
    created_at: UtcDateTime
    updated_at: UtcDateTime


class TokenPair(CamelModel):
    token: str
    expires_at: UtcDateTime


class AddressView(CamelModel):
    id: str
    firstname: str
    lastname: str
    street: str
    city: str
    state: str
    zipcode: str
    country: str
    phone: str
    is_default: bool
