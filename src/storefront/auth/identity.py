"""Authentication of bearer tokens on incoming requests."""

from dataclasses import dataclass
from datetime import UTC, datetime

from storefront.auth.revocation import RevocationCache
from storefront.auth.tokens import TokenExpired, TokenInvalid, decode_token
from storefront.config import AuthSettings
from storefront.shared.errors import UnauthorizedError
from storefront.user.repository import UserRepository


@dataclass(frozen=True)
class Identity:
    """Who is making the request, as established from their bearer token."""

    user_id: str
    email: str
    role: str
    token: str
    expires_at: datetime

    def remaining_validity(self, now: datetime | None = None) -> float:
        """Seconds until the token expires, never negative."""
        now = now or datetime.now(UTC)
        return max(0.0, (self.expires_at - now).total_seconds())


def authenticate(
    token: str | None,
    users: UserRepository,
    revocations: RevocationCache,
    settings: AuthSettings,
) -> Identity:
    """Check the token: present, not revoked, valid signature and expiry, user still exists."""
    if not token:
        raise UnauthorizedError("Token not found")

    if revocations.get(token):
        raise UnauthorizedError("Token is blacklisted")

    try:
        claims = decode_token(token, settings)
    except TokenExpired as exc:
        raise UnauthorizedError("Token has expired") from exc
    except TokenInvalid as exc:
        raise UnauthorizedError("Invalid token") from exc

    user = users.get_or_none(claims["id"])
    if user is None:
        raise UnauthorizedError("User not found")

    return Identity(
        user_id=str(user.id),
        email=user.email,
        role=user.role,
        token=token,
        expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
    )
