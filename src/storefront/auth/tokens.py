"""Bearer token issuing and verification (signed JWTs)."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import ExpiredSignatureError, JWTError, jwt

from storefront.config import AuthSettings


class TokenError(Exception):
    pass


class TokenExpired(TokenError):
    pass


class TokenInvalid(TokenError):
    pass


@dataclass(frozen=True)
class AccessToken:
    token: str
    expires_at: datetime


def create_access_token(user_id: str, settings: AuthSettings, now: datetime | None = None) -> AccessToken:
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    claims = {"id": str(user_id), "jti": uuid4().hex, "iat": issued_at, "exp": expires_at}
    token = jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)
    return AccessToken(token=token, expires_at=expires_at)


def decode_token(token: str, settings: AuthSettings) -> dict:
    """Return the token's claims.

    Raises:
        TokenExpired: signature is fine but ``exp`` has passed.
        TokenInvalid: anything else wrong with the token.
    """
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpired("Token has expired") from exc
    except JWTError as exc:
        raise TokenInvalid("Invalid token") from exc

    if not isinstance(claims.get("id"), str) or not claims["id"]:
        raise TokenInvalid("Invalid token")
    return claims


def new_refresh_token() -> str:
    return secrets.token_urlsafe(48)
