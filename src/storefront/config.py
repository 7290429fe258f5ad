"""Typed view over the application settings in ``domain.toml``.

Protean loads ``domain.toml`` when the domain is constructed: top-level keys
apply everywhere, the table named by ``PROTEAN_ENV`` (``[test]``,
``[production]``, ...) overlays them, and ``${VAR|default}`` placeholders are
filled from the environment. The storefront's own keys live under
``[custom]``; this module turns them into frozen settings objects so the rest
of the code never reaches into raw dictionaries.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthSettings:
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60


@dataclass(frozen=True)
class CorsSettings:
    allow_origins: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class LoggingSettings:
    level: str | None = None
    log_dir: str | None = None


@dataclass(frozen=True)
class Settings:
    env: str
    auth: AuthSettings
    cors: CorsSettings
    logging: LoggingSettings


def load_settings(config: Mapping[str, Any]) -> Settings:
    """Build :class:`Settings` from a loaded domain configuration."""
    custom = config.get("custom") or {}
    env = (config.get("env") or "development").lower()

    return Settings(
        env=env,
        auth=AuthSettings(
            secret_key=custom.get("jwt_secret") or "dev-secret-change-me",
            algorithm=custom.get("jwt_algorithm", "HS256"),
            access_token_expire_minutes=int(custom.get("access_token_expire_minutes", 60)),
        ),
        cors=CorsSettings(allow_origins=list(custom.get("cors_allow_origins", []))),
        logging=LoggingSettings(
            level=custom.get("log_level") or None,
            log_dir=custom.get("log_dir") or None,
        ),
    )
