"""Domain initialization and configuration."""

from protean.domain import Domain

from storefront.auth.revocation import InMemoryRevocationCache
from storefront.config import load_settings
from storefront.utils.logging import configure_logging, get_logger

# Domain Composition Root
storefront = Domain(name="storefront")

# Application settings from the [custom] section of domain.toml
settings = load_settings(storefront.config)

# Configure logging for the application
configure_logging(settings.env, settings.logging)

# Get logger for this module
logger = get_logger(__name__)

# Revoked bearer tokens, process local
revocations = InMemoryRevocationCache()
