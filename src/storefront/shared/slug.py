import re
import unicodedata

from protean.exceptions import ValidationError

_SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


def slugify(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")


def validate_slug(slug: str, field: str = "slug") -> str:
    if not slug:
        raise ValidationError({field: ["Slug cannot be empty"]})

    if not _SLUG_PATTERN.match(slug):
        raise ValidationError({field: ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

    if slug.startswith("-") or slug.endswith("-"):
        raise ValidationError({field: ["Slug must not start or end with a hyphen"]})

    if "--" in slug:
        raise ValidationError({field: ["Slug must not contain consecutive hyphens"]})

    return slug
