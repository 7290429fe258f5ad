"""Category: a flat grouping of products in the catalogue."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from storefront.domain import storefront
from storefront.shared.slug import slugify, validate_slug


@storefront.aggregate
class Category:
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=120, unique=True)
    description = Text()
    is_active = Boolean(default=True)
    created_at = DateTime()

    @classmethod
    def create(cls, name, slug=None, description=None):
        if not name or not name.strip():
            raise ValidationError({"name": ["Category name cannot be empty"]})

        return cls(
            name=name.strip(),
            slug=validate_slug(slug or slugify(name)),
            description=description,
            is_active=True,
            created_at=datetime.now(UTC),
        )
