"""Product aggregate root with ProductImage entity."""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Decimal, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.money import ZERO, to_money
from storefront.shared.slug import validate_slug

MAX_IMAGES = 10

# Fields that may be changed through update_details()
_DETAIL_FIELDS = (
    "name",
    "slug",
    "brand",
    "description",
    "short_description",
    "price",
    "original_price",
    "discount",
    "sku",
    "stock",
    "is_active",
    "is_featured",
    "category_id",
)

_NULLABLE_FIELDS = frozenset({"brand", "description", "short_description", "original_price", "discount", "sku"})


@storefront.entity(part_of="Product")
class ProductImage:
    url = String(required=True, max_length=500, sanitize=False)
    alt_text = String(max_length=255)
    is_primary = Boolean(default=False)
    display_order = Integer(default=0)


@storefront.aggregate
class Product:
    """A sellable item. ``stock`` is the number of units left and never goes negative."""

    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255, unique=True)
    brand = String(max_length=100)
    description = Text()
    short_description = String(max_length=500)
    price = Decimal(required=True, precision=10, scale=2)
    original_price = Decimal(precision=10, scale=2)
    discount = String(max_length=50)
    sku = String(max_length=100)
    stock = Integer(default=0)
    rating = Decimal(precision=3, scale=2, min_value=0, max_value=5, default=ZERO)
    reviews_count = Integer(default=0)
    is_active = Boolean(default=True)
    is_featured = Boolean(default=False)
    category_id = Identifier(required=True)
    images = HasMany(ProductImage)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    @invariant.post
    def images_cannot_exceed_maximum(self):
        if len(self.images) > MAX_IMAGES:
            raise ValidationError({"images": [f"Cannot have more than {MAX_IMAGES} images"]})

    @invariant.post
    def exactly_one_primary_image_when_images_exist(self):
        if not self.images:
            return
        if len([img for img in self.images if img.is_primary]) != 1:
            raise ValidationError({"images": ["Exactly one image must be marked as primary"]})

    @classmethod
    def create(
        cls,
        name,
        slug,
        price,
        category_id,
        stock=0,
        brand=None,
        description=None,
        short_description=None,
        original_price=None,
        discount=None,
        sku=None,
        is_active=True,
        is_featured=False,
        images=None,
    ):
        if not name:
            raise ValidationError({"name": ["Product name cannot be empty"]})

        now = datetime.now(UTC)
        product = cls(
            name=name,
            slug=validate_slug(slug),
            brand=brand,
            description=description,
            short_description=short_description,
            price=_positive_amount(price, "price"),
            original_price=_positive_amount(original_price, "original_price") if original_price is not None else None,
            discount=discount,
            sku=sku,
            stock=_stock_level(stock),
            rating=ZERO,
            reviews_count=0,
            is_active=is_active,
            is_featured=is_featured,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        for image in images or []:
            product.add_image(**image)
        return product

    @property
    def ordered_images(self) -> list[ProductImage]:
        return sorted(self.images, key=lambda img: img.display_order)

    @property
    def primary_image(self) -> str | None:
        """URL of the image shown in carts, orders and wishlists."""
        images = self.ordered_images
        primary = next((img for img in images if img.is_primary), None)
        if primary is None and images:
            primary = images[0]
        return primary.url if primary is not None else None

    def update_details(self, **changes):
        unknown = set(changes) - set(_DETAIL_FIELDS)
        if unknown:
            raise ValidationError({field: [f"Unknown field '{field}'"] for field in sorted(unknown)})

        nulled = sorted(field for field, value in changes.items() if value is None and field not in _NULLABLE_FIELDS)
        if nulled:
            raise ValidationError({field: [f"{field} cannot be null"] for field in nulled})

        if "name" in changes and not changes["name"]:
            raise ValidationError({"name": ["Product name cannot be empty"]})
        if "slug" in changes:
            changes["slug"] = validate_slug(changes["slug"])
        if "price" in changes:
            changes["price"] = _positive_amount(changes["price"], "price")
        if changes.get("original_price") is not None:
            changes["original_price"] = _positive_amount(changes["original_price"], "original_price")
        if "stock" in changes:
            changes["stock"] = _stock_level(changes["stock"])

        with atomic_change(self):
            for field, value in changes.items():
                setattr(self, field, value)
            self.updated_at = datetime.now(UTC)

    def add_image(self, url, alt_text=None, is_primary=False):
        if len(self.images) >= MAX_IMAGES:
            raise ValidationError({"images": [f"Cannot have more than {MAX_IMAGES} images"]})

        # First image is always primary
        if not self.images:
            is_primary = True

        with atomic_change(self):
            if is_primary:
                for img in self.images:
                    if img.is_primary:
                        img.is_primary = False

            image = ProductImage(
                url=url,
                alt_text=alt_text,
                is_primary=is_primary,
                display_order=len(self.images),
            )
            self.add_images(image)
        return image

    def has_stock(self, quantity: int) -> bool:
        return self.stock >= quantity


def _positive_amount(value, field: str):
    amount = to_money(value)
    if amount <= ZERO:
        raise ValidationError({field: [f"{field.replace('_', ' ').capitalize()} must be greater than 0"]})
    return amount


def _stock_level(value) -> int:
    if value is None or int(value) < 0:
        raise ValidationError({"stock": ["Stock cannot be negative"]})
    return int(value)
