"""Wishlist entries: a set of (user, product) pairs."""

from datetime import UTC, datetime

from protean import Index
from protean.fields import DateTime, Identifier

from storefront.domain import storefront


@storefront.aggregate(indexes=[Index("user_id", "product_id", unique=True, name="uq_wishlist_user_product")])
class WishlistItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    created_at = DateTime()

    @classmethod
    def add(cls, user_id, product_id):
        return cls(user_id=user_id, product_id=product_id, created_at=datetime.now(UTC))
