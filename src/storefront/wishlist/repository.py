"""Repository for wishlist entries."""

from protean.utils.query import Q

from storefront.domain import storefront
from storefront.shared.pagination import PageRequest
from storefront.wishlist.wishlist import WishlistItem


@storefront.repository(part_of=WishlistItem)
class WishlistRepository:
    def find_entry(self, user_id, product_id) -> WishlistItem | None:
        return self.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first

    def find_page(self, user_id, page: PageRequest) -> tuple[list[WishlistItem], int]:
        results = (
            self.query.filter(user_id=str(user_id))
            .order_by(["-created_at", "-id"])
            .offset(page.offset)
            .limit(page.limit)
            .all()
        )
        return results.items, results.total

    def remove(self, item: WishlistItem) -> None:
        self._dao.delete(item)

    def clear(self, user_id) -> int:
        """Delete every entry of the user in one statement; returns how many went."""
        return self._dao._delete_all(Q(user_id=str(user_id)))
