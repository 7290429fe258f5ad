"""Repository for the Cart aggregate."""

from protean.utils.globals import current_domain
from protean.utils.query import Q

from storefront.cart.cart import Cart, CartItem
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    def find_by_user(self, user_id) -> Cart | None:
        return self.query.filter(user_id=str(user_id)).all().first

    def discard(self, cart: Cart) -> None:
        """Delete the cart row together with its item rows."""
        current_domain.repository_for(CartItem)._dao._delete_all(Q(cart_id=str(cart.id)))
        self._dao.delete(cart)
