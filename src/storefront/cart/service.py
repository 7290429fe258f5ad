"""Cart service: read and modify the authenticated user's cart."""

from datetime import UTC, datetime

from protean.utils.globals import current_domain

from storefront.auth.identity import Identity
from storefront.cart.cart import Cart
from storefront.cart.contents import AddToCart, ClearCart, RemoveFromCart, UpdateCartItem
from storefront.cart.views import CartItemView, CartView
from storefront.product.product import Product
from storefront.shared.money import ZERO, total_of
from storefront.shared.response import ServiceResponse, service_operation


def build_cart_view(user_id: str, cart: Cart | None, products: dict) -> tuple[str, CartView]:
    """Cart read model from live product data, with the message to report it under.

    ``products`` maps product id to the current product. Lines whose product
    no longer exists are left out.
    """
    items = []
    if cart is not None:
        for item in cart.ordered_items:
            product = products.get(str(item.product_id))
            if product is None:
                continue
            items.append(
                CartItemView(
                    product_id=str(product.id),
                    name=product.name,
                    slug=product.slug,
                    price=product.price,
                    image=product.primary_image,
                    stock=product.stock,
                    quantity=item.quantity,
                )
            )

    if not items:
        return "Cart is empty", CartView(
            id=0,
            user_id=user_id,
            items=[],
            items_count=0,
            total_amount=ZERO,
            updated_at=datetime.now(UTC),
        )

    return "Cart retrieved", CartView(
        id=str(cart.id),
        user_id=str(cart.user_id),
        items=items,
        items_count=len(items),
        total_amount=total_of((item.price, item.quantity) for item in items),
        updated_at=cart.updated_at,
    )


class CartService:
    def _read_back(self, user_id: str) -> ServiceResponse:
        cart = current_domain.repository_for(Cart).find_by_user(user_id)
        product_ids = [item.product_id for item in cart.items] if cart is not None else []
        products = current_domain.repository_for(Product).find_many(product_ids)
        message, view = build_cart_view(user_id, cart, products)
        return ServiceResponse.ok(message, view)

    @service_operation("Error fetching cart")
    def get_cart(self, identity: Identity) -> ServiceResponse:
        return self._read_back(identity.user_id)

    @service_operation("Error adding to cart")
    def add_item(self, identity: Identity, product_id: str, quantity: int = 1) -> ServiceResponse:
        current_domain.process(
            AddToCart(user_id=identity.user_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
        return self._read_back(identity.user_id)

    @service_operation("Error updating cart item")
    def update_item(self, identity: Identity, product_id: str, quantity: int) -> ServiceResponse:
        current_domain.process(
            UpdateCartItem(user_id=identity.user_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
        return self._read_back(identity.user_id)

    @service_operation("Error removing item from cart")
    def remove_item(self, identity: Identity, product_id: str) -> ServiceResponse:
        current_domain.process(RemoveFromCart(user_id=identity.user_id, product_id=product_id), asynchronous=False)
        return self._read_back(identity.user_id)

    @service_operation("Error clearing cart")
    def clear(self, identity: Identity) -> ServiceResponse:
        current_domain.process(ClearCart(user_id=identity.user_id), asynchronous=False)
        return ServiceResponse.ok("Cart cleared successfully")
