"""Repository for the Order aggregate."""

from protean.utils.query import Q

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.shared.pagination import PageRequest


@storefront.repository(part_of=Order)
class OrderRepository:
    def find_page(
        self,
        page: PageRequest,
        user_id: str | None = None,
        status: str | None = None,
    ) -> tuple[list[Order], int]:
        """Newest first. ``user_id=None`` means every user's orders."""
        criteria = Q()
        if user_id is not None:
            criteria &= Q(user_id=str(user_id))
        if status is not None:
            criteria &= Q(status=status)

        results = (
            self.query.filter(criteria)
            .order_by(["-created_at", "-id"])
            .offset(page.offset)
            .limit(page.limit)
            .all()
        )
        return results.items, results.total
