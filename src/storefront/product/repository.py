"""Repositories for the Product and Category aggregates."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from protean.utils.query import Q

from storefront.domain import storefront
from storefront.product.category import Category
from storefront.product.product import Product
from storefront.shared.pagination import PageRequest


class ProductSort(str, Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NEWEST = "newest"
    RATING = "rating"


_ORDERING = {
    ProductSort.PRICE_ASC: ["price", "id"],
    ProductSort.PRICE_DESC: ["-price", "-id"],
    ProductSort.NEWEST: ["-created_at", "-id"],
    ProductSort.RATING: ["-rating", "-reviews_count", "-id"],
}


@dataclass(frozen=True)
class ProductFilter:
    category_id: str | None = None
    brand: str | None = None
    featured: bool | None = None
    search: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None

    def criteria(self) -> Q:
        """Only active products, narrowed by whichever filters are set."""
        criteria = Q(is_active=True)
        if self.category_id is not None:
            criteria &= Q(category_id=self.category_id)
        if self.brand:
            criteria &= Q(brand__icontains=self.brand)
        if self.featured is not None:
            criteria &= Q(is_featured=self.featured)
        if self.search:
            criteria &= Q(name__icontains=self.search) | Q(brand__icontains=self.search)
        if self.min_price is not None:
            criteria &= Q(price__gte=self.min_price)
        if self.max_price is not None:
            criteria &= Q(price__lte=self.max_price)
        return criteria


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_slug(self, slug: str) -> Product | None:
        return self.query.filter(slug=slug).all().first

    def find_many(self, product_ids) -> dict[str, Product]:
        if not product_ids:
            return {}
        products = self.query.filter(id__in=list(product_ids)).limit(None).all().items
        return {str(product.id): product for product in products}

    def search(
        self,
        criteria: ProductFilter,
        page: PageRequest,
        sort: ProductSort = ProductSort.NEWEST,
    ) -> tuple[list[Product], int]:
        """One page of active products matching ``criteria`` and the total number of matches."""
        results = (
            self.query.filter(criteria.criteria())
            .order_by(_ORDERING[sort])
            .offset(page.offset)
            .limit(page.limit)
            .all()
        )
        return results.items, results.total

    def reserve_stock(self, product_id: str, quantity: int) -> bool:
        """Take ``quantity`` units off the product's stock if that many are left.

        A single conditional ``UPDATE ... SET stock = stock - :q WHERE id = :id
        AND stock >= :q``: the check and the decrement happen in one statement,
        so concurrent orders cannot both pass a stale check. The version column
        moves with it, which makes any copy of the product loaded earlier in a
        competing transaction fail on save. Returns False when no row matched.
        """
        model = self._dao.database_model_cls
        updated = self._dao._update_all(
            Q(id=product_id, stock__gte=quantity),
            {"stock": model.stock - quantity, "_version": model._version + 1},
        )
        return updated == 1


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        return self.query.filter(slug=slug).all().first

    def find_active(self) -> list[Category]:
        return self.query.filter(is_active=True).order_by("name").limit(None).all().items
