"""Product catalogue service: browsing for everyone, management for admins."""

import json
from http import HTTPStatus

from protean.utils.globals import current_domain

from storefront.auth.identity import Identity
from storefront.product.categories import CreateCategory
from storefront.product.category import Category
from storefront.product.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.product.product import Product
from storefront.product.repository import ProductFilter, ProductSort
from storefront.product.views import CategoryView, ProductPage, ProductView
from storefront.shared.errors import NotFoundError
from storefront.shared.pagination import PageRequest, Pagination
from storefront.shared.policy import Action, authorize
from storefront.shared.response import ServiceResponse, service_operation
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 12


class ProductService:
    @property
    def products(self):
        return current_domain.repository_for(Product)

    @property
    def categories(self):
        return current_domain.repository_for(Category)

    def _product(self, product_id) -> Product:
        product = self.products.get_or_none(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    @service_operation("Error retrieving products")
    def find_all(
        self,
        criteria: ProductFilter | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort: ProductSort = ProductSort.NEWEST,
    ) -> ServiceResponse:
        request = PageRequest.clamp(page, limit, default_limit=DEFAULT_PAGE_SIZE)
        products, total = self.products.search(criteria or ProductFilter(), request, sort)
        payload = ProductPage(
            data=[ProductView.model_validate(product) for product in products],
            pagination=Pagination.build(request, total),
        )
        return ServiceResponse.ok("Products retrieved", payload)

    @service_operation("Error finding product")
    def find_by_id(self, product_id: str) -> ServiceResponse:
        return ServiceResponse.ok("Product found", ProductView.model_validate(self._product(product_id)))

    @service_operation("Error creating product")
    def create(self, identity: Identity, images=None, **fields) -> ServiceResponse:
        authorize(identity, Action.MANAGE_CATALOGUE)

        command = CreateProduct(
            **_json_ready(fields),
            images=json.dumps(images) if images else None,
        )
        product_id = current_domain.process(command, asynchronous=False)

        product = self._product(product_id)
        logger.info("Product created", product_id=product_id, slug=product.slug, created_by=identity.user_id)
        return ServiceResponse.ok("Product created successfully", ProductView.model_validate(product), HTTPStatus.CREATED)

    @service_operation("Error updating product")
    def update(self, identity: Identity, product_id: str, **changes) -> ServiceResponse:
        authorize(identity, Action.MANAGE_CATALOGUE)

        current_domain.process(
            UpdateProduct(product_id=product_id, changes=json.dumps(_json_ready(changes))),
            asynchronous=False,
        )

        logger.info("Product updated", product_id=product_id, fields=sorted(changes))
        return ServiceResponse.ok("Product updated", ProductView.model_validate(self._product(product_id)))

    @service_operation("Error deleting product")
    def delete(self, identity: Identity, product_id: str) -> ServiceResponse:
        authorize(identity, Action.MANAGE_CATALOGUE)

        view = ProductView.model_validate(self._product(product_id))
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)

        logger.info("Product deleted", product_id=product_id, deleted_by=identity.user_id)
        return ServiceResponse.ok("Product deleted", view)

    # --- Categories ---

    @service_operation("Error retrieving categories")
    def list_categories(self) -> ServiceResponse:
        categories = self.categories.find_active()
        return ServiceResponse.ok("Categories retrieved", [CategoryView.model_validate(c) for c in categories])

    @service_operation("Error creating category")
    def create_category(self, identity: Identity, name, slug=None, description=None) -> ServiceResponse:
        authorize(identity, Action.MANAGE_CATALOGUE)

        category_id = current_domain.process(
            CreateCategory(name=name, slug=slug, description=description),
            asynchronous=False,
        )

        category = self.categories.get(category_id)
        logger.info("Category created", category_id=category_id, slug=category.slug)
        return ServiceResponse.ok("Category created", CategoryView.model_validate(category), HTTPStatus.CREATED)


def _json_ready(fields: dict) -> dict:
    """Amounts travel in commands as strings so no precision is lost."""
    return {
        key: str(value) if key in ("price", "original_price") and value is not None else value
        for key, value in fields.items()
    }
