"""FastAPI endpoints for the catalogue: products and categories."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_identity, get_product_service
from storefront.api.envelope import respond
from storefront.api.schemas import CreateCategoryRequest, CreateProductRequest, UpdateProductRequest
from storefront.auth.identity import Identity
from storefront.product.repository import ProductFilter, ProductSort
from storefront.product.service import ProductService

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


# --- Product endpoints ---


@product_router.get("")
async def list_products(
    category: str | None = Query(None),
    brand: str | None = Query(None),
    featured: bool | None = Query(None),
    search: str | None = Query(None),
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    sort: ProductSort = Query(ProductSort.NEWEST),
    page: int | None = Query(None),
    limit: int | None = Query(None),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    criteria = ProductFilter(
        category_id=category,
        brand=brand,
        featured=featured,
        search=search,
        min_price=min_price,
        max_price=max_price,
    )
    return respond(service.find_all(criteria, page=page, limit=limit, sort=sort))


@product_router.get("/{product_id}")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)) -> JSONResponse:
    return respond(service.find_by_id(product_id))


@product_router.post("", status_code=201)
async def create_product(
    body: CreateProductRequest,
    identity: Identity = Depends(get_identity),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return respond(service.create(identity, **body.model_dump()))


@product_router.patch("/{product_id}")
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    identity: Identity = Depends(get_identity),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return respond(service.update(identity, product_id, **body.model_dump(exclude_unset=True)))


@product_router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    identity: Identity = Depends(get_identity),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return respond(service.delete(identity, product_id))


# --- Category endpoints ---


@category_router.get("")
async def list_categories(service: ProductService = Depends(get_product_service)) -> JSONResponse:
    return respond(service.list_categories())


@category_router.post("", status_code=201)
async def create_category(
    body: CreateCategoryRequest,
    identity: Identity = Depends(get_identity),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return respond(service.create_category(identity, **body.model_dump()))
