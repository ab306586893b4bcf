"""FastAPI endpoints for the public catalog."""

from fastapi import APIRouter, Query

from storefront.catalogue.api.schemas import ProductListResponse, ProductResponse
from storefront.catalogue.product.queries import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    Page,
    ProductFilters,
    get_product,
    list_active_products,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    search: str | None = None,
    age_group: str | None = None,
    category: str | None = None,
    featured: bool | None = None,
    price_range: str | None = None,
    size: str | None = None,
    sort: str = "featured",
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
) -> ProductListResponse:
    filters = ProductFilters(
        search=search,
        age_group=age_group,
        category=category,
        featured=featured,
        price_range=price_range,
        size=size,
        sort=sort,
    )
    products = list_active_products(filters, Page(limit=limit, offset=offset))
    return ProductListResponse(
        products=[ProductResponse.from_product(p) for p in products],
        limit=limit,
        offset=offset,
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def product_detail(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(get_product(product_id))
