"""FastAPI endpoints for the back office. Every route is admin-only."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.admin.api.schemas import RecordPaymentRequest, StatsResponse, UpdateOrderStatusRequest
from storefront.admin.stats import dashboard_stats
from storefront.catalogue.api.schemas import (
    CreateProductRequest,
    ProductIdResponse,
    ProductResponse,
    StatusResponse,
    UpdateProductRequest,
)
from storefront.catalogue.product.creation import CreateProduct
from storefront.catalogue.product.management import DeactivateProduct, UpdateProduct
from storefront.catalogue.product.queries import get_product
from storefront.identity.api.dependencies import current_identity
from storefront.identity.authorization import Identity
from storefront.ordering.api.schemas import OrderListResponse, OrderResponse
from storefront.ordering.order.queries import get_order, list_all_orders
from storefront.ordering.order.status import RecordPayment, UpdateOrderStatus

router = APIRouter(prefix="/admin", tags=["admin"])


def _json_list(values):
    return json.dumps(values) if values is not None else None


# --- Dashboard ---


@router.get("/stats", response_model=StatsResponse)
async def stats(identity: Identity = Depends(current_identity)) -> StatsResponse:
    figures = dashboard_stats(identity)
    return StatsResponse(
        total_revenue=str(figures.total_revenue),
        total_orders=figures.total_orders,
        total_products=figures.total_products,
        total_customers=figures.total_customers,
        average_order_value=str(figures.average_order_value),
    )


# --- Orders ---


@router.get("/orders", response_model=OrderListResponse)
async def all_orders(
    status: str | None = None,
    user_id: str | None = None,
    identity: Identity = Depends(current_identity),
) -> OrderListResponse:
    orders = list_all_orders(identity, status=status, user_id=user_id)
    return OrderListResponse(orders=[OrderResponse.from_order(o) for o in orders])


@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, identity: Identity = Depends(current_identity)
) -> OrderResponse:
    command = UpdateOrderStatus(
        actor_id=identity.user_id,
        actor_role=identity.role,
        order_id=order_id,
        status=body.status,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id, identity))


@router.patch("/orders/{order_id}/payment", response_model=OrderResponse)
async def record_payment(
    order_id: str, body: RecordPaymentRequest, identity: Identity = Depends(current_identity)
) -> OrderResponse:
    command = RecordPayment(
        actor_id=identity.user_id,
        actor_role=identity.role,
        order_id=order_id,
        outcome=body.outcome,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id, identity))


# --- Products ---


@router.post("/products", status_code=201, response_model=ProductIdResponse)
async def create_product(body: CreateProductRequest, identity: Identity = Depends(current_identity)) -> ProductIdResponse:
    command = CreateProduct(
        actor_id=identity.user_id,
        actor_role=identity.role,
        sku=body.sku,
        name=body.name,
        description=body.description,
        price=body.price,
        original_price=body.original_price,
        stock=body.stock,
        sizes=_json_list(body.sizes),
        colors=_json_list(body.colors),
        images=_json_list(body.images),
        age_group=body.age_group,
        category=body.category,
        is_featured=body.is_featured,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=product_id)


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, identity: Identity = Depends(current_identity)
) -> ProductResponse:
    command = UpdateProduct(
        actor_id=identity.user_id,
        actor_role=identity.role,
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        original_price=body.original_price,
        stock=body.stock,
        sizes=_json_list(body.sizes),
        colors=_json_list(body.colors),
        images=_json_list(body.images),
        age_group=body.age_group,
        category=body.category,
        is_featured=body.is_featured,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(get_product(product_id, include_inactive=True))


@router.delete("/products/{product_id}", response_model=StatusResponse)
async def deactivate_product(product_id: str, identity: Identity = Depends(current_identity)) -> StatusResponse:
    command = DeactivateProduct(actor_id=identity.user_id, actor_role=identity.role, product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
