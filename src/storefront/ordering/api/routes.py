"""FastAPI endpoints for the cart and checkout."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.api.dependencies import current_identity
from storefront.identity.authorization import Identity
from storefront.ordering.api.schemas import (
    AddCartItemRequest,
    CartResponse,
    OrderListResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateCartItemRequest,
)
from storefront.ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartItemQuantity
from storefront.ordering.cart.queries import get_cart
from storefront.ordering.order.checkout import PlaceOrder, place_order
from storefront.ordering.order.queries import get_order, list_orders_for_user

cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


# --- Cart endpoints ---


@cart_router.get("", response_model=CartResponse)
async def view_cart(identity: Identity = Depends(current_identity)) -> CartResponse:
    return CartResponse.from_view(get_cart(identity.user_id))


@cart_router.post("/items", status_code=201, response_model=CartResponse)
async def add_cart_item(body: AddCartItemRequest, identity: Identity = Depends(current_identity)) -> CartResponse:
    command = AddToCart(
        user_id=identity.user_id,
        product_id=body.product_id,
        size=body.size,
        color=body.color,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return CartResponse.from_view(get_cart(identity.user_id))


@cart_router.put("/items/{item_id}", response_model=CartResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, identity: Identity = Depends(current_identity)
) -> CartResponse:
    command = UpdateCartItemQuantity(user_id=identity.user_id, item_id=item_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return CartResponse.from_view(get_cart(identity.user_id))


@cart_router.delete("/items/{item_id}", response_model=CartResponse)
async def remove_cart_item(item_id: str, identity: Identity = Depends(current_identity)) -> CartResponse:
    current_domain.process(RemoveFromCart(user_id=identity.user_id, item_id=item_id), asynchronous=False)
    return CartResponse.from_view(get_cart(identity.user_id))


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def checkout(body: PlaceOrderRequest, identity: Identity = Depends(current_identity)) -> OrderResponse:
    """Check out the caller's cart. Totals are always computed server-side."""
    billing = None if body.same_as_shipping or body.billing_address is None else body.billing_address
    command = PlaceOrder(
        user_id=identity.user_id,
        shipping_address=body.shipping_address.model_dump_json(),
        billing_address=billing.model_dump_json() if billing else None,
        payment_method=body.payment_method,
    )
    order_id = place_order(command)
    return OrderResponse.from_order(get_order(order_id, identity))


@order_router.get("", response_model=OrderListResponse)
async def my_orders(identity: Identity = Depends(current_identity)) -> OrderListResponse:
    orders = list_orders_for_user(identity.user_id, identity)
    return OrderListResponse(orders=[OrderResponse.from_order(o) for o in orders])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def order_detail(order_id: str, identity: Identity = Depends(current_identity)) -> OrderResponse:
    return OrderResponse.from_order(get_order(order_id, identity))
