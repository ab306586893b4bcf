"""Checkout — converts the caller's cart into an order.

The handler runs inside a single Unit of Work: stock reservations, the new
order and the emptied cart are committed together or not at all. A product
saved by another checkout in the meantime fails that commit with a version
conflict; ``place_order`` retries once and then reports ``InsufficientStock``.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.inventory.reconciler import MAX_ATTEMPTS, check_availability, reserve_stock, stock_changed
from storefront.ordering.cart.cart import Cart
from storefront.ordering.order.numbering import next_order_number
from storefront.ordering.order.order import Address, Order
from storefront.ordering.pricing import PricingPolicy, price_lines
from storefront.shared.errors import EmptyCart

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier(required=True)
    shipping_address: Text(required=True)  # JSON: address dict
    billing_address: Text()  # JSON: address dict; omitted means same as shipping
    payment_method: String(required=True, max_length=20)


def _address(raw, field_name) -> Address:
    data = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(data, dict):
        raise ValidationError({field_name: ["Address must be an object"]})
    try:
        return Address(**data)
    except ValidationError as exc:
        raise ValidationError({field_name: [f"{k}: {', '.join(v)}" for k, v in exc.messages.items()]}) from exc


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        carts = current_domain.repository_for(Cart)
        cart = carts.for_user(command.user_id)
        if cart is None or not cart.items:
            raise EmptyCart({"cart": ["Your cart is empty"]})

        shipping_address = _address(command.shipping_address, "shipping_address")
        billing_address = (
            _address(command.billing_address, "billing_address") if command.billing_address else shipping_address
        )

        products = current_domain.repository_for(Product)
        lines = []
        for item in cart.ordered_items:
            try:
                product = products.get(item.product_id)
            except ObjectNotFoundError:
                product = None
            if product is None or not product.is_active:
                raise ValidationError({"items": [f"Product {item.product_id} is no longer available"]})
            lines.append(
                {
                    "product_id": str(item.product_id),
                    "product_name": product.name,
                    "size": item.size,
                    "color": item.color,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                }
            )

        # Fail before any write if a line cannot be filled
        check_availability((line["product_id"], line["quantity"]) for line in lines)
        for line in lines:
            reserve_stock(line["product_id"], line["quantity"], size=line["size"], color=line["color"])

        pricing = price_lines(
            [(line["unit_price"], line["quantity"]) for line in lines],
            PricingPolicy.from_domain(current_domain),
        )

        order = Order.place(
            order_number=next_order_number(current_domain),
            user_id=command.user_id,
            lines=lines,
            pricing=pricing,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        carts.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order.order_number,
            user_id=str(command.user_id),
            total=str(pricing.total),
            lines=len(lines),
        )
        return str(order.id)


def place_order(command: PlaceOrder) -> str:
    """Process ``PlaceOrder`` and return the new order's id.

    A lost race for stock rolls the whole checkout back; the retry re-reads
    the cart and the current stock.
    """
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            return current_domain.process(command, asynchronous=False)
        except ExpectedVersionError:
            logger.warning(
                "Checkout hit a version conflict",
                user_id=str(command.user_id),
                attempt=attempt,
            )

    raise stock_changed()
