"""Cart view — lines joined with catalog data for display."""

from dataclasses import dataclass, field
from decimal import Decimal

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.ordering.cart.cart import Cart
from storefront.ordering.pricing import to_money


@dataclass(frozen=True)
class CartLine:
    item_id: str
    product_id: str
    product_name: str
    image: str | None
    size: str | None
    color: str | None
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class CartView:
    user_id: str
    items: list[CartLine] = field(default_factory=list)
    subtotal: Decimal = Decimal("0.00")
    item_count: int = 0


def get_cart(user_id) -> CartView:
    """Return the user's cart lines in insertion order. A user without a cart gets an empty view."""
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        return CartView(user_id=str(user_id), subtotal=to_money(0))

    products = current_domain.repository_for(Product)
    lines = []
    for item in cart.ordered_items:
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            product = None
        lines.append(
            CartLine(
                item_id=str(item.id),
                product_id=str(item.product_id),
                product_name=product.name if product else "Unavailable product",
                image=product.primary_image if product else None,
                size=item.size,
                color=item.color,
                quantity=item.quantity,
                unit_price=to_money(item.unit_price),
                line_total=item.line_total,
            )
        )

    return CartView(
        user_id=str(user_id),
        items=lines,
        subtotal=cart.subtotal,
        item_count=cart.item_count,
    )
