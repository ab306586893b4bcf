"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A line was added, or an identical line's quantity was increased."""

    __version__ = 1

    cart_id: Identifier(required=True)
    user_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    size: String()
    color: String()
    quantity: Integer(required=True)
    line_quantity: Integer(required=True)
    unit_price: Float(required=True)


@storefront.event(part_of="Cart")
class CartItemQuantityChanged:
    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCleared:
    """Every line was removed, typically because the cart became an order."""

    __version__ = 1

    cart_id: Identifier(required=True)
    user_id: Identifier(required=True)
    items_removed: Integer(required=True)
