"""Domain events for the Order aggregate.

``OrderPlaced`` is the trigger for the confirmation email; it is handled
after the checkout Unit of Work commits, so a failed email never touches the
order.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into an order and its stock reserved."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    user_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of line dicts
    item_count: Integer(required=True)
    subtotal: Float(required=True)
    tax: Float(required=True)
    shipping: Float(required=True)
    total: Float(required=True)
    payment_method: String(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCancelled:
    """The order was cancelled before shipping; its units go back on the shelf."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    user_id: Identifier(required=True)
    previous_status: String(required=True)
    cancelled_at: DateTime(required=True)


@storefront.event(part_of="Order")
class PaymentRecorded:
    """The payment gateway reported an outcome for the order."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    payment_status: String(required=True)
    recorded_at: DateTime(required=True)
