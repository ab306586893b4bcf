"""Order aggregate — the frozen record of a checkout.

Everything on an order is fixed at creation except ``status`` and
``payment_status``. Line items carry denormalized copies of the product name
and price, so later catalog edits never change a past order.

Status machine::

    pending → processing → shipped → delivered
    pending | processing → cancelled

Payment status moves independently: pending → paid | failed.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.ordering.order.events import (
    OrderCancelled,
    OrderPlaced,
    OrderStatusChanged,
    PaymentRecorded,
)
from storefront.ordering.pricing import to_money
from storefront.shared.errors import IllegalTransition


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class PaymentMethod(Enum):
    CARD = "card"
    PAYPAL = "paypal"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

_VALID_PAYMENT_TRANSITIONS = {
    PaymentStatus.PENDING: {PaymentStatus.PAID, PaymentStatus.FAILED},
    PaymentStatus.PAID: set(),
    PaymentStatus.FAILED: set(),
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class Address:
    """A shipping or billing address captured at checkout.

    Immutable once on an order, whatever the customer does with their address
    book later.
    """

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(required=True, max_length=100)
    zip_code: String(required=True, min_length=5, max_length=20)
    country: String(required=True, max_length=100)
    phone: String(max_length=30)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    product_id: Identifier(required=True)
    product_name: String(required=True, max_length=255)
    size: String(max_length=50)
    color: String(max_length=50)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.01)
    line_total: Float(required=True, min_value=0.01)
    position: Integer(required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    order_number: String(required=True, max_length=50, unique=True)
    user_id: Identifier(required=True)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status: String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    payment_method: String(required=True, choices=PaymentMethod)
    items: HasMany(OrderItem)
    subtotal: Float(required=True, min_value=0.0)
    tax: Float(required=True, min_value=0.0)
    shipping: Float(required=True, min_value=0.0)
    total: Float(required=True, min_value=0.0)
    shipping_address: ValueObject(Address)
    billing_address: ValueObject(Address)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def total_must_equal_its_components(self):
        if self.total is None:
            return
        components = to_money(self.subtotal) + to_money(self.tax) + to_money(self.shipping)
        if to_money(self.total) != components:
            raise ValidationError({"total": ["Order total must equal subtotal + tax + shipping"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, order_number, user_id, lines, pricing, shipping_address, billing_address, payment_method):
        """Build a pending order.

        Args:
            lines: iterable of dicts with product_id, product_name, size,
                color, quantity and unit_price.
            pricing: a ``PriceBreakdown`` computed from the same lines.
        """
        now = datetime.now(UTC)
        order = cls(
            order_number=order_number,
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            payment_status=PaymentStatus.PENDING.value,
            payment_method=payment_method,
            subtotal=float(pricing.subtotal),
            tax=float(pricing.tax),
            shipping=float(pricing.shipping),
            total=float(pricing.total),
            shipping_address=shipping_address,
            billing_address=billing_address or shipping_address,
            created_at=now,
            updated_at=now,
        )

        for position, line in enumerate(lines, start=1):
            unit_price = to_money(line["unit_price"])
            order.add_items(
                OrderItem(
                    product_id=str(line["product_id"]),
                    product_name=line["product_name"],
                    size=line.get("size"),
                    color=line.get("color"),
                    quantity=line["quantity"],
                    unit_price=float(unit_price),
                    line_total=float(to_money(unit_price * line["quantity"])),
                    position=position,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order_number,
                user_id=str(user_id),
                items=json.dumps(
                    [
                        {
                            "product_id": str(i.product_id),
                            "product_name": i.product_name,
                            "size": i.size,
                            "color": i.color,
                            "quantity": i.quantity,
                            "unit_price": str(to_money(i.unit_price)),
                        }
                        for i in order.ordered_items
                    ]
                ),
                item_count=sum(i.quantity for i in order.items),
                subtotal=order.subtotal,
                tax=order.tax,
                shipping=order.shipping,
                total=order.total,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def ordered_items(self) -> list[OrderItem]:
        return sorted(self.items, key=lambda i: i.position)

    @property
    def amounts(self) -> dict[str, Decimal]:
        return {
            "subtotal": to_money(self.subtotal),
            "tax": to_money(self.tax),
            "shipping": to_money(self.shipping),
            "total": to_money(self.total),
        }

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED.value

    # -------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise IllegalTransition({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def transition_to(self, new_status):
        """Move the order along the status machine.

        Cancellation additionally raises ``OrderCancelled``; the caller is
        responsible for returning the order's units to stock.
        """
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status {new_status!r}"]}) from None

        self._assert_can_transition(target)

        previous = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                order_number=self.order_number,
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )
        if target == OrderStatus.CANCELLED:
            self.raise_(
                OrderCancelled(
                    order_id=str(self.id),
                    order_number=self.order_number,
                    user_id=str(self.user_id),
                    previous_status=previous,
                    cancelled_at=now,
                )
            )

    def record_payment(self, outcome):
        try:
            target = PaymentStatus(outcome)
        except ValueError:
            raise ValidationError({"payment_status": [f"Unknown payment status {outcome!r}"]}) from None

        current = PaymentStatus(self.payment_status)
        if target not in _VALID_PAYMENT_TRANSITIONS[current]:
            raise IllegalTransition(
                {"payment_status": [f"Cannot transition payment from {current.value} to {target.value}"]}
            )

        now = datetime.now(UTC)
        self.payment_status = target.value
        self.updated_at = now
        self.raise_(
            PaymentRecorded(
                order_id=str(self.id),
                order_number=self.order_number,
                payment_status=target.value,
                recorded_at=now,
            )
        )
