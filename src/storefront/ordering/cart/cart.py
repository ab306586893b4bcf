"""Cart aggregate — one mutable cart per user, emptied at checkout.

Lines snapshot the product price when first added; later catalog price changes
do not touch carts. Stock is checked against the line's resulting quantity but
nothing is reserved until checkout.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemQuantityChanged,
    CartItemRemoved,
)
from storefront.ordering.pricing import line_total as price_line, to_money
from storefront.shared.errors import InvalidQuantity, OutOfStock


@storefront.entity(part_of="Cart")
class CartItem:
    product_id: Identifier(required=True)
    unit_price: Float(required=True, min_value=0.01)
    size: String(max_length=50)
    color: String(max_length=50)
    quantity: Integer(required=True, min_value=1)
    sequence: Integer(required=True)
    added_at: DateTime()

    @property
    def line_total(self):
        return price_line(self.unit_price, self.quantity)

    def matches(self, product_id, size, color) -> bool:
        return (
            str(self.product_id) == str(product_id)
            and (self.size or None) == (size or None)
            and (self.color or None) == (color or None)
        )


@storefront.aggregate
class Cart:
    user_id: Identifier(required=True, unique=True)
    items: HasMany(CartItem)
    last_sequence: Integer(default=0)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, last_sequence=0, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def ordered_items(self) -> list[CartItem]:
        return sorted(self.items, key=lambda i: i.sequence)

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    @property
    def subtotal(self):
        return to_money(sum((i.line_total for i in self.items), to_money(0)))

    def find_item(self, item_id) -> CartItem | None:
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product, size, color, quantity):
        """Add ``quantity`` of a product variant, merging into an identical line.

        ``product`` is the catalog ``Product``; its allowed sizes and colors,
        current stock and current price are consulted but never modified.
        """
        if quantity is None or quantity < 1:
            raise InvalidQuantity({"quantity": ["Quantity must be at least 1"]})

        product.assert_variant(size, color)

        existing = next((i for i in self.items if i.matches(product.id, size, color)), None)
        resulting = quantity + (existing.quantity if existing else 0)
        if not product.has_stock_for(resulting):
            raise OutOfStock(
                {"quantity": [f"Only {product.stock} of {product.name} available, {resulting} requested"]}
            )

        now = datetime.now(UTC)

        if existing:
            existing.quantity = resulting
            item = existing
        else:
            self.last_sequence = (self.last_sequence or 0) + 1
            item = CartItem(
                product_id=str(product.id),
                unit_price=product.price,
                size=size,
                color=color,
                quantity=quantity,
                sequence=self.last_sequence,
                added_at=now,
            )
            self.add_items(item)

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                item_id=str(item.id),
                product_id=str(product.id),
                size=size,
                color=color,
                quantity=quantity,
                line_quantity=item.quantity,
                unit_price=item.unit_price,
            )
        )
        return item

    def update_quantity(self, item_id, quantity, available_stock):
        item = self.find_item(item_id)
        if item is None:
            raise ObjectNotFoundError(f"Cart item {item_id} not found")
        if quantity is None or quantity < 1:
            raise InvalidQuantity({"quantity": ["Quantity must be at least 1"]})
        if quantity > (available_stock or 0):
            raise OutOfStock({"quantity": [f"Only {available_stock} available, {quantity} requested"]})

        previous = item.quantity
        if previous == quantity:
            return item

        item.quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemQuantityChanged(
                cart_id=str(self.id),
                item_id=str(item.id),
                previous_quantity=previous,
                new_quantity=quantity,
            )
        )
        return item

    def remove_item(self, item_id) -> bool:
        """Remove a line. Returns ``False`` if it was already gone."""
        item = self.find_item(item_id)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=str(item_id),
                product_id=str(item.product_id),
            )
        )
        return True

    def clear(self):
        count = len(self.items)
        if not count:
            return

        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(CartCleared(cart_id=str(self.id), user_id=str(self.user_id), items_removed=count))
