"""Product aggregate — the catalog record that carts and orders read from.

Stock is a single counter per product even though products sell by size and
color; the counter is shared by every (size, color) variant.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.catalogue.product.events import (
    ProductCreated,
    ProductDeactivated,
    ProductDetailsUpdated,
    ProductPriceChanged,
    StockAdjusted,
    StockReleased,
    StockReserved,
)
from storefront.domain import storefront
from storefront.shared.errors import InsufficientStock, InvalidSelection


class AgeGroup(Enum):
    NEWBORN = "0-6-months"
    INFANT = "6-12-months"
    TODDLER = "12-24-months"


def _encode_list(values) -> str:
    if values is None:
        return json.dumps([])
    if isinstance(values, str):
        return values
    return json.dumps([str(v) for v in values])


def _decode_list(raw) -> list[str]:
    return json.loads(raw) if raw else []


@storefront.aggregate
class Product:
    sku: String(required=True, max_length=50, unique=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.01)
    original_price: Float(min_value=0.01)
    stock: Integer(default=0, min_value=0)
    sizes: Text()  # JSON array of size labels
    colors: Text()  # JSON array of color names
    images: Text()  # JSON array of URLs, primary first
    age_group: String(choices=AgeGroup)
    category: String(max_length=100)
    is_active: Boolean(default=True)
    is_featured: Boolean(default=False)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        sku,
        name,
        price,
        stock=0,
        sizes=None,
        colors=None,
        images=None,
        description=None,
        original_price=None,
        age_group=None,
        category=None,
        is_featured=False,
    ):
        now = datetime.now(UTC)
        product = cls(
            sku=sku,
            name=name,
            description=description,
            price=price,
            original_price=original_price,
            stock=stock,
            sizes=_encode_list(sizes),
            colors=_encode_list(colors),
            images=_encode_list(images),
            age_group=age_group,
            category=category,
            is_active=True,
            is_featured=bool(is_featured),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                sku=sku,
                name=name,
                price=price,
                stock=stock,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Variant lookups
    # -------------------------------------------------------------------
    @property
    def size_options(self) -> list[str]:
        return _decode_list(self.sizes)

    @property
    def color_options(self) -> list[str]:
        return _decode_list(self.colors)

    @property
    def image_urls(self) -> list[str]:
        return _decode_list(self.images)

    @property
    def primary_image(self) -> str | None:
        urls = self.image_urls
        return urls[0] if urls else None

    def assert_variant(self, size, color):
        """Raise ``InvalidSelection`` unless (size, color) is offered.

        A product without any sizes (or colors) is one-size; the selection for
        that dimension must then be left empty.
        """
        errors = {}
        if not _offers(self.size_options, size):
            errors["size"] = [f"Size {size!r} is not available for {self.name}"]
        if not _offers(self.color_options, color):
            errors["color"] = [f"Color {color!r} is not available for {self.name}"]
        if errors:
            raise InvalidSelection(errors)

    def has_stock_for(self, quantity) -> bool:
        return (self.stock or 0) >= quantity

    # -------------------------------------------------------------------
    # Stock movements
    # -------------------------------------------------------------------
    def reserve_stock(self, quantity, size=None, color=None):
        """Decrement stock for an order line, or raise ``InsufficientStock``."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        available = self.stock or 0
        if available < quantity:
            raise InsufficientStock(
                {"stock": [f"Insufficient stock for {self.name}: {available} available, {quantity} requested"]}
            )

        self.stock = available - quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockReserved(
                product_id=str(self.id),
                quantity=quantity,
                previous_stock=available,
                new_stock=self.stock,
                size=size,
                color=color,
            )
        )

    def release_stock(self, quantity):
        """Return previously reserved units to stock."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        previous = self.stock or 0
        self.stock = previous + quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockReleased(
                product_id=str(self.id),
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

    def set_stock(self, stock):
        if stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

        previous = self.stock or 0
        if previous == stock:
            return
        self.stock = stock
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockAdjusted(
                product_id=str(self.id),
                previous_stock=previous,
                new_stock=stock,
            )
        )

    # -------------------------------------------------------------------
    # Catalog maintenance
    # -------------------------------------------------------------------
    def update_details(
        self,
        name=None,
        description=None,
        price=None,
        original_price=None,
        sizes=None,
        colors=None,
        images=None,
        age_group=None,
        category=None,
        is_featured=None,
    ):
        """Apply a partial update; ``None`` leaves a field unchanged."""
        previous_price = self.price

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if original_price is not None:
            self.original_price = original_price
        if sizes is not None:
            self.sizes = _encode_list(sizes)
        if colors is not None:
            self.colors = _encode_list(colors)
        if images is not None:
            self.images = _encode_list(images)
        if age_group is not None:
            self.age_group = age_group
        if category is not None:
            self.category = category
        if is_featured is not None:
            self.is_featured = is_featured

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                price=self.price,
                is_featured=self.is_featured,
                updated_at=now,
            )
        )
        if previous_price != self.price:
            self.raise_(
                ProductPriceChanged(
                    product_id=str(self.id),
                    previous_price=previous_price,
                    new_price=self.price,
                )
            )

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Product is already inactive"]})

        now = datetime.now(UTC)
        self.is_active = False
        self.is_featured = False
        self.updated_at = now
        self.raise_(ProductDeactivated(product_id=str(self.id), deactivated_at=now))

    def record_rating(self, average, count):
        """Store the review aggregate computed from the product's reviews."""
        self.rating = round(average, 2)
        self.review_count = count


def _offers(options, selected) -> bool:
    if not options:
        return not selected
    return selected in options
