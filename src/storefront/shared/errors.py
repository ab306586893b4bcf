"""Storefront error taxonomy.

Recoverable business errors extend Protean's ``ValidationError`` so they carry
field-keyed messages and map to HTTP 400 through Protean's FastAPI exception
handlers. Missing records use ``ObjectNotFoundError`` directly.
"""

from protean.exceptions import ValidationError


class InvalidSelection(ValidationError):
    """Requested size or color is not offered by the product."""


class InvalidQuantity(ValidationError):
    """Quantity is below one."""


class OutOfStock(ValidationError):
    """Requested quantity exceeds the product's available stock."""


class InsufficientStock(OutOfStock):
    """Stock could not be reserved for an order line."""


class EmptyCart(ValidationError):
    """Checkout was attempted with no cart items."""


class IllegalTransition(ValidationError):
    """Order status change is not allowed by the order state machine."""


class Unauthorized(Exception):
    """The caller's role does not permit the operation."""

    def __init__(self, messages):
        self.messages = messages
        super().__init__(messages)
