"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A product was added to the catalog."""

    __version__ = 1

    product_id: Identifier(required=True)
    sku: String(required=True)
    name: String(required=True)
    price: Float(required=True)
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """Descriptive fields, price or flags of a product changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    is_featured: Boolean()
    updated_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductPriceChanged:
    """The selling price of a product changed. Carts and orders keep their snapshots."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)


@storefront.event(part_of="Product")
class ProductDeactivated:
    """A product was withdrawn from sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)


@storefront.event(part_of="Product")
class StockReserved:
    """Stock was decremented for an order line."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    size: String()
    color: String()


@storefront.event(part_of="Product")
class StockReleased:
    """Previously reserved stock was returned, e.g. after a cancellation."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@storefront.event(part_of="Product")
class StockAdjusted:
    """An admin set the stock level directly."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
