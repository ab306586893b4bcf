"""Pydantic request/response schemas for the Cart and Order APIs.

Orders are exported in the storefront's persisted representation: camelCase
keys and money as two-place decimal strings.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.ordering.pricing import to_money


def money(value) -> str:
    return str(to_money(value))


# --- Cart ---


class AddCartItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "3f0c6f0e-9b8e-4df4-a1c4-6b1d1c6f2a10",
                    "size": "0-3M",
                    "color": "White",
                    "quantity": 2,
                }
            ]
        }
    }

    product_id: str
    size: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=50)
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"quantity": 3}]}}

    quantity: int


class CartLineResponse(BaseModel):
    item_id: str
    product_id: str
    product_name: str
    image: str | None = None
    size: str | None = None
    color: str | None = None
    quantity: int
    unit_price: str
    line_total: str


class CartResponse(BaseModel):
    user_id: str
    items: list[CartLineResponse]
    subtotal: str
    item_count: int

    @classmethod
    def from_view(cls, view) -> CartResponse:
        return cls(
            user_id=view.user_id,
            items=[
                CartLineResponse(
                    item_id=line.item_id,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    image=line.image,
                    size=line.size,
                    color=line.color,
                    quantity=line.quantity,
                    unit_price=money(line.unit_price),
                    line_total=money(line.line_total),
                )
                for line in view.items
            ],
            subtotal=money(view.subtotal),
            item_count=view.item_count,
        )


# --- Orders ---


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AddressSchema(CamelModel):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=100)
    zip_code: str = Field(..., max_length=20)
    country: str = Field(..., max_length=100)
    phone: str | None = Field(None, max_length=30)

    @classmethod
    def from_address(cls, address) -> AddressSchema:
        return cls(
            first_name=address.first_name,
            last_name=address.last_name,
            street=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
            phone=address.phone,
        )


class PlaceOrderRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "shippingAddress": {
                        "firstName": "Jane",
                        "lastName": "Doe",
                        "street": "12 Elm Street",
                        "city": "Portland",
                        "state": "OR",
                        "zipCode": "97205",
                        "country": "US",
                        "phone": "+1-555-0123",
                    },
                    "sameAsShipping": True,
                    "paymentMethod": "card",
                }
            ]
        },
    )

    shipping_address: AddressSchema
    billing_address: AddressSchema | None = None
    same_as_shipping: bool = True
    payment_method: str = Field(..., max_length=20)


class OrderItemResponse(CamelModel):
    product_id: str
    product_name: str
    size: str | None = None
    color: str | None = None
    quantity: int
    unit_price: str
    line_total: str


class OrderResponse(CamelModel):
    id: str
    order_number: str
    user_id: str
    status: str
    items: list[OrderItemResponse]
    subtotal: str
    tax: str
    shipping: str
    total: str
    shipping_address: AddressSchema
    billing_address: AddressSchema
    payment_method: str
    payment_status: str
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        amounts = order.amounts
        return cls(
            id=str(order.id),
            order_number=order.order_number,
            user_id=str(order.user_id),
            status=order.status,
            items=[
                OrderItemResponse(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    size=item.size,
                    color=item.color,
                    quantity=item.quantity,
                    unit_price=money(item.unit_price),
                    line_total=money(item.line_total),
                )
                for item in order.ordered_items
            ],
            subtotal=str(amounts["subtotal"]),
            tax=str(amounts["tax"]),
            shipping=str(amounts["shipping"]),
            total=str(amounts["total"]),
            shipping_address=AddressSchema.from_address(order.shipping_address),
            billing_address=AddressSchema.from_address(order.billing_address),
            payment_method=order.payment_method,
            payment_status=order.payment_status,
            created_at=order.created_at,
        )


class OrderListResponse(CamelModel):
    orders: list[OrderResponse]
