"""Pydantic request/response schemas for the back-office API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StatsResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "totalRevenue": "1289.40",
                    "totalOrders": 23,
                    "totalProducts": 48,
                    "totalCustomers": 17,
                    "averageOrderValue": "56.06",
                }
            ]
        },
    )

    total_revenue: str
    total_orders: int
    total_products: int
    total_customers: int
    average_order_value: str


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "processing"}]}}

    status: str = Field(..., max_length=20)


class RecordPaymentRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"outcome": "paid"}]}}

    outcome: str = Field(..., max_length=20)
