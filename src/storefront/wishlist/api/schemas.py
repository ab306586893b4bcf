"""Pydantic request/response schemas for the Wishlist API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from storefront.catalogue.api.schemas import ProductResponse


class AddToWishlistRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "3f0c6f0e-9b8e-4df4-a1c4-6b1d1c6f2a10"}]}}

    product_id: str


class WishlistEntryResponse(BaseModel):
    id: str
    product: ProductResponse
    created_at: datetime | None = None


class WishlistResponse(BaseModel):
    items: list[WishlistEntryResponse]
