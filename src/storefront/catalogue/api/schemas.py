"""Pydantic request/response schemas for the Catalog API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "3f0c6f0e-9b8e-4df4-a1c4-6b1d1c6f2a10",
                    "sku": "ONE-ORG-WHT-01",
                    "name": "Organic Cotton Onesie",
                    "description": "Soft organic cotton with envelope shoulders.",
                    "price": 18.5,
                    "original_price": 24.0,
                    "stock": 42,
                    "sizes": ["0-3M", "3-6M"],
                    "colors": ["White", "Sage"],
                    "images": ["https://images.example.com/onesie-white.jpg"],
                    "age_group": "0-6-months",
                    "category": "Onesies",
                    "is_active": True,
                    "is_featured": True,
                    "rating": 4.5,
                    "review_count": 12,
                }
            ]
        }
    }

    id: str
    sku: str
    name: str
    description: str | None = None
    price: float
    original_price: float | None = None
    stock: int
    sizes: list[str] = []
    colors: list[str] = []
    images: list[str] = []
    age_group: str | None = None
    category: str | None = None
    is_active: bool
    is_featured: bool
    rating: float = 0.0
    review_count: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            sku=product.sku,
            name=product.name,
            description=product.description,
            price=product.price,
            original_price=product.original_price,
            stock=product.stock or 0,
            sizes=product.size_options,
            colors=product.color_options,
            images=product.image_urls,
            age_group=product.age_group,
            category=product.category,
            is_active=bool(product.is_active),
            is_featured=bool(product.is_featured),
            rating=product.rating or 0.0,
            review_count=product.review_count or 0,
            created_at=product.created_at,
        )


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    limit: int
    offset: int


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "sku": "SLP-ZIP-GRY-02",
                    "name": "Zip-Up Sleeper",
                    "description": "Two-way zip footed sleeper.",
                    "price": 22.0,
                    "stock": 30,
                    "sizes": ["0-3M", "3-6M", "6-9M"],
                    "colors": ["Grey"],
                    "images": ["https://images.example.com/sleeper-grey.jpg"],
                    "age_group": "0-6-months",
                    "category": "Sleepers",
                    "is_featured": False,
                }
            ]
        }
    }

    sku: str = Field(..., max_length=50)
    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float = Field(..., gt=0)
    original_price: float | None = Field(None, gt=0)
    stock: int = Field(0, ge=0)
    sizes: list[str] = []
    colors: list[str] = []
    images: list[str] = []
    age_group: str | None = Field(None, max_length=20)
    category: str | None = Field(None, max_length=100)
    is_featured: bool = False


class UpdateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"price": 19.99, "stock": 25, "is_featured": True}]}
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, gt=0)
    original_price: float | None = Field(None, gt=0)
    stock: int | None = Field(None, ge=0)
    sizes: list[str] | None = None
    colors: list[str] | None = None
    images: list[str] | None = None
    age_group: str | None = Field(None, max_length=20)
    category: str | None = Field(None, max_length=100)
    is_featured: bool | None = None


class ProductIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "3f0c6f0e-9b8e-4df4-a1c4-6b1d1c6f2a10"}]}}

    product_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
