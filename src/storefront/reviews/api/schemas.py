"""Pydantic request/response schemas for the Reviews API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "rating": 5,
                    "title": "So soft",
                    "comment": "Washes well and the snaps are easy at 3am.",
                }
            ]
        }
    }

    rating: int
    title: str | None = Field(None, max_length=200)
    comment: str | None = None


class ReviewResponse(BaseModel):
    review_id: str
    product_id: str
    user_id: str
    reviewer_name: str
    rating: int
    title: str | None = None
    comment: str | None = None
    created_at: datetime | None = None


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]


class ReviewIdResponse(BaseModel):
    review_id: str
