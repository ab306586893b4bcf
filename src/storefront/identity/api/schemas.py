"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UpsertUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "auth0|5f7c8ec7c33c6c004bbafe82",
                    "email": "jane.doe@example.com",
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "profile_image_url": "https://images.example.com/jane.png",
                    "role": "customer",
                }
            ]
        }
    }

    user_id: str = Field(..., max_length=255)
    email: str | None = Field(None, max_length=254)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    profile_image_url: str | None = Field(None, max_length=500)
    role: str | None = Field(None, max_length=20)


class UserResponse(BaseModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: str
