"""Reviews API package."""

from storefront.reviews.api.routes import router

__all__ = ["router"]
