"""Back-office API package."""

from storefront.admin.api.routes import router

__all__ = ["router"]
