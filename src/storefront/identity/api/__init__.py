"""Identity context API package."""

from storefront.identity.api.routes import router

__all__ = ["router"]
