"""Catalog API package."""

from storefront.catalogue.api.routes import router

__all__ = ["router"]
