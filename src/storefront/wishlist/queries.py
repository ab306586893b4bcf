"""Wishlist listing joined with the catalog."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.wishlist.entry import WishlistEntry


def list_wishlist(user_id) -> list[tuple[WishlistEntry, Product]]:
    """Entries newest first, each with its product. Deactivated products are left out."""
    products = current_domain.repository_for(Product)
    entries = sorted(
        current_domain.repository_for(WishlistEntry).for_user(user_id),
        key=lambda e: e.created_at,
        reverse=True,
    )

    listed = []
    for entry in entries:
        try:
            product = products.get(entry.product_id)
        except ObjectNotFoundError:
            continue
        if product.is_active:
            listed.append((entry, product))
    return listed
