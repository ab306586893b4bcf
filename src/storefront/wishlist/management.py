"""Wishlist commands. Both are idempotent."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product.queries import get_product
from storefront.domain import storefront
from storefront.wishlist.entry import WishlistEntry


@storefront.command(part_of="WishlistEntry")
class AddToWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command(part_of="WishlistEntry")
class RemoveFromWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=WishlistEntry)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        get_product(command.product_id)

        repo = current_domain.repository_for(WishlistEntry)
        entry = repo.find(command.user_id, command.product_id)
        if entry is None:
            entry = WishlistEntry.add(command.user_id, command.product_id)
            repo.add(entry)
        return str(entry.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistEntry)
        entry = repo.find(command.user_id, command.product_id)
        if entry is not None:
            repo._dao.delete(entry)
