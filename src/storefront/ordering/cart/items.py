"""Cart item management — commands and handler.

Every command names the cart owner; items are always looked up inside that
user's cart, so a user can never touch another user's lines.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.queries import get_product
from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart


@storefront.command(part_of="Cart")
class AddToCart:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    size: String(max_length=50)
    color: String(max_length=50)
    quantity: Integer(required=True)


@storefront.command(part_of="Cart")
class UpdateCartItemQuantity:
    user_id: Identifier(required=True)
    item_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id: Identifier(required=True)
    item_id: Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    user_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = get_product(command.product_id)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user_or_new(command.user_id)
        item = cart.add_item(
            product=product,
            size=command.size,
            color=command.color,
            quantity=command.quantity,
        )
        repo.add(cart)
        return str(item.id)

    @handle(UpdateCartItemQuantity)
    def update_cart_item_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        item = cart.find_item(command.item_id) if cart else None
        if item is None:
            raise ObjectNotFoundError(f"Cart item {command.item_id} not found")

        product = current_domain.repository_for(Product).get(item.product_id)
        cart.update_quantity(command.item_id, command.quantity, available_stock=product.stock)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is not None and cart.remove_item(command.item_id):
            repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is not None and cart.items:
            cart.clear()
            repo.add(cart)
