"""Admin maintenance of existing products — details, stock and deactivation."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.creation import decode_list
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.identity.authorization import identity_of, require_admin


@storefront.command(part_of="Product")
class UpdateProduct:
    actor_id: Identifier(required=True)
    actor_role: String(max_length=20)
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.01)
    original_price: Float(min_value=0.01)
    stock: Integer(min_value=0)
    sizes: Text()
    colors: Text()
    images: Text()
    age_group: String(max_length=20)
    category: String(max_length=100)
    is_featured: Boolean()


@storefront.command(part_of="Product")
class DeactivateProduct:
    actor_id: Identifier(required=True)
    actor_role: String(max_length=20)
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        require_admin(identity_of(command.actor_id, command.actor_role))

        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            original_price=command.original_price,
            sizes=decode_list(command.sizes),
            colors=decode_list(command.colors),
            images=decode_list(command.images),
            age_group=command.age_group,
            category=command.category,
            is_featured=command.is_featured,
        )
        if command.stock is not None:
            product.set_stock(command.stock)
        repo.add(product)

    @handle(DeactivateProduct)
    def deactivate_product(self, command):
        """Soft delete: the product disappears from listings but past orders keep their snapshots."""
        require_admin(identity_of(command.actor_id, command.actor_role))

        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.deactivate()
        repo.add(product)
