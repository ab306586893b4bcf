"""Product creation — admin command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.identity.authorization import identity_of, require_admin


@storefront.command(part_of="Product")
class CreateProduct:
    actor_id: Identifier(required=True)
    actor_role: String(max_length=20)
    sku: String(required=True, max_length=50)
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.01)
    original_price: Float(min_value=0.01)
    stock: Integer(default=0, min_value=0)
    sizes: Text()  # JSON array
    colors: Text()  # JSON array
    images: Text()  # JSON array
    age_group: String(max_length=20)
    category: String(max_length=100)
    is_featured: Boolean(default=False)


def decode_list(raw):
    return json.loads(raw) if raw else None


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        require_admin(identity_of(command.actor_id, command.actor_role))

        repo = current_domain.repository_for(Product)
        if repo.by_sku(command.sku) is not None:
            raise ValidationError({"sku": [f"A product with SKU {command.sku} already exists"]})

        product = Product.create(
            sku=command.sku,
            name=command.name,
            description=command.description,
            price=command.price,
            original_price=command.original_price,
            stock=command.stock or 0,
            sizes=decode_list(command.sizes),
            colors=decode_list(command.colors),
            images=decode_list(command.images),
            age_group=command.age_group,
            category=command.category,
            is_featured=command.is_featured,
        )
        repo.add(product)
        return str(product.id)
