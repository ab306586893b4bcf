"""Application tests for admin product commands."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalogue.product.creation import CreateProduct
from storefront.catalogue.product.management import DeactivateProduct, UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.queries import get_product, list_active_products
from storefront.shared.errors import Unauthorized


def _create(actor_role="admin", **overrides):
    defaults = {
        "actor_id": "admin-001",
        "actor_role": actor_role,
        "sku": "SLP-001",
        "name": "Zip Sleeper",
        "price": 22.0,
        "stock": 8,
        "sizes": json.dumps(["0-3M", "3-6M"]),
        "colors": json.dumps(["Grey"]),
        "images": json.dumps(["https://images.example.com/sleeper.jpg"]),
        "age_group": "0-6-months",
        "category": "Sleepers",
    }
    defaults.update(overrides)
    return current_domain.process(CreateProduct(**defaults), asynchronous=False)


class TestCreateProduct:
    def test_admin_creates_product(self):
        product_id = _create()
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Zip Sleeper"
        assert product.size_options == ["0-3M", "3-6M"]
        assert product.stock == 8

    def test_customer_cannot_create_product(self):
        with pytest.raises(Unauthorized):
            _create(actor_role="customer")
        assert list_active_products() == []

    def test_duplicate_sku_rejected(self):
        _create()
        with pytest.raises(ValidationError) as exc:
            _create(name="Another sleeper")
        assert "sku" in exc.value.messages


class TestUpdateProduct:
    def test_update_price_and_stock(self):
        product_id = _create()
        current_domain.process(
            UpdateProduct(actor_id="admin-001", actor_role="admin", product_id=product_id, price=19.99, stock=3),
            asynchronous=False,
        )
        product = get_product(product_id)
        assert product.price == 19.99
        assert product.stock == 3
        assert product.name == "Zip Sleeper"

    def test_update_sizes(self):
        product_id = _create()
        current_domain.process(
            UpdateProduct(
                actor_id="admin-001",
                actor_role="admin",
                product_id=product_id,
                sizes=json.dumps(["6-9M"]),
            ),
            asynchronous=False,
        )
        assert get_product(product_id).size_options == ["6-9M"]

    def test_customer_cannot_update(self):
        product_id = _create()
        with pytest.raises(Unauthorized):
            current_domain.process(
                UpdateProduct(actor_id="user-001", actor_role="customer", product_id=product_id, price=1.0),
                asynchronous=False,
            )
        assert get_product(product_id).price == 22.0

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateProduct(actor_id="admin-001", actor_role="admin", product_id="missing", price=1.0),
                asynchronous=False,
            )


class TestDeactivateProduct:
    def test_deactivated_product_is_hidden(self):
        product_id = _create()
        current_domain.process(
            DeactivateProduct(actor_id="admin-001", actor_role="admin", product_id=product_id),
            asynchronous=False,
        )
        with pytest.raises(ObjectNotFoundError):
            get_product(product_id)
        assert get_product(product_id, include_inactive=True).is_active is False
        assert list_active_products() == []

    def test_customer_cannot_deactivate(self):
        product_id = _create()
        with pytest.raises(Unauthorized):
            current_domain.process(
                DeactivateProduct(actor_id="user-001", actor_role="customer", product_id=product_id),
                asynchronous=False,
            )
        assert get_product(product_id).is_active is True
