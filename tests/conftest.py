import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Fetch and activate the domain by pushing the associated domain_context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from storefront.domain import storefront

    storefront.init()
    storefront.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront)

    yield

    drop_db(storefront)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from storefront.notifications.channel import reset_channels

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    reset_channels()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def admin():
    from storefront.identity.authorization import identity_of

    return identity_of("admin-001", "admin")


@pytest.fixture()
def shopper():
    from storefront.identity.authorization import identity_of

    return identity_of("user-001")


@pytest.fixture()
def make_product():
    """Persist a catalog product and return it."""
    from protean import current_domain

    from storefront.catalogue.product.product import Product

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        defaults = {
            "sku": f"SKU-{counter['n']:04d}",
            "name": f"Cotton Onesie {counter['n']}",
            "description": "Soft organic cotton",
            "price": 20.0,
            "stock": 10,
            "sizes": ["0-3M", "3-6M"],
            "colors": ["White", "Sage"],
            "images": [f"https://images.example.com/{counter['n']}-front.jpg"],
            "age_group": "0-6-months",
            "category": "Onesies",
        }
        defaults.update(overrides)
        product = Product.create(**defaults)
        current_domain.repository_for(Product).add(product)
        return current_domain.repository_for(Product).get(product.id)

    return _make


@pytest.fixture()
def make_user():
    from protean import current_domain

    from storefront.identity.user.registration import UpsertUser

    def _make(user_id="user-001", email="jane@example.com", first_name="Jane", last_name="Doe", role="customer"):
        return current_domain.process(
            UpsertUser(user_id=user_id, email=email, first_name=first_name, last_name=last_name, role=role),
            asynchronous=False,
        )

    return _make


@pytest.fixture()
def address():
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "street": "12 Elm Street",
        "city": "Portland",
        "state": "OR",
        "zip_code": "97205",
        "country": "US",
        "phone": "+1-555-0123",
    }


@pytest.fixture()
def add_to_cart():
    from protean import current_domain

    from storefront.ordering.cart.items import AddToCart

    def _add(user_id, product, quantity=1, size="0-3M", color="White"):
        return current_domain.process(
            AddToCart(user_id=user_id, product_id=str(product.id), size=size, color=color, quantity=quantity),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def checkout(address):
    import json

    from storefront.ordering.order.checkout import PlaceOrder, place_order

    def _checkout(user_id, payment_method="card", billing_address=None):
        return place_order(
            PlaceOrder(
                user_id=user_id,
                shipping_address=json.dumps(address),
                billing_address=json.dumps(billing_address) if billing_address else None,
                payment_method=payment_method,
            )
        )

    return _checkout
