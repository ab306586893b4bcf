"""Shared BDD fixtures and step definitions for ordering."""

from decimal import Decimal

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when

from storefront.catalogue.product.management import UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.ordering.cart.queries import get_cart
from storefront.ordering.order.order import Order
from storefront.shared.errors import Unauthorized

SHOPPER_ID = "user-001"


@pytest.fixture()
def catalog():
    """Products created in the scenario, by name."""
    return {}


@pytest.fixture()
def outcome():
    return {"order_id": None, "exc": None}


def _product(catalog, name) -> Product:
    return current_domain.repository_for(Product).get(catalog[name])


def _one_size(product) -> dict:
    return {
        "size": product.size_options[0] if product.size_options else None,
        "color": product.color_options[0] if product.color_options else None,
    }


# ---------------------------------------------------------------------------
# Given
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price:f} with {stock:d} in stock'))
def _(catalog, make_product, name, price, stock):
    sizes, colors = (["0-3M", "3-6M"], ["White"]) if "Onesie" in name else ([], [])
    product = make_product(name=name, price=price, stock=stock, sizes=sizes, colors=colors)
    catalog[name] = str(product.id)


@given(parsers.cfparse('the shopper has {quantity:d} "{name}" in the cart'))
def _(catalog, add_to_cart, quantity, name):
    product = _product(catalog, name)
    add_to_cart(SHOPPER_ID, product, quantity=quantity, **_one_size(product))


@given(parsers.cfparse('another shopper bought the last "{name}"'))
def _(catalog, name):
    current_domain.process(
        UpdateProduct(actor_id="admin-001", actor_role="admin", product_id=catalog[name], stock=0),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When
# ---------------------------------------------------------------------------
@given("the shopper checks out")
@when("the shopper checks out")
def _(checkout, outcome):
    try:
        outcome["order_id"] = checkout(SHOPPER_ID)
    except ValidationError as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Then
# ---------------------------------------------------------------------------
@then(
    parsers.cfparse(
        'an order is placed with subtotal "{subtotal}", shipping "{shipping}", tax "{tax}" and total "{total}"'
    )
)
def _(outcome, subtotal, shipping, tax, total):
    assert outcome["exc"] is None
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.amounts == {
        "subtotal": Decimal(subtotal),
        "shipping": Decimal(shipping),
        "tax": Decimal(tax),
        "total": Decimal(total),
    }


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def _(catalog, name, stock):
    assert _product(catalog, name).stock == stock


@then("the cart is empty")
def _():
    assert get_cart(SHOPPER_ID).items == []


@then(parsers.cfparse("the cart still holds {count:d} lines"))
def _(count):
    assert len(get_cart(SHOPPER_ID).items) == count


@then(parsers.cfparse('the checkout fails with "{error_name}"'))
def _(outcome, error_name):
    assert outcome["order_id"] is None
    assert type(outcome["exc"]).__name__ == error_name


@then("the status change is rejected")
def _(outcome):
    assert isinstance(outcome["exc"], (ValidationError, Unauthorized))
