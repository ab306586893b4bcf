import threading

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.inventory import reconciler
from storefront.inventory.reconciler import check_availability, release_stock, reserve_stock
from storefront.shared.errors import InsufficientStock


def _stock(product):
    return current_domain.repository_for(Product).get(product.id).stock


def _buyer(product_id, outcomes):
    """A shopper in their own thread reserving one unit."""
    def run():
        with storefront.domain_context():
            try:
                reserve_stock(product_id, 1)
            except InsufficientStock:
                outcomes.append("InsufficientStock")
            else:
                outcomes.append("ok")

    return threading.Thread(target=run)


class TestReserve:
    def test_reserve_decrements(self, make_product):
        product = make_product(stock=5)
        reserve_stock(product.id, 2, size="0-3M", color="White")
        assert _stock(product) == 3

    def test_last_unit_goes_to_exactly_one_buyer(self, make_product):
        product = make_product(stock=1)
        reserve_stock(product.id, 1)
        with pytest.raises(InsufficientStock):
            reserve_stock(product.id, 1)
        assert _stock(product) == 0

    def test_stock_never_goes_negative(self, make_product):
        product = make_product(stock=2)
        with pytest.raises(InsufficientStock):
            reserve_stock(product.id, 3)
        assert _stock(product) == 2

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            reserve_stock("missing", 1)


class TestVersionConflicts:
    """Other buyers commit between a reservation's read and its commit."""

    @pytest.fixture()
    def outcomes(self):
        return []

    def _competing_buyers(self, monkeypatch, product, outcomes, count):
        """Let ``count`` other buyers reserve a unit while our reservation is uncommitted."""
        original = Product.reserve_stock
        remaining = {"n": count}

        def reserve_with_competitor(self, quantity, size=None, color=None):
            original(self, quantity, size=size, color=color)
            if threading.current_thread() is threading.main_thread() and remaining["n"]:
                remaining["n"] -= 1
                competitor = _buyer(product.id, outcomes)
                competitor.start()
                competitor.join()

        monkeypatch.setattr(Product, "reserve_stock", reserve_with_competitor)

    def test_two_buyers_for_the_last_unit(self, make_product, monkeypatch, outcomes):
        product = make_product(stock=1)
        barrier = threading.Barrier(2, timeout=5)
        original = Product.reserve_stock

        def reserve_then_wait(self, quantity, size=None, color=None):
            original(self, quantity, size=size, color=color)
            barrier.wait()

        monkeypatch.setattr(Product, "reserve_stock", reserve_then_wait)

        buyers = [_buyer(product.id, outcomes) for _ in range(2)]
        for buyer in buyers:
            buyer.start()
        for buyer in buyers:
            buyer.join()

        assert sorted(outcomes) == ["InsufficientStock", "ok"]
        assert _stock(product) == 0

    def test_conflict_is_retried_against_fresh_stock(self, make_product, monkeypatch, outcomes):
        product = make_product(stock=3)
        self._competing_buyers(monkeypatch, product, outcomes, count=1)

        reserve_stock(product.id, 1)

        assert outcomes == ["ok"]
        assert _stock(product) == 1

    def test_gives_up_after_repeated_conflicts(self, make_product, monkeypatch, outcomes):
        product = make_product(stock=3)
        self._competing_buyers(monkeypatch, product, outcomes, count=reconciler.MAX_ATTEMPTS)

        with pytest.raises(InsufficientStock):
            reserve_stock(product.id, 1)

        assert outcomes == ["ok"] * reconciler.MAX_ATTEMPTS
        assert _stock(product) == 3 - reconciler.MAX_ATTEMPTS


class TestRelease:
    def test_release_restores(self, make_product):
        product = make_product(stock=4)
        reserve_stock(product.id, 3)
        release_stock(product.id, 3)
        assert _stock(product) == 4


class TestAvailability:
    def test_available(self, make_product):
        product = make_product(stock=4)
        check_availability([(product.id, 2), (product.id, 2)])

    def test_quantities_for_one_product_are_summed(self, make_product):
        product = make_product(stock=4)
        with pytest.raises(InsufficientStock):
            check_availability([(product.id, 2), (product.id, 3)])

    def test_any_short_line_fails(self, make_product):
        plenty = make_product(stock=50)
        scarce = make_product(stock=1)
        with pytest.raises(InsufficientStock):
            check_availability([(plenty.id, 1), (scarce.id, 2)])
