"""Domain tests for the Product aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.catalogue.product.events import (
    ProductCreated,
    ProductDeactivated,
    ProductPriceChanged,
    StockReleased,
    StockReserved,
)
from storefront.catalogue.product.product import Product
from storefront.shared.errors import InsufficientStock, InvalidSelection, OutOfStock


def _product(**overrides):
    defaults = {
        "sku": "ONE-001",
        "name": "Organic Onesie",
        "price": 18.5,
        "stock": 5,
        "sizes": ["0-3M", "3-6M"],
        "colors": ["White"],
        "images": ["https://images.example.com/a.jpg", "https://images.example.com/b.jpg"],
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_create_sets_defaults(self):
        product = _product()
        assert product.is_active is True
        assert product.is_featured is False
        assert product.rating == 0.0
        assert product.review_count == 0

    def test_create_raises_product_created(self):
        product = _product()
        events = [e for e in product._events if isinstance(e, ProductCreated)]
        assert len(events) == 1
        assert events[0].sku == "ONE-001"
        assert events[0].stock == 5

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            _product(price=0)

    def test_stock_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            _product(stock=-1)

    def test_unknown_age_group_rejected(self):
        with pytest.raises(ValidationError):
            _product(age_group="3-5-years")

    def test_lists_round_trip(self):
        product = _product()
        assert product.size_options == ["0-3M", "3-6M"]
        assert product.color_options == ["White"]
        assert product.primary_image == "https://images.example.com/a.jpg"

    def test_primary_image_is_none_without_images(self):
        assert _product(images=None).primary_image is None


class TestVariantSelection:
    def test_offered_variant_passes(self):
        _product().assert_variant("3-6M", "White")

    def test_unknown_size_rejected(self):
        with pytest.raises(InvalidSelection) as exc:
            _product().assert_variant("12-18M", "White")
        assert "size" in exc.value.messages

    def test_unknown_color_rejected(self):
        with pytest.raises(InvalidSelection) as exc:
            _product().assert_variant("0-3M", "Pink")
        assert "color" in exc.value.messages

    def test_one_size_product_requires_empty_size(self):
        hat = _product(sizes=[], colors=[])
        hat.assert_variant(None, None)
        with pytest.raises(InvalidSelection):
            hat.assert_variant("0-3M", None)


class TestStockMovements:
    def test_reserve_decrements_stock(self):
        product = _product(stock=5)
        product.reserve_stock(2, size="0-3M", color="White")
        assert product.stock == 3

    def test_reserve_raises_stock_reserved(self):
        product = _product(stock=5)
        product._events.clear()
        product.reserve_stock(2)
        event = product._events[-1]
        assert isinstance(event, StockReserved)
        assert event.previous_stock == 5
        assert event.new_stock == 3

    def test_reserving_more_than_available_fails(self):
        product = _product(stock=1)
        with pytest.raises(InsufficientStock):
            product.reserve_stock(2)
        assert product.stock == 1

    def test_insufficient_stock_is_an_out_of_stock_error(self):
        product = _product(stock=0)
        with pytest.raises(OutOfStock):
            product.reserve_stock(1)

    def test_reserve_exact_stock_leaves_zero(self):
        product = _product(stock=1)
        product.reserve_stock(1)
        assert product.stock == 0

    def test_release_increments_stock(self):
        product = _product(stock=1)
        product.release_stock(3)
        assert product.stock == 4
        assert isinstance(product._events[-1], StockReleased)

    def test_set_stock(self):
        product = _product(stock=1)
        product.set_stock(12)
        assert product.stock == 12


class TestCatalogMaintenance:
    def test_partial_update_keeps_other_fields(self):
        product = _product()
        product.update_details(name="Organic Onesie v2")
        assert product.name == "Organic Onesie v2"
        assert product.price == 18.5

    def test_price_change_raises_event(self):
        product = _product()
        product.update_details(price=21.0)
        events = [e for e in product._events if isinstance(e, ProductPriceChanged)]
        assert len(events) == 1
        assert events[0].previous_price == 18.5
        assert events[0].new_price == 21.0

    def test_no_price_event_when_price_unchanged(self):
        product = _product()
        product.update_details(is_featured=True)
        assert not [e for e in product._events if isinstance(e, ProductPriceChanged)]
        assert product.is_featured is True

    def test_deactivate(self):
        product = _product(is_featured=True)
        product.deactivate()
        assert product.is_active is False
        assert product.is_featured is False
        assert isinstance(product._events[-1], ProductDeactivated)

    def test_cannot_deactivate_twice(self):
        product = _product()
        product.deactivate()
        with pytest.raises(ValidationError):
            product.deactivate()

    def test_record_rating_rounds(self):
        product = _product()
        product.record_rating(13 / 3, 3)
        assert product.rating == 4.33
        assert product.review_count == 3
