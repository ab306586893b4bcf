import time

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalogue.product.management import DeactivateProduct
from storefront.wishlist.entry import WishlistEntry
from storefront.wishlist.management import AddToWishlist, RemoveFromWishlist
from storefront.wishlist.queries import list_wishlist


def _add(product, user_id="user-001"):
    return current_domain.process(
        AddToWishlist(user_id=user_id, product_id=str(product.id)), asynchronous=False
    )


def _remove(product, user_id="user-001"):
    current_domain.process(RemoveFromWishlist(user_id=user_id, product_id=str(product.id)), asynchronous=False)


@pytest.fixture()
def onesie(make_product):
    return make_product(name="Organic Onesie")


class TestWishlist:
    def test_add(self, onesie):
        _add(onesie)
        assert [p.name for _, p in list_wishlist("user-001")] == ["Organic Onesie"]

    def test_adding_twice_keeps_one_entry(self, onesie):
        first = _add(onesie)
        second = _add(onesie)
        assert first == second
        assert len(current_domain.repository_for(WishlistEntry).for_user("user-001")) == 1

    def test_store_rejects_a_duplicate_entry(self, onesie):
        _add(onesie)
        with pytest.raises(ValidationError):
            current_domain.repository_for(WishlistEntry).add(WishlistEntry.add("user-001", onesie.id))
        assert len(current_domain.repository_for(WishlistEntry).for_user("user-001")) == 1

    def test_remove_is_idempotent(self, onesie):
        _add(onesie)
        _remove(onesie)
        _remove(onesie)
        assert list_wishlist("user-001") == []

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(AddToWishlist(user_id="user-001", product_id="missing"), asynchronous=False)

    def test_newest_first(self, onesie, make_product):
        hat = make_product(name="Knit Hat")
        _add(onesie)
        time.sleep(0.002)
        _add(hat)
        assert [p.name for _, p in list_wishlist("user-001")] == ["Knit Hat", "Organic Onesie"]

    def test_deactivated_products_are_hidden(self, onesie):
        _add(onesie)
        current_domain.process(
            DeactivateProduct(actor_id="admin-001", actor_role="admin", product_id=str(onesie.id)),
            asynchronous=False,
        )
        assert list_wishlist("user-001") == []

    def test_wishlists_are_per_user(self, onesie):
        _add(onesie, user_id="user-002")
        assert list_wishlist("user-001") == []
