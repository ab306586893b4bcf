from storefront.wishlist.entry import ProductWishlisted, WishlistEntry


def test_add_raises_event():
    entry = WishlistEntry.add("user-001", "prod-1")
    assert entry.user_id == "user-001"
    assert entry.created_at is not None

    event = entry._events[-1]
    assert isinstance(event, ProductWishlisted)
    assert event.product_id == "prod-1"
