"""Wishlist entries — one per (user, product) pair."""

from datetime import UTC, datetime

from protean import Index
from protean.fields import DateTime, Identifier

from storefront.domain import storefront
from storefront.shared.queries import fetch_all


@storefront.event(part_of="WishlistEntry")
class ProductWishlisted:
    __version__ = 1

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    added_at: DateTime(required=True)


@storefront.aggregate(indexes=[Index("user_id", "product_id", unique=True)])
class WishlistEntry:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    created_at: DateTime()

    @classmethod
    def add(cls, user_id, product_id):
        now = datetime.now(UTC)
        entry = cls(user_id=str(user_id), product_id=str(product_id), created_at=now)
        entry.raise_(ProductWishlisted(user_id=str(user_id), product_id=str(product_id), added_at=now))
        return entry


@storefront.repository(part_of=WishlistEntry)
class WishlistRepository:
    def for_user(self, user_id) -> list[WishlistEntry]:
        return fetch_all(self._dao.query.filter(user_id=str(user_id)))

    def find(self, user_id, product_id) -> WishlistEntry | None:
        return self._dao.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first
