"""Repository for the Product aggregate."""

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.shared.queries import fetch_all


@storefront.repository(part_of=Product)
class ProductRepository:
    def active(self) -> list[Product]:
        return fetch_all(self._dao.query.filter(is_active=True))

    def everything(self) -> list[Product]:
        return fetch_all(self._dao.query)

    def by_sku(self, sku: str) -> Product | None:
        return self._dao.query.filter(sku=sku).all().first
