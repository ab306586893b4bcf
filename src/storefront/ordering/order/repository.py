"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.shared.queries import fetch_all


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        return fetch_all(self._dao.query.filter(user_id=str(user_id)))

    def everything(self) -> list[Order]:
        return fetch_all(self._dao.query)
