"""Order reads, always scoped by the caller's identity."""

from protean.utils.globals import current_domain

from storefront.identity.authorization import Identity, require_admin, require_owner_or_admin
from storefront.ordering.order.order import Order


def _newest_first(orders: list[Order]) -> list[Order]:
    return sorted(orders, key=lambda o: (o.created_at, o.order_number), reverse=True)


def get_order(order_id, identity: Identity) -> Order:
    order = current_domain.repository_for(Order).get(order_id)
    require_owner_or_admin(identity, order.user_id)
    return order


def list_orders_for_user(user_id, identity: Identity) -> list[Order]:
    require_owner_or_admin(identity, user_id)
    return _newest_first(current_domain.repository_for(Order).for_user(user_id))


def list_all_orders(identity: Identity, status: str | None = None, user_id=None) -> list[Order]:
    require_admin(identity)

    orders = current_domain.repository_for(Order).everything()
    if status:
        orders = [o for o in orders if o.status == status]
    if user_id:
        orders = [o for o in orders if str(o.user_id) == str(user_id)]
    return _newest_first(orders)
