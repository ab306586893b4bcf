"""Dashboard figures, recomputed on every request."""

from dataclasses import dataclass
from decimal import Decimal

import structlog
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.identity.authorization import Identity, require_admin
from storefront.identity.user.user import User
from storefront.ordering.order.order import Order
from storefront.ordering.pricing import to_money

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DashboardStats:
    total_revenue: Decimal
    total_orders: int
    total_products: int
    total_customers: int
    average_order_value: Decimal


def dashboard_stats(identity: Identity) -> DashboardStats:
    """Revenue counts every order that was not cancelled; the order count includes all of them."""
    require_admin(identity)

    orders = current_domain.repository_for(Order).everything()
    revenue = sum((to_money(o.total) for o in orders if not o.is_cancelled), Decimal("0.00"))
    total_orders = len(orders)

    stats = DashboardStats(
        total_revenue=to_money(revenue),
        total_orders=total_orders,
        total_products=len(current_domain.repository_for(Product).active()),
        total_customers=len(current_domain.repository_for(User).customers()),
        average_order_value=to_money(revenue / total_orders) if total_orders else to_money(0),
    )
    logger.debug("Dashboard stats computed", total_orders=total_orders, total_revenue=str(stats.total_revenue))
    return stats
