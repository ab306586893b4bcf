from decimal import Decimal

import pytest
from protean import current_domain

from storefront.admin.stats import dashboard_stats
from storefront.catalogue.product.management import DeactivateProduct
from storefront.ordering.order.status import UpdateOrderStatus
from storefront.shared.errors import Unauthorized


def _cancel(order_id):
    current_domain.process(
        UpdateOrderStatus(actor_id="admin-001", actor_role="admin", order_id=order_id, status="cancelled"),
        asynchronous=False,
    )


@pytest.fixture()
def shop(make_product, make_user, add_to_cart, checkout):
    """Three orders worth 64.80, 20.79 and 31.59; the last one is cancelled."""
    onesie = make_product(name="Organic Onesie", price=20.0, stock=20)
    hat = make_product(name="Knit Hat", price=10.0, stock=20, sizes=[], colors=[])
    retired = make_product(name="Retired Bib")
    current_domain.process(
        DeactivateProduct(actor_id="admin-001", actor_role="admin", product_id=str(retired.id)),
        asynchronous=False,
    )

    make_user("user-001", email="jane@example.com")
    make_user("user-002", email="sam@example.com")
    make_user("admin-001", email="ops@example.com", role="admin")

    add_to_cart("user-001", onesie, quantity=3)
    checkout("user-001")
    add_to_cart("user-002", hat, size=None, color=None)
    checkout("user-002")
    add_to_cart("user-002", onesie)
    _cancel(checkout("user-002"))


class TestDashboardStats:
    def test_figures(self, shop, admin):
        stats = dashboard_stats(admin)
        assert stats.total_revenue == Decimal("85.59")
        assert stats.total_orders == 3
        assert stats.total_products == 2
        assert stats.total_customers == 2
        assert stats.average_order_value == Decimal("28.53")

    def test_empty_store(self, admin):
        stats = dashboard_stats(admin)
        assert stats.total_revenue == Decimal("0.00")
        assert stats.total_orders == 0
        assert stats.average_order_value == Decimal("0.00")

    def test_admin_only(self, shopper):
        with pytest.raises(Unauthorized):
            dashboard_stats(shopper)
