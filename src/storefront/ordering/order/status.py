"""Back-office order management — status changes and payment outcomes."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.authorization import identity_of, require_admin
from storefront.inventory.reconciler import release_stock
from storefront.ordering.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    actor_id: Identifier(required=True)
    actor_role: String(max_length=20)
    order_id: Identifier(required=True)
    status: String(required=True, max_length=20)


@storefront.command(part_of="Order")
class RecordPayment:
    actor_id: Identifier(required=True)
    actor_role: String(max_length=20)
    order_id: Identifier(required=True)
    outcome: String(required=True, max_length=20)


@storefront.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        require_admin(identity_of(command.actor_id, command.actor_role))

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status
        order.transition_to(command.status)

        if order.status == OrderStatus.CANCELLED.value:
            for item in order.ordered_items:
                release_stock(item.product_id, item.quantity)

        repo.add(order)
        logger.info(
            "Order status changed",
            order_id=str(order.id),
            order_number=order.order_number,
            previous_status=previous,
            new_status=order.status,
            actor_id=str(command.actor_id),
        )

    @handle(RecordPayment)
    def record_payment(self, command):
        require_admin(identity_of(command.actor_id, command.actor_role))

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.record_payment(command.outcome)
        repo.add(order)
        logger.info(
            "Order payment recorded",
            order_id=str(order.id),
            order_number=order.order_number,
            payment_status=order.payment_status,
        )
