"""Order confirmation emails.

Runs after the checkout Unit of Work has committed. Delivery is best-effort:
a failure is logged and the order stands.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.identity.user.user import User
from storefront.notifications.channel import get_email_channel
from storefront.notifications.templates.order_confirmation import OrderConfirmationTemplate
from storefront.ordering.order.events import OrderPlaced
from storefront.ordering.order.order import Order
from storefront.ordering.pricing import to_money

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=Order)
class OrderConfirmationHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        user = current_domain.repository_for(User).find(event.user_id)
        if user is None or user.email is None:
            logger.info(
                "No email address on file, order confirmation skipped",
                order_number=event.order_number,
                user_id=str(event.user_id),
            )
            return

        content = OrderConfirmationTemplate.render(
            {
                "order_number": event.order_number,
                "customer_name": user.first_name,
                "items": event.items,
                "subtotal": str(to_money(event.subtotal)),
                "shipping": str(to_money(event.shipping)),
                "tax": str(to_money(event.tax)),
                "total": str(to_money(event.total)),
            }
        )

        try:
            result = get_email_channel().send(to=user.email.address, subject=content["subject"], body=content["body"])
        except Exception as exc:
            logger.error(
                "Order confirmation email failed",
                order_number=event.order_number,
                error=str(exc),
            )
            return

        if result.get("status") != "sent":
            logger.error(
                "Order confirmation email failed",
                order_number=event.order_number,
                error=result.get("error"),
            )
            return

        logger.info(
            "Order confirmation email sent",
            order_number=event.order_number,
            message_id=result.get("message_id"),
        )
