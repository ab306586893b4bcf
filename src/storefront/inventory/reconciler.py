"""Stock reconciliation between orders and the catalog.

Reservations load the product, decrement and save it. The save is guarded by
the aggregate's version, which Protean checks when the Unit of Work commits.
Two buyers racing for the last unit therefore cannot both succeed: the loser's
commit fails with ``ExpectedVersionError``, the reservation is retried once
against the fresh count and either succeeds or fails with ``InsufficientStock``.

Inside a caller's Unit of Work (checkout, cancellation) a reservation joins
that transaction and the conflict surfaces at the caller's commit; see
``storefront.ordering.order.checkout.place_order``.
"""

import structlog
from protean.core.unit_of_work import UnitOfWork
from protean.exceptions import ExpectedVersionError
from protean.utils.globals import current_domain, current_uow

from storefront.catalogue.product.product import Product
from storefront.shared.errors import InsufficientStock

logger = structlog.get_logger(__name__)

MAX_ATTEMPTS = 2


def stock_changed(product_id=None) -> InsufficientStock:
    subject = f"Stock for product {product_id}" if product_id else "Stock"
    return InsufficientStock({"stock": [f"{subject} changed during checkout, please try again"]})


def _reserve(product_id, quantity, size, color) -> Product:
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.reserve_stock(quantity, size=size, color=color)
    repo.add(product)
    return product


def reserve_stock(product_id, quantity: int, size=None, color=None) -> Product:
    """Atomically check and decrement stock for one order line."""
    if current_uow:
        product = _reserve(product_id, quantity, size, color)
        logger.info("Stock reserved", product_id=str(product_id), quantity=quantity, remaining=product.stock)
        return product

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            with UnitOfWork():
                product = _reserve(product_id, quantity, size, color)
        except ExpectedVersionError:
            logger.warning(
                "Stock reservation hit a version conflict",
                product_id=str(product_id),
                quantity=quantity,
                attempt=attempt,
            )
            continue

        logger.info("Stock reserved", product_id=str(product_id), quantity=quantity, remaining=product.stock)
        return product

    raise stock_changed(product_id)


def release_stock(product_id, quantity: int) -> Product:
    """Put units back on the shelf, e.g. when an order is cancelled."""
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.release_stock(quantity)
    repo.add(product)

    logger.info(
        "Stock released",
        product_id=str(product_id),
        quantity=quantity,
        remaining=product.stock,
    )
    return product


def check_availability(lines) -> None:
    """Raise ``InsufficientStock`` if any (product_id, quantity) line cannot be filled.

    Quantities for the same product are summed, since every variant draws on
    the product's single stock counter.
    """
    wanted: dict[str, int] = {}
    for product_id, quantity in lines:
        wanted[str(product_id)] = wanted.get(str(product_id), 0) + quantity

    repo = current_domain.repository_for(Product)
    for product_id, quantity in wanted.items():
        product = repo.get(product_id)
        if not product.has_stock_for(quantity):
            raise InsufficientStock(
                {"stock": [f"Insufficient stock for {product.name}: {product.stock} available, {quantity} requested"]}
            )
