"""Domain initialization and configuration.

All storefront aggregates live in one Protean domain so that stock
reservation, order creation and cart clearing share a single Unit of Work
during checkout.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging(log_dir="logs")

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")

# Protean's traversal only loads modules one directory below this file, so
# the element modules nested deeper are imported here to register them
# before ``storefront.init()``.
from storefront.catalogue.product import creation, events, management, product, repository  # noqa: E402, F401
from storefront.identity.shared import email  # noqa: E402, F401
from storefront.identity.user import events, registration, repository, user  # noqa: E402, F401, F811
from storefront.ordering.cart import cart, events, items, repository  # noqa: E402, F401, F811
from storefront.ordering.order import checkout, events, order, repository, status  # noqa: E402, F401, F811
from storefront.reviews.review import events, repository, review, submission  # noqa: E402, F401, F811
