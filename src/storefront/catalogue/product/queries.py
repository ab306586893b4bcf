"""Read side of the catalog — product lookup and the storefront listing.

Listing filters and sorts in memory over the active products; the catalog is
small enough that a full scan per request is cheaper than maintaining
per-filter projections.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product

DEFAULT_LIMIT = 12
MAX_LIMIT = 100

PRICE_RANGES = {
    "0-25": (0.0, 25.0),
    "25-50": (25.0, 50.0),
    "50-plus": (50.0, None),
}

SORT_ORDERS = ("featured", "price-low", "price-high", "newest", "rating")


@dataclass(frozen=True)
class ProductFilters:
    search: str | None = None
    age_group: str | None = None
    category: str | None = None
    featured: bool | None = None
    price_range: str | None = None
    size: str | None = None
    sort: str = "featured"


@dataclass(frozen=True)
class Page:
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def __post_init__(self):
        if self.limit < 1 or self.limit > MAX_LIMIT:
            raise ValidationError({"limit": [f"Limit must be between 1 and {MAX_LIMIT}"]})
        if self.offset < 0:
            raise ValidationError({"offset": ["Offset cannot be negative"]})


def get_product(product_id, include_inactive: bool = False) -> Product:
    """Return the product, or raise ``ObjectNotFoundError``.

    Deactivated products are hidden from shoppers; admin screens pass
    ``include_inactive=True``.
    """
    product = current_domain.repository_for(Product).get(product_id)
    if not product.is_active and not include_inactive:
        raise ObjectNotFoundError(f"Product {product_id} not found")
    return product


def list_active_products(filters: ProductFilters | None = None, page: Page | None = None) -> list[Product]:
    filters = filters or ProductFilters()
    page = page or Page()

    if filters.price_range is not None and filters.price_range not in PRICE_RANGES:
        raise ValidationError({"price_range": [f"Unknown price range {filters.price_range!r}"]})
    if filters.sort not in SORT_ORDERS:
        raise ValidationError({"sort": [f"Unknown sort order {filters.sort!r}"]})

    products = [p for p in current_domain.repository_for(Product).active() if _matches(p, filters)]
    products = _sorted(products, filters.sort)
    return products[page.offset : page.offset + page.limit]


def _matches(product: Product, filters: ProductFilters) -> bool:
    if filters.search:
        needle = filters.search.lower()
        haystack = f"{product.name or ''}\n{product.description or ''}".lower()
        if needle not in haystack:
            return False
    if filters.age_group and product.age_group != filters.age_group:
        return False
    if filters.category and product.category != filters.category:
        return False
    if filters.featured is not None and bool(product.is_featured) != filters.featured:
        return False
    if filters.size and filters.size not in product.size_options:
        return False
    if filters.price_range:
        low, high = PRICE_RANGES[filters.price_range]
        if product.price < low:
            return False
        if high is not None and product.price >= high:
            return False
    return True


def _newest_key(product: Product):
    return product.created_at.timestamp() if product.created_at else 0.0


def _sorted(products: list[Product], sort: str) -> list[Product]:
    if sort == "price-low":
        return sorted(products, key=lambda p: p.price)
    if sort == "price-high":
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort == "newest":
        return sorted(products, key=_newest_key, reverse=True)
    if sort == "rating":
        return sorted(products, key=lambda p: (p.rating or 0.0, p.review_count or 0), reverse=True)
    # Featured first, newest within each group
    return sorted(products, key=lambda p: (bool(p.is_featured), _newest_key(p)), reverse=True)
