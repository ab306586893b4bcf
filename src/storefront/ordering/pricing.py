"""Cart and order pricing.

All arithmetic is in ``Decimal``. Each component is rounded half-up to cents
and the total is the sum of the rounded components, so
``total == subtotal + tax + shipping`` holds exactly for every stored order.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from storefront.shared.settings import get_decimal_setting

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a float/str/Decimal amount to a cent-rounded Decimal."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PricingPolicy:
    free_shipping_threshold: Decimal = Decimal("50.00")
    flat_shipping_fee: Decimal = Decimal("9.99")
    tax_rate: Decimal = Decimal("0.08")

    @classmethod
    def from_domain(cls, domain) -> "PricingPolicy":
        return cls(
            free_shipping_threshold=get_decimal_setting(domain, "FREE_SHIPPING_THRESHOLD"),
            flat_shipping_fee=get_decimal_setting(domain, "FLAT_SHIPPING_FEE"),
            tax_rate=get_decimal_setting(domain, "TAX_RATE"),
        )


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal


def line_total(unit_price, quantity: int) -> Decimal:
    return to_money(Decimal(str(unit_price)) * quantity)


def price_lines(lines, policy: PricingPolicy | None = None) -> PriceBreakdown:
    """Price ``(unit_price, quantity)`` pairs.

    >>> price_lines([(20, 3)])
    PriceBreakdown(subtotal=Decimal('60.00'), shipping=Decimal('0.00'), tax=Decimal('4.80'), total=Decimal('64.80'))
    """
    policy = policy or PricingPolicy()

    subtotal = to_money(sum((line_total(price, qty) for price, qty in lines), Decimal("0")))
    if subtotal >= policy.free_shipping_threshold:
        shipping = to_money(0)
    else:
        shipping = to_money(policy.flat_shipping_fee)
    tax = to_money(subtotal * policy.tax_rate)

    return PriceBreakdown(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
    )
