"""Storefront settings read from the ``[custom]`` section of ``domain.toml``."""

from decimal import Decimal

DEFAULTS = {
    "FREE_SHIPPING_THRESHOLD": "50.00",
    "FLAT_SHIPPING_FEE": "9.99",
    "TAX_RATE": "0.08",
    "ORDER_NUMBER_PREFIX": "BP",
}


def get_setting(domain, key: str):
    """Return a custom setting from the domain config, or its built-in default."""
    custom = domain.config.get("custom") or {}
    value = custom.get(key)
    if value is None:
        return DEFAULTS[key]
    return value


def get_decimal_setting(domain, key: str) -> Decimal:
    # str() first so float config values do not leak binary noise
    return Decimal(str(get_setting(domain, key)))
