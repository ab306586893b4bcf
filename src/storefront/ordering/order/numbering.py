"""Human-readable order numbers: ``<PREFIX>-<epoch millis>``.

The millisecond component never repeats within a process, even for orders
placed in the same millisecond or after a backwards clock step. Across
processes the ``unique`` constraint on ``Order.order_number`` is the backstop.
"""

import threading
import time

from storefront.shared.settings import get_setting

_lock = threading.Lock()
_last_millis = 0


def _next_millis() -> int:
    global _last_millis
    with _lock:
        now = int(time.time() * 1000)
        _last_millis = max(now, _last_millis + 1)
        return _last_millis


def next_order_number(domain) -> str:
    prefix = get_setting(domain, "ORDER_NUMBER_PREFIX")
    return f"{prefix}-{_next_millis()}"
