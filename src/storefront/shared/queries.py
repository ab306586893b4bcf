"""Helpers for reading whole result sets out of Protean querysets."""

PAGE_SIZE = 100


def fetch_all(queryset, page_size: int = PAGE_SIZE) -> list:
    """Read every record matched by ``queryset``, page by page.

    Protean querysets cap results at a default limit, so aggregations that
    need the full set walk the pages explicitly.
    """
    records = []
    offset = 0
    while True:
        page = queryset.limit(page_size).offset(offset).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
        offset += page_size
