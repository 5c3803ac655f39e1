"""Pagination window and descriptor arithmetic shared by all listings."""

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_positive_int(value, default: int) -> int:
    """Read a page/limit parameter, falling back to ``default``.

    Missing, unparsable and non-positive values all fall back.
    """
    if value is None:
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def page_window(page: int, limit: int) -> tuple[int, int]:
    """Return the ``(offset, limit)`` pair for a 1-based page."""
    return (page - 1) * limit, limit


def pagination_links(page: int, limit: int, total: int) -> dict:
    """Build the ``{next?, prev?}`` descriptor.

    ``next`` is present only when records exist beyond the current window,
    ``prev`` only when the window does not start at the first record.
    """
    offset, _ = page_window(page, limit)
    links = {}

    if page * limit < total:
        links["next"] = {"page": page + 1, "limit": limit}

    if offset > 0:
        links["prev"] = {"page": page - 1, "limit": limit}

    return links
