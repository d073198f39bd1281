"""Pagination metadata attached to list responses."""

from pydantic import BaseModel


class Pagination(BaseModel):
    """A page window over a larger result set.

    Values built by ``calculate_pagination`` always have ``page >= 1`` and
    ``page_size >= 1``; this model itself accepts anything.
    """

    page: int
    page_size: int
    total: int
    total_pages: int
