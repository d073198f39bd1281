"""Shared FastAPI dependencies.

``PageQuery`` reads ``?page=`` and ``?page_size=`` and clamps them the same
way ``calculate_pagination`` does, so list endpoints never reject a bad page
number::

    @router.get("/users")
    async def list_users(page: PageQuery) -> Response:
        users, total = await repo.list(offset=page.offset, limit=page.page_size)
        return list_response_with_pagination(users, page.paginate(total))
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query

from response_utils.config import settings
from response_utils.responses import calculate_pagination
from response_utils.schemas.pagination import Pagination


@dataclass(frozen=True)
class PageParams:
    """Clamped page window requested by the client."""

    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def paginate(self, total: int) -> Pagination:
        return calculate_pagination(self.page, self.page_size, total)


def page_params(
    page: int = Query(1, description="1-based page number; values below 1 mean 1"),
    page_size: int | None = Query(
        None, description="Items per page; missing or non-positive uses the default"
    ),
) -> PageParams:
    meta = calculate_pagination(page, page_size or 0, 0)
    return PageParams(page=meta.page, page_size=meta.page_size)


PageQuery = Annotated[PageParams, Depends(page_params)]
