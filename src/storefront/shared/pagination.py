"""Page/limit handling shared by the list endpoints."""

import math
from dataclasses import dataclass

from storefront.shared.model import CamelModel

MAX_LIMIT = 50


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @classmethod
    def clamp(cls, page: int | None, limit: int | None, default_limit: int = 10) -> "PageRequest":
        """Out-of-range values are pulled into range, never rejected."""
        page = max(1, page if page is not None else 1)
        limit = min(MAX_LIMIT, max(1, limit if limit is not None else default_limit))
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, request: PageRequest, total: int) -> "Pagination":
        pages = math.ceil(total / request.limit)
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            pages=pages,
            has_next=request.page < pages,
            has_prev=request.page > 1,
        )
