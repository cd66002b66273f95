"""Pydantic schemas shared by list endpoints."""

from collections.abc import Mapping

from pydantic import BaseModel

from src.shop_listing.domain.pagination import ListResult
from src.shop_listing.domain.query_state import QueryValue, pagination_links


class PaginationLinksOut(BaseModel):
    first: str | None
    prev: str | None
    next: str | None
    last: str | None


class PageMeta(BaseModel):
    page: int
    per_page: int
    total_count: int
    total_pages: int
    links: PaginationLinksOut

    @classmethod
    def from_result(
        cls, result: ListResult, path: str, query: Mapping[str, QueryValue]
    ) -> "PageMeta":
        links = pagination_links(path, query, result.page, result.total_pages)
        return cls(
            page=result.page,
            per_page=result.per_page,
            total_count=result.total_count,
            total_pages=result.total_pages,
            links=PaginationLinksOut(
                first=links.first, prev=links.prev, next=links.next, last=links.last
            ),
        )
