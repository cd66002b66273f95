"""Paginated list execution shared by every admin list view."""

import logging
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.errors import QueryFailedError
from src.shop_listing.domain.filters import FilterState, ListPredicate
from src.shop_listing.domain.pagination import ListResult
from src.shop_listing.domain.repository import ListRepositoryProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_page(
    db: AsyncSession,
    repo: ListRepositoryProtocol[T],
    state: FilterState,
) -> ListResult[T]:
    """Count and slice with one predicate; total_pages comes from this call's count."""
    predicate = ListPredicate.from_filter(state)
    try:
        total_count = await repo.count(db, predicate)
        # Past the last row: nothing to slice, and OFFSET may exceed BIGINT.
        rows = (
            await repo.find_slice(db, predicate, state.offset, state.per_page)
            if state.offset < total_count
            else []
        )
    except SQLAlchemyError as exc:
        logger.error("List query failed for %s: %s", type(repo).__name__, exc)
        raise QueryFailedError() from exc
    return ListResult(
        total_count=total_count,
        page=state.page,
        per_page=state.per_page,
        rows=list(rows),
    )
