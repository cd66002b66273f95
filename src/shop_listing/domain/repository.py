"""List repository Protocol — what fetch_page() needs from a backing store."""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_listing.domain.filters import ListPredicate

T_co = TypeVar("T_co", covariant=True)


class ListRepositoryProtocol(Protocol[T_co]):
    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int: ...

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> Sequence[T_co]: ...
