# src/shop_order/domain/repository.py
"""OrderRepository Protocol — interface contract for persistence layer."""
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_listing.domain.filters import ListPredicate
from src.shop_order.domain.models import SellerOrder


class OrderRepositoryProtocol(Protocol):
    async def save(self, order: SellerOrder, db: AsyncSession) -> None: ...

    async def get_by_id(self, order_id: str, db: AsyncSession) -> SellerOrder | None: ...

    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int: ...

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[SellerOrder]: ...
