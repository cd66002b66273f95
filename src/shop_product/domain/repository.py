# src/shop_product/domain/repository.py
"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_listing.domain.filters import ListPredicate
from src.shop_product.domain.models import Product


class ProductRepositoryProtocol(Protocol):
    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int: ...

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[Product]: ...

    async def get_by_ids(self, db: AsyncSession, product_ids: list[str]) -> list[Product]: ...

    async def delete(self, db: AsyncSession, product_id: str) -> bool: ...

    async def list_published(self, db: AsyncSession) -> list[Product]: ...

    async def list_recent(self, db: AsyncSession, limit: int) -> list[Product]: ...
