"""ProductApplicationService — thin composition layer.

List/catalog/recent are read-only. delete_product commits or rolls back.
"""

import logging
from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.errors import MissingReferenceError, ProductNotFoundError
from src.shop_listing.application.schemas import PageMeta
from src.shop_listing.application.service import fetch_page
from src.shop_listing.domain.filters import build_filter
from src.shop_listing.domain.query_state import PRODUCT_ID_KEY, selected_id
from src.shop_product.application.schemas import (
    CatalogEntryOut,
    DeleteProductResponse,
    ProductCard,
    ProductListItem,
    ProductListResponse,
)
from src.shop_product.domain.models import CatalogEntry
from src.shop_product.domain.repository import ProductRepositoryProtocol
from src.shop_product.infrastructure.persistence import ProductRepository

logger = logging.getLogger(__name__)


class ProductApplicationService:
    def __init__(self, repo: ProductRepositoryProtocol | None = None) -> None:
        self._repo: ProductRepositoryProtocol = repo or ProductRepository()

    async def list_products(
        self, db: AsyncSession, query: Mapping[str, str], path: str
    ) -> ProductListResponse:
        state = build_filter(query)
        result = await fetch_page(db, self._repo, state)
        return ProductListResponse(
            items=[ProductListItem.from_domain(p) for p in result.rows],
            meta=PageMeta.from_result(result, path, query),
            selected_id=selected_id(query, PRODUCT_ID_KEY),
        )

    async def delete_product(
        self, db: AsyncSession, product_id: str | None
    ) -> DeleteProductResponse:
        if not product_id:
            raise MissingReferenceError("Product ID is missing")
        try:
            deleted = await self._repo.delete(db, product_id)
            if not deleted:
                raise ProductNotFoundError(product_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info("Product deleted: %s", product_id)
        return DeleteProductResponse(success="Product deleted", product_id=product_id)

    async def get_catalog_entries(self, db: AsyncSession) -> list[CatalogEntry]:
        products = await self._repo.list_published(db)
        return [CatalogEntry.from_product(p) for p in products]

    async def list_catalog(self, db: AsyncSession) -> list[CatalogEntryOut]:
        return [CatalogEntryOut.from_entry(e) for e in await self.get_catalog_entries(db)]

    async def list_recent(self, db: AsyncSession, limit: int) -> list[ProductCard]:
        products = await self._repo.list_recent(db, limit)
        return [ProductCard.from_domain(p) for p in products]
