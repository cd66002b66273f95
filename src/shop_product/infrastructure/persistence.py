"""ProductRepository — concrete implementation of ProductRepositoryProtocol.

All queries use raw text() SQL (no ORM). Sizes come from product_stocks,
aggregated per product.
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.enums import ProductStatus
from src.shop_listing.domain.filters import ListPredicate
from src.shop_listing.infrastructure.sql import (
    LIST_ORDER_BY,
    list_where_clause,
    predicate_params,
    slice_params,
)
from src.shop_product.domain.models import Product

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_SELECT_COLUMNS = """
    id, name, price, discount_price, seller_price, total_stock, status,
    feature_image_url, colors, created_at, updated_at,
    COALESCE(
        (SELECT array_agg(DISTINCT s.size ORDER BY s.size)
         FROM product_stocks s
         WHERE s.product_id = products.id AND s.size IS NOT NULL),
        CAST('{}' AS TEXT[])
    ) AS sizes
"""

_WHERE = list_where_clause(name_column="name")

_COUNT_PRODUCTS_SQL = text(f"""
    SELECT COUNT(*) FROM products
    WHERE {_WHERE}
""")

_LIST_PRODUCTS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM products
    WHERE {_WHERE}
    {LIST_ORDER_BY}
    LIMIT :limit OFFSET :offset
""")

_GET_PRODUCTS_BY_IDS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM products
    WHERE id = ANY(string_to_array(CAST(:ids_csv AS TEXT), ','))
""")

_DELETE_PRODUCT_SQL = text("DELETE FROM products WHERE id = :product_id")

_LIST_PUBLISHED_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM products
    WHERE status = :status
    ORDER BY name, id
""")

_LIST_RECENT_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM products
    WHERE status = :status
    {LIST_ORDER_BY}
    LIMIT :limit
""")

# ---------------------------------------------------------------------------
# Row mapper
# ---------------------------------------------------------------------------


def _row_to_product(row: Any) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        price=row.price,
        discount_price=row.discount_price,
        seller_price=row.seller_price,
        total_stock=row.total_stock,
        status=row.status,
        feature_image_url=row.feature_image_url,
        colors=list(row.colors or []),
        sizes=list(row.sizes or []),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class ProductRepository:
    """Concrete repository. Only delete() writes; the caller commits."""

    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int:
        result = await db.execute(_COUNT_PRODUCTS_SQL, predicate_params(predicate))
        return int(result.scalar_one())

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[Product]:
        result = await db.execute(_LIST_PRODUCTS_SQL, slice_params(predicate, offset, limit))
        return [_row_to_product(row) for row in result.fetchall()]

    async def get_by_ids(self, db: AsyncSession, product_ids: list[str]) -> list[Product]:
        if not product_ids:
            return []
        result = await db.execute(
            _GET_PRODUCTS_BY_IDS_SQL, {"ids_csv": ",".join(sorted(set(product_ids)))}
        )
        return [_row_to_product(row) for row in result.fetchall()]

    async def delete(self, db: AsyncSession, product_id: str) -> bool:
        result = await db.execute(_DELETE_PRODUCT_SQL, {"product_id": product_id})
        return result.rowcount > 0

    async def list_published(self, db: AsyncSession) -> list[Product]:
        result = await db.execute(_LIST_PUBLISHED_SQL, {"status": ProductStatus.PUBLISHED.value})
        return [_row_to_product(row) for row in result.fetchall()]

    async def list_recent(self, db: AsyncSession, limit: int) -> list[Product]:
        result = await db.execute(
            _LIST_RECENT_SQL, {"status": ProductStatus.PUBLISHED.value, "limit": limit}
        )
        return [_row_to_product(row) for row in result.fetchall()]
