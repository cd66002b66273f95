"""CouponRepository — list queries over coupons (raw SQL)."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_coupon.domain.models import Coupon
from src.shop_listing.domain.filters import ListPredicate
from src.shop_listing.infrastructure.sql import (
    LIST_ORDER_BY,
    list_where_clause,
    predicate_params,
    slice_params,
)

_SELECT_COLUMNS = "id, name, code, value, status, expire_at, created_at, updated_at"

_WHERE = list_where_clause(name_column="name")

_COUNT_COUPONS_SQL = text(f"SELECT COUNT(*) FROM coupons WHERE {_WHERE}")

_LIST_COUPONS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM coupons
    WHERE {_WHERE}
    {LIST_ORDER_BY}
    LIMIT :limit OFFSET :offset
""")


def _row_to_coupon(row: Any) -> Coupon:
    return Coupon(
        id=row.id,
        name=row.name,
        code=row.code,
        value=row.value,
        status=row.status,
        expire_at=row.expire_at,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class CouponRepository:
    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int:
        result = await db.execute(_COUNT_COUPONS_SQL, predicate_params(predicate))
        return int(result.scalar_one())

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[Coupon]:
        result = await db.execute(_LIST_COUPONS_SQL, slice_params(predicate, offset, limit))
        return [_row_to_coupon(row) for row in result.fetchall()]
