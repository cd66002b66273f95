"""WithdrawRepository — raw SQL over the withdraws table."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_listing.domain.filters import ListPredicate
from src.shop_listing.infrastructure.sql import (
    LIST_ORDER_BY,
    list_where_clause,
    predicate_params,
    slice_params,
)
from src.shop_withdraw.domain.models import Withdraw

_SELECT_COLUMNS = """
    id, seller_name, amount, method, account_number, status, created_at, updated_at
"""

_WHERE = list_where_clause(name_column="seller_name")

_COUNT_WITHDRAWS_SQL = text(f"SELECT COUNT(*) FROM withdraws WHERE {_WHERE}")

_LIST_WITHDRAWS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM withdraws
    WHERE {_WHERE}
    {LIST_ORDER_BY}
    LIMIT :limit OFFSET :offset
""")

_GET_WITHDRAW_FOR_UPDATE_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM withdraws
    WHERE id = :withdraw_id
    FOR UPDATE
""")

_UPDATE_STATUS_SQL = text("""
    UPDATE withdraws SET status = :status
    WHERE id = :withdraw_id
    RETURNING updated_at
""")


def _row_to_withdraw(row: Any) -> Withdraw:
    return Withdraw(
        id=row.id,
        seller_name=row.seller_name,
        amount=row.amount,
        method=row.method,
        account_number=row.account_number,
        status=row.status,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class WithdrawRepository:
    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int:
        result = await db.execute(_COUNT_WITHDRAWS_SQL, predicate_params(predicate))
        return int(result.scalar_one())

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[Withdraw]:
        result = await db.execute(_LIST_WITHDRAWS_SQL, slice_params(predicate, offset, limit))
        return [_row_to_withdraw(row) for row in result.fetchall()]

    async def get_for_update(self, db: AsyncSession, withdraw_id: str) -> Withdraw | None:
        result = await db.execute(_GET_WITHDRAW_FOR_UPDATE_SQL, {"withdraw_id": withdraw_id})
        row = result.fetchone()
        return _row_to_withdraw(row) if row else None

    async def update_status(self, db: AsyncSession, withdraw: Withdraw) -> None:
        result = await db.execute(
            _UPDATE_STATUS_SQL, {"withdraw_id": withdraw.id, "status": withdraw.status}
        )
        row = result.fetchone()
        if row is not None:
            withdraw.updated_at = row.updated_at
