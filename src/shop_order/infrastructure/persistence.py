# src/shop_order/infrastructure/persistence.py
"""OrderRepository — raw SQL persistence implementation."""
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
from src.shop_order.domain.models import OrderItem, SellerOrder

# ---------------------------------------------------------------------------
# SQL statements
# ---------------------------------------------------------------------------

_INSERT_ORDER_SQL = text("""
    INSERT INTO seller_orders (id, invoice_id, customer_name, address, mobile,
        delivery_fee, item_count, subtotal, total, status)
    VALUES (:id, :invoice_id, :customer_name, :address, :mobile,
        :delivery_fee, :item_count, :subtotal, :total, :status)
""")

_INSERT_ITEM_SQL = text("""
    INSERT INTO order_items (order_id, position, product_id, product_name,
        quantity, unit_price, size, color)
    VALUES (:order_id, :position, :product_id, :product_name,
        :quantity, :unit_price, :size, :color)
""")

_SELECT_COLUMNS = """
    id, invoice_id, customer_name, address, mobile,
    delivery_fee, item_count, subtotal, total, status, created_at, updated_at
"""

_GET_ORDER_BY_ID_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM seller_orders WHERE id = :id
""")

_GET_ORDER_ITEMS_SQL = text("""
    SELECT product_id, product_name, quantity, unit_price, size, color
    FROM order_items WHERE order_id = :order_id
    ORDER BY position
""")

_WHERE = list_where_clause(name_column="customer_name")

_COUNT_ORDERS_SQL = text(f"SELECT COUNT(*) FROM seller_orders WHERE {_WHERE}")

_LIST_ORDERS_SQL = text(f"""
    SELECT {_SELECT_COLUMNS}
    FROM seller_orders
    WHERE {_WHERE}
    {LIST_ORDER_BY}
    LIMIT :limit OFFSET :offset
""")


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_order(row: Any) -> SellerOrder:
    return SellerOrder(
        id=row.id,
        invoice_id=row.invoice_id,
        customer_name=row.customer_name,
        address=row.address,
        mobile=row.mobile,
        delivery_fee=row.delivery_fee,
        item_count=row.item_count,
        subtotal=row.subtotal,
        total=row.total,
        status=row.status,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _row_to_item(row: Any) -> OrderItem:
    return OrderItem(
        product_id=row.product_id,
        product_name=row.product_name,
        quantity=row.quantity,
        unit_price=row.unit_price,
        size=row.size,
        color=row.color,
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class OrderRepository:
    """Concrete implementation of OrderRepositoryProtocol using raw SQL."""

    async def save(self, order: SellerOrder, db: AsyncSession) -> None:
        await db.execute(
            _INSERT_ORDER_SQL,
            {
                "id": order.id,
                "invoice_id": order.invoice_id,
                "customer_name": order.customer_name,
                "address": order.address,
                "mobile": order.mobile,
                "delivery_fee": order.delivery_fee,
                "item_count": order.item_count,
                "subtotal": order.subtotal,
                "total": order.total,
                "status": order.status,
            },
        )
        await db.execute(
            _INSERT_ITEM_SQL,
            [
                {
                    "order_id": order.id,
                    "position": position,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                    "size": item.size,
                    "color": item.color,
                }
                for position, item in enumerate(order.items)
            ],
        )

    async def get_by_id(self, order_id: str, db: AsyncSession) -> SellerOrder | None:
        result = await db.execute(_GET_ORDER_BY_ID_SQL, {"id": order_id})
        row = result.fetchone()
        if row is None:
            return None
        order = _row_to_order(row)
        items_result = await db.execute(_GET_ORDER_ITEMS_SQL, {"order_id": order_id})
        order.items = [_row_to_item(r) for r in items_result.fetchall()]
        return order

    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int:
        result = await db.execute(_COUNT_ORDERS_SQL, predicate_params(predicate))
        return int(result.scalar_one())

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[SellerOrder]:
        result = await db.execute(_LIST_ORDERS_SQL, slice_params(predicate, offset, limit))
        return [_row_to_order(row) for row in result.fetchall()]
