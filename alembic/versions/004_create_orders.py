"""004: create seller_orders and order_items tables

Revision ID: 004
Revises: 003
Create Date: 2026-10-12
"""
from typing import Sequence, Union
from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE seller_orders (
            id              VARCHAR(64)     PRIMARY KEY,
            invoice_id      VARCHAR(32)     NOT NULL,
            customer_name   VARCHAR(255)    NOT NULL,
            address         TEXT            NOT NULL,
            mobile          VARCHAR(32)     NOT NULL,
            delivery_fee    INT             NOT NULL,
            item_count      INT             NOT NULL,
            subtotal        BIGINT          NOT NULL,
            total           BIGINT          NOT NULL,
            status          VARCHAR(20)     NOT NULL DEFAULT 'PENDING',
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_seller_orders_invoice UNIQUE (invoice_id),
            CONSTRAINT ck_seller_orders_fee CHECK (delivery_fee IN (60, 100, 120)),
            CONSTRAINT ck_seller_orders_status
                CHECK (status IN ('PENDING', 'SHIPPING', 'DELIVERED', 'RETURNED')),
            CONSTRAINT ck_seller_orders_total CHECK (total = subtotal + delivery_fee)
        );
    """)
    op.execute("CREATE INDEX idx_seller_orders_created ON seller_orders (created_at DESC, id DESC);")
    op.execute(
        "CREATE INDEX idx_seller_orders_customer_trgm"
        " ON seller_orders USING gin (customer_name gin_trgm_ops);"
    )
    op.execute("""
        CREATE TRIGGER trg_seller_orders_updated_at
            BEFORE UPDATE ON seller_orders
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)

    op.execute("""
        CREATE TABLE order_items (
            id              BIGSERIAL       PRIMARY KEY,
            order_id        VARCHAR(64)     NOT NULL REFERENCES seller_orders(id) ON DELETE CASCADE,
            position        INT             NOT NULL,
            product_id      VARCHAR(64)     REFERENCES products(id) ON DELETE SET NULL,
            product_name    VARCHAR(255)    NOT NULL,
            quantity        INT             NOT NULL,
            unit_price      BIGINT          NOT NULL,
            size            VARCHAR(32),
            color           VARCHAR(64),
            CONSTRAINT uq_order_items_position UNIQUE (order_id, position),
            CONSTRAINT ck_order_items_qty CHECK (quantity >= 1),
            CONSTRAINT ck_order_items_price CHECK (unit_price >= 0)
        );
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS order_items CASCADE;")
    op.execute("DROP TABLE IF EXISTS seller_orders CASCADE;")
