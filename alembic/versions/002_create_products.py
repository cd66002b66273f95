"""002: create products and product_stocks tables

Revision ID: 002
Revises: 001
Create Date: 2026-10-12
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE products (
            id                  VARCHAR(64)     PRIMARY KEY,
            name                VARCHAR(255)    NOT NULL,
            price               BIGINT          NOT NULL,
            discount_price      BIGINT,
            seller_price        BIGINT,
            total_stock         INT             NOT NULL DEFAULT 0,
            status              VARCHAR(20)     NOT NULL DEFAULT 'DRAFT',
            feature_image_url   TEXT,
            colors              TEXT[]          NOT NULL DEFAULT '{}',
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_products_status CHECK (status IN ('DRAFT', 'PUBLISHED', 'ARCHIVED')),
            CONSTRAINT ck_products_price CHECK (price >= 0),
            CONSTRAINT ck_products_discount CHECK (discount_price IS NULL OR discount_price >= 0),
            CONSTRAINT ck_products_seller_price CHECK (seller_price IS NULL OR seller_price >= 0),
            CONSTRAINT ck_products_stock CHECK (total_stock >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_products_created ON products (created_at DESC, id DESC);")
    op.execute("CREATE INDEX idx_products_status ON products (status);")
    op.execute("CREATE INDEX idx_products_name_trgm ON products USING gin (name gin_trgm_ops);")
    op.execute("""
        CREATE TRIGGER trg_products_updated_at
            BEFORE UPDATE ON products
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)

    op.execute("""
        CREATE TABLE product_stocks (
            id          BIGSERIAL       PRIMARY KEY,
            product_id  VARCHAR(64)     NOT NULL REFERENCES products(id) ON DELETE CASCADE,
            size        VARCHAR(32),
            color       VARCHAR(64),
            quantity    INT             NOT NULL DEFAULT 0,
            CONSTRAINT ck_product_stocks_qty CHECK (quantity >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_product_stocks_product ON product_stocks (product_id);")
    op.execute("COMMENT ON TABLE products IS 'Seller catalog products';")
    op.execute("COMMENT ON TABLE product_stocks IS 'Per-size/color stock rows for a product';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS product_stocks CASCADE;")
    op.execute("DROP TABLE IF EXISTS products CASCADE;")
