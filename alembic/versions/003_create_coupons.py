"""003: create coupons table

Revision ID: 003
Revises: 002
Create Date: 2026-10-12
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE coupons (
            id          VARCHAR(64)     PRIMARY KEY,
            name        VARCHAR(255)    NOT NULL,
            code        VARCHAR(64)     NOT NULL,
            value       BIGINT          NOT NULL,
            status      VARCHAR(20)     NOT NULL DEFAULT 'ACTIVE',
            expire_at   TIMESTAMPTZ,
            created_at  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_coupons_code UNIQUE (code),
            CONSTRAINT ck_coupons_status CHECK (status IN ('ACTIVE', 'INACTIVE')),
            CONSTRAINT ck_coupons_value CHECK (value > 0)
        );
    """)
    op.execute("CREATE INDEX idx_coupons_created ON coupons (created_at DESC, id DESC);")
    op.execute("CREATE INDEX idx_coupons_name_trgm ON coupons USING gin (name gin_trgm_ops);")
    op.execute("""
        CREATE TRIGGER trg_coupons_updated_at
            BEFORE UPDATE ON coupons
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS coupons CASCADE;")
