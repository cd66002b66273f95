"""005: create withdraws table

Revision ID: 005
Revises: 004
Create Date: 2026-10-12
"""
from typing import Sequence, Union
from alembic import op

revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE withdraws (
            id              VARCHAR(64)     PRIMARY KEY,
            seller_name     VARCHAR(255)    NOT NULL,
            amount          BIGINT          NOT NULL,
            method          VARCHAR(32)     NOT NULL,
            account_number  VARCHAR(64)     NOT NULL,
            status          VARCHAR(20)     NOT NULL DEFAULT 'PENDING',
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_withdraws_status CHECK (status IN ('PENDING', 'APPROVED', 'REJECTED')),
            CONSTRAINT ck_withdraws_amount CHECK (amount > 0)
        );
    """)
    op.execute("CREATE INDEX idx_withdraws_created ON withdraws (created_at DESC, id DESC);")
    op.execute(
        "CREATE INDEX idx_withdraws_seller_trgm ON withdraws USING gin (seller_name gin_trgm_ops);"
    )
    op.execute("""
        CREATE TRIGGER trg_withdraws_updated_at
            BEFORE UPDATE ON withdraws
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS withdraws CASCADE;")
