"""001: shared trigger function and trigram search support

Revision ID: 001
Revises: 
Create Date: 2026-10-12
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Keeps updated_at current on every list table (products, coupons, orders, withdraws).
    op.execute("""
        CREATE OR REPLACE FUNCTION fn_touch_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    # List search is ILIKE '%term%'; GIN trigram indexes serve it.
    op.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm;")


def downgrade() -> None:
    op.execute("DROP FUNCTION IF EXISTS fn_touch_updated_at();")
