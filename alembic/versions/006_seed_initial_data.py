"""006: seed initial data

Revision ID: 006
Revises: 005
Create Date: 2026-10-12
"""

from typing import Sequence, Union

from alembic import op

revision: str = "006"
down_revision: Union[str, None] = "005"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Sample catalog
    op.execute("""
        INSERT INTO products (
            id, name, price, discount_price, seller_price, total_stock, status, colors
        ) VALUES
            ('PRD-SHIRT', 'Shirt', 1200, 1000, 800, 40, 'PUBLISHED', '{"Blue","White"}'),
            ('PRD-MUG', 'Mug', 450, NULL, 300, 25, 'PUBLISHED', '{}'),
            ('PRD-CAP', 'Cap', 600, 550, NULL, 10, 'DRAFT', '{"Black"}');
    """)
    op.execute("""
        INSERT INTO product_stocks (product_id, size, color, quantity) VALUES
            ('PRD-SHIRT', 'M', 'Blue', 10),
            ('PRD-SHIRT', 'L', 'Blue', 10),
            ('PRD-SHIRT', 'M', 'White', 10),
            ('PRD-SHIRT', 'L', 'White', 10),
            ('PRD-MUG', NULL, NULL, 25),
            ('PRD-CAP', NULL, 'Black', 10);
    """)

    op.execute("""
        INSERT INTO coupons (id, name, code, value, status, expire_at) VALUES
            ('CPN-EID', 'Eid Offer', 'EID50', 50, 'ACTIVE', '2026-12-31T23:59:59Z'),
            ('CPN-NEW', 'New Customer', 'WELCOME100', 100, 'INACTIVE', NULL);
    """)

    op.execute("""
        INSERT INTO withdraws (id, seller_name, amount, method, account_number, status) VALUES
            ('WDR-0001', 'Rahim Store', 5000, 'bKash', '01700000000', 'PENDING'),
            ('WDR-0002', 'Karim Traders', 12000, 'Bank', '1234567890', 'APPROVED');
    """)


def downgrade() -> None:
    op.execute("DELETE FROM withdraws WHERE id IN ('WDR-0001', 'WDR-0002');")
    op.execute("DELETE FROM coupons WHERE id IN ('CPN-EID', 'CPN-NEW');")
    op.execute("DELETE FROM products WHERE id IN ('PRD-SHIRT', 'PRD-MUG', 'PRD-CAP');")
