"""Persisted seller order — pure dataclasses, no SQLAlchemy dependency."""
from dataclasses import dataclass, field
from datetime import datetime

from src.shop_common.enums import OrderStatus


@dataclass
class OrderItem:
    product_id: str | None  # NULL once the product is deleted
    product_name: str  # snapshot at order time
    quantity: int
    unit_price: int
    size: str | None = None
    color: str | None = None

    @property
    def line_total(self) -> int:
        return self.quantity * self.unit_price


@dataclass
class SellerOrder:
    id: str
    invoice_id: str
    customer_name: str
    address: str
    mobile: str
    delivery_fee: int
    item_count: int
    subtotal: int
    total: int
    status: str = OrderStatus.PENDING.value
    items: list[OrderItem] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
