"""Domain model for shop_coupon."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Coupon:
    id: str
    name: str
    code: str
    value: int  # flat discount in currency units
    status: str
    expire_at: datetime | None
    created_at: datetime
    updated_at: datetime
