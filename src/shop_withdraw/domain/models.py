"""Domain model for shop_withdraw."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Withdraw:
    id: str
    seller_name: str
    amount: int
    method: str  # e.g. bKash, Nagad, Bank
    account_number: str
    status: str
    created_at: datetime
    updated_at: datetime

    @property
    def is_pending(self) -> bool:
        return self.status == "PENDING"
