"""Pydantic schemas for shop_withdraw."""

from pydantic import BaseModel

from src.shop_common.money import amount_to_display
from src.shop_listing.application.schemas import PageMeta
from src.shop_withdraw.domain.models import Withdraw


class WithdrawItem(BaseModel):
    id: str
    seller_name: str
    amount: int
    amount_display: str
    method: str
    account_number: str
    status: str
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, w: Withdraw) -> "WithdrawItem":
        return cls(
            id=w.id,
            seller_name=w.seller_name,
            amount=w.amount,
            amount_display=amount_to_display(w.amount),
            method=w.method,
            account_number=w.account_number,
            status=w.status,
            created_at=w.created_at.isoformat(),
            updated_at=w.updated_at.isoformat(),
        )


class WithdrawListResponse(BaseModel):
    items: list[WithdrawItem]
    meta: PageMeta
    selected_id: str | None  # withdrawId: approve confirmation is open for this row


class ApproveWithdrawResponse(BaseModel):
    success: str
    withdraw: WithdrawItem
