"""WithdrawApplicationService — withdraw list and approval.

approve() runs in one transaction with the row locked (SELECT ... FOR UPDATE).
"""

import logging
from collections.abc import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.enums import WithdrawStatus
from src.shop_common.errors import (
    MissingReferenceError,
    WithdrawNotFoundError,
    WithdrawNotPendingError,
)
from src.shop_listing.application.schemas import PageMeta
from src.shop_listing.application.service import fetch_page
from src.shop_listing.domain.filters import build_filter
from src.shop_listing.domain.query_state import WITHDRAW_ID_KEY, selected_id
from src.shop_withdraw.application.schemas import (
    ApproveWithdrawResponse,
    WithdrawItem,
    WithdrawListResponse,
)
from src.shop_withdraw.domain.repository import WithdrawRepositoryProtocol
from src.shop_withdraw.infrastructure.persistence import WithdrawRepository

logger = logging.getLogger(__name__)


class WithdrawApplicationService:
    def __init__(self, repo: WithdrawRepositoryProtocol | None = None) -> None:
        self._repo: WithdrawRepositoryProtocol = repo or WithdrawRepository()

    async def list_withdraws(
        self, db: AsyncSession, query: Mapping[str, str], path: str
    ) -> WithdrawListResponse:
        result = await fetch_page(db, self._repo, build_filter(query))
        return WithdrawListResponse(
            items=[WithdrawItem.from_domain(w) for w in result.rows],
            meta=PageMeta.from_result(result, path, query),
            selected_id=selected_id(query, WITHDRAW_ID_KEY),
        )

    async def approve(
        self, db: AsyncSession, withdraw_id: str | None
    ) -> ApproveWithdrawResponse:
        if not withdraw_id:
            raise MissingReferenceError("Withdraw ID is missing")
        try:
            withdraw = await self._repo.get_for_update(db, withdraw_id)
            if withdraw is None:
                raise WithdrawNotFoundError(withdraw_id)
            if not withdraw.is_pending:
                raise WithdrawNotPendingError(withdraw_id, withdraw.status)
            withdraw.status = WithdrawStatus.APPROVED.value
            await self._repo.update_status(db, withdraw)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info("Withdraw approved: %s amount=%d", withdraw.id, withdraw.amount)
        return ApproveWithdrawResponse(
            success="Withdraw approved", withdraw=WithdrawItem.from_domain(withdraw)
        )
