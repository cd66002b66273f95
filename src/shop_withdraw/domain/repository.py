"""WithdrawRepository Protocol."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_listing.domain.filters import ListPredicate
from src.shop_withdraw.domain.models import Withdraw


class WithdrawRepositoryProtocol(Protocol):
    async def count(self, db: AsyncSession, predicate: ListPredicate) -> int: ...

    async def find_slice(
        self,
        db: AsyncSession,
        predicate: ListPredicate,
        offset: int,
        limit: int,
    ) -> list[Withdraw]: ...

    async def get_for_update(self, db: AsyncSession, withdraw_id: str) -> Withdraw | None: ...

    async def update_status(self, db: AsyncSession, withdraw: Withdraw) -> None: ...
