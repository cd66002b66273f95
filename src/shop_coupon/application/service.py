"""Coupon list service."""

from collections.abc import Mapping

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_coupon.domain.models import Coupon
from src.shop_coupon.infrastructure.persistence import CouponRepository
from src.shop_listing.application.schemas import PageMeta
from src.shop_listing.application.service import fetch_page
from src.shop_listing.domain.filters import build_filter
from src.shop_listing.domain.repository import ListRepositoryProtocol


class CouponListItem(BaseModel):
    id: str
    name: str
    code: str
    value: int
    status: str
    expire_at: str | None
    created_at: str

    @classmethod
    def from_domain(cls, c: Coupon) -> "CouponListItem":
        return cls(
            id=c.id,
            name=c.name,
            code=c.code,
            value=c.value,
            status=c.status,
            expire_at=c.expire_at.isoformat() if c.expire_at else None,
            created_at=c.created_at.isoformat(),
        )


class CouponListResponse(BaseModel):
    items: list[CouponListItem]
    meta: PageMeta


class CouponApplicationService:
    def __init__(self, repo: ListRepositoryProtocol[Coupon] | None = None) -> None:
        self._repo: ListRepositoryProtocol[Coupon] = repo or CouponRepository()

    async def list_coupons(
        self, db: AsyncSession, query: Mapping[str, str], path: str
    ) -> CouponListResponse:
        result = await fetch_page(db, self._repo, build_filter(query))
        return CouponListResponse(
            items=[CouponListItem.from_domain(c) for c in result.rows],
            meta=PageMeta.from_result(result, path, query),
        )
