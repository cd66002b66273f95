"""Unit tests for CouponApplicationService using mock repository."""
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.shop_coupon.application.service import CouponApplicationService
from src.shop_coupon.domain.models import Coupon


@pytest.fixture
def db():
    return MagicMock()


class TestListCoupons:
    @pytest.mark.asyncio
    async def test_search_passed_as_literal_pattern(self, db):
        repo = MagicMock()
        repo.count = AsyncMock(return_value=1)
        repo.find_slice = AsyncMock(return_value=[
            Coupon(id="C1", name="Eid 50%", code="EID50", value=50, status="ACTIVE",
                   expire_at=None, created_at=datetime.now(UTC), updated_at=datetime.now(UTC))
        ])
        svc = CouponApplicationService(repo=repo)

        resp = await svc.list_coupons(db, {"search": "50%"}, "/api/v1/coupons")

        assert repo.count.call_args.args[1].search_pattern == "%50\\%%"
        assert resp.items[0].code == "EID50"
        assert resp.items[0].expire_at is None
        assert resp.meta.links.last == "/api/v1/coupons?page=1&search=50%25"
