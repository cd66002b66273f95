"""shop_coupon REST endpoints.

GET /coupons — admin list (search, status, page, perPage)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.database import get_db_session
from src.shop_common.response import ApiResponse, success_response
from src.shop_coupon.application.service import CouponApplicationService

router = APIRouter(prefix="/coupons", tags=["coupons"])

_service = CouponApplicationService()


@router.get("")
async def list_coupons(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_coupons(db, request.query_params, request.url.path)
    return success_response(result.model_dump(), request)
