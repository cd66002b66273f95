"""shop_withdraw REST endpoints.

GET  /withdraws                      — list (search, status, page, perPage, withdrawId)
POST /withdraws/approve?withdrawId=  — approve the withdraw whose dialog is open
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.database import get_db_session
from src.shop_common.response import ApiResponse, success_response
from src.shop_withdraw.application.service import WithdrawApplicationService

router = APIRouter(prefix="/withdraws", tags=["withdraws"])

_service = WithdrawApplicationService()


@router.get("")
async def list_withdraws(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_withdraws(db, request.query_params, request.url.path)
    return success_response(result.model_dump(), request)


@router.post("/approve")
async def approve_withdraw(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    withdraw_id: str | None = Query(None, alias="withdrawId"),
) -> ApiResponse:
    result = await _service.approve(db, withdraw_id)
    return success_response(result.model_dump(), request)
