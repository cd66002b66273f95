# src/shop_order/api/router.py
"""shop_order REST endpoints.

POST /orders            — create a seller order (floor price enforced)
GET  /orders            — list (search, status, page, perPage, date)
GET  /orders/{order_id} — detail with line items
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.database import get_db_session
from src.shop_common.response import ApiResponse, success_response
from src.shop_order.application.schemas import CreateOrderRequest
from src.shop_order.application.service import OrderApplicationService

router = APIRouter(prefix="/orders", tags=["orders"])

_service = OrderApplicationService()


@router.post("", status_code=201)
async def create_order(
    req: CreateOrderRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.create_order(db, req)
    return success_response(result.model_dump(), request)


@router.get("")
async def list_orders(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_orders(db, request.query_params, request.url.path)
    return success_response(result.model_dump(), request)


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.get_order(db, order_id)
    return success_response(result.model_dump(), request)
