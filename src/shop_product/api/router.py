"""shop_product REST endpoints.

GET    /products            — admin list (search, status, page, perPage, productId)
DELETE /products?productId= — delete the product whose dialog is open
GET    /products/catalog    — published catalog entries for order composition
GET    /products/recent     — storefront "recently added" feed
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.shop_common.database import get_db_session
from src.shop_common.response import ApiResponse, success_response
from src.shop_product.application.service import ProductApplicationService

router = APIRouter(prefix="/products", tags=["products"])

_service = ProductApplicationService()


@router.get("")
async def list_products(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    # Raw query params: malformed page/perPage fall back to defaults instead of 422.
    result = await _service.list_products(db, request.query_params, request.url.path)
    return success_response(result.model_dump(), request)


@router.delete("")
async def delete_product(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    product_id: str | None = Query(None, alias="productId"),
) -> ApiResponse:
    result = await _service.delete_product(db, product_id)
    return success_response(result.model_dump(), request)


@router.get("/catalog")
async def list_catalog(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    entries = await _service.list_catalog(db)
    return success_response([e.model_dump() for e in entries], request)


@router.get("/recent")
async def list_recent(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    cards = await _service.list_recent(db, settings.RECENT_PRODUCTS_LIMIT)
    return success_response([c.model_dump() for c in cards], request)
