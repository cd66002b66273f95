# src/shop_order/application/service.py
"""OrderApplicationService — server-side order creation and order lists.

The server re-runs the draft checks against the stored catalog; the
dashboard's own validation is a convenience, not the gate.
"""
import logging
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shop_common.errors import (
    OrderNotFoundError,
    PriceBelowFloorError,
    ProductNotFoundError,
    VariantRequiredError,
)
from src.shop_common.id_generator import generate_id, generate_invoice_id
from src.shop_listing.application.schemas import PageMeta
from src.shop_listing.application.service import fetch_page
from src.shop_listing.domain.filters import build_filter
from src.shop_order.application.schemas import (
    CreateOrderRequest,
    CreateOrderResponse,
    OrderDetail,
    OrderListItem,
    OrderListResponse,
)
from src.shop_order.domain.draft import (
    Issue,
    OrderDraft,
    ValidationResult,
    check_variants,
    compute_totals,
    validate,
)
from src.shop_order.domain.models import OrderItem, SellerOrder
from src.shop_order.domain.repository import OrderRepositoryProtocol
from src.shop_order.infrastructure.persistence import OrderRepository
from src.shop_product.domain.models import CatalogEntry
from src.shop_product.domain.repository import ProductRepositoryProtocol
from src.shop_product.infrastructure.persistence import ProductRepository

logger = logging.getLogger(__name__)

INVOICE_CONSTRAINT = "uq_seller_orders_invoice"
MAX_INVOICE_ATTEMPTS = 3


def _is_invoice_collision(exc: IntegrityError) -> bool:
    return INVOICE_CONSTRAINT in str(exc.orig)


def _raise_for(result: ValidationResult, draft: OrderDraft) -> None:
    if result.ok:
        return
    message = result.message or "Invalid order"
    if result.issue is Issue.PRICE_BELOW_FLOOR:
        raise PriceBelowFloorError(message)
    if result.issue is Issue.UNKNOWN_PRODUCT and result.line_index is not None:
        raise ProductNotFoundError(draft.line_items[result.line_index].catalog_entry_id)
    raise VariantRequiredError(message)


def _build_order(draft: OrderDraft, catalog: Mapping[str, CatalogEntry]) -> SellerOrder:
    totals = compute_totals(draft)
    return SellerOrder(
        id=generate_id(),
        invoice_id=generate_invoice_id(),
        customer_name=draft.customer_name,
        address=draft.address,
        mobile=draft.mobile,
        delivery_fee=totals.delivery_fee,
        item_count=totals.item_count,
        subtotal=totals.subtotal,
        total=totals.total,
        items=[
            OrderItem(
                product_id=item.catalog_entry_id,
                product_name=catalog[item.catalog_entry_id].name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                size=item.size,
                color=item.color,
            )
            for item in draft.line_items
        ],
    )


class OrderApplicationService:
    def __init__(
        self,
        repo: OrderRepositoryProtocol | None = None,
        product_repo: ProductRepositoryProtocol | None = None,
    ) -> None:
        self._repo: OrderRepositoryProtocol = repo or OrderRepository()
        self._product_repo: ProductRepositoryProtocol = product_repo or ProductRepository()

    async def create_order(
        self, db: AsyncSession, req: CreateOrderRequest
    ) -> CreateOrderResponse:
        draft = req.to_draft()
        products = await self._product_repo.get_by_ids(
            db, [item.catalog_entry_id for item in draft.line_items]
        )
        catalog = {p.id: CatalogEntry.from_product(p) for p in products}

        _raise_for(check_variants(draft, catalog.get), draft)
        _raise_for(validate(draft, catalog.get), draft)

        order = _build_order(draft, catalog)
        await self._save_with_fresh_invoice(db, order)
        logger.info(
            "Order created: %s invoice=%s items=%d total=%d",
            order.id,
            order.invoice_id,
            order.item_count,
            order.total,
        )
        return CreateOrderResponse.from_order(order, compute_totals(draft))

    async def _save_with_fresh_invoice(self, db: AsyncSession, order: SellerOrder) -> None:
        """Save and commit; an invoice id already taken is redrawn a bounded number of times."""
        for attempt in range(1, MAX_INVOICE_ATTEMPTS + 1):
            try:
                await self._repo.save(order, db)
                await db.commit()
                return
            except IntegrityError as exc:
                await db.rollback()
                if not _is_invoice_collision(exc) or attempt == MAX_INVOICE_ATTEMPTS:
                    raise
                logger.warning(
                    "Invoice id %s already taken (attempt %d), drawing a new one",
                    order.invoice_id,
                    attempt,
                )
                order.invoice_id = generate_invoice_id()
            except Exception:
                await db.rollback()
                raise

    async def get_order(self, db: AsyncSession, order_id: str) -> OrderDetail:
        order = await self._repo.get_by_id(order_id, db)
        if order is None:
            raise OrderNotFoundError(order_id)
        return OrderDetail.from_domain(order)

    async def list_orders(
        self, db: AsyncSession, query: Mapping[str, str], path: str
    ) -> OrderListResponse:
        result = await fetch_page(db, self._repo, build_filter(query))
        return OrderListResponse(
            items=[OrderListItem.from_domain(o) for o in result.rows],
            meta=PageMeta.from_result(result, path, query),
        )
