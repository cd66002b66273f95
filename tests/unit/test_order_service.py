"""Unit tests for OrderApplicationService using mock repositories."""
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from src.shop_common.errors import (
    OrderNotFoundError,
    PriceBelowFloorError,
    ProductNotFoundError,
    VariantRequiredError,
)
from src.shop_order.application import service as order_service_module
from src.shop_order.application.schemas import CreateOrderRequest
from src.shop_order.application.service import OrderApplicationService
from src.shop_order.domain.models import OrderItem, SellerOrder
from src.shop_product.domain.models import Product


def _shirt(**kwargs) -> Product:
    defaults = dict(
        id="PRD-SHIRT", name="Shirt", price=1200, discount_price=None, seller_price=500,
        total_stock=10, status="PUBLISHED", feature_image_url=None,
        colors=[], sizes=["M", "L"],
    )
    defaults.update(kwargs)
    return Product(**defaults)


def _request(price: int = 600, size: str | None = "M", **kwargs) -> CreateOrderRequest:
    body = {
        "products": [{"productId": "PRD-SHIRT", "quantity": 2, "price": price, "size": size}],
        "customerName": "Rahim",
        "address": "House 1, Road 2",
        "mobile": "01700000000",
        "deliveryFee": 60,
    }
    body.update(kwargs)
    return CreateOrderRequest.model_validate(body)


def _invoice_collision() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO seller_orders",
        {},
        Exception('duplicate key value violates unique constraint "uq_seller_orders_invoice"'),
    )


@pytest.fixture
def db():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def order_repo():
    repo = MagicMock()
    repo.save = AsyncMock()
    return repo


@pytest.fixture
def product_repo():
    repo = MagicMock()
    repo.get_by_ids = AsyncMock(return_value=[_shirt()])
    return repo


class TestCreateOrderRequest:
    def test_blank_customer_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _request(customerName="  ")

    def test_unknown_delivery_fee_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _request(deliveryFee=75)

    def test_empty_products_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _request(products=[])

    def test_blank_size_becomes_none(self) -> None:
        assert _request(size=" ").products[0].size is None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mobile": "0" * 40},
            {"customerName": "R" * 256},
            {"products": [{"productId": "PRD-SHIRT", "quantity": 3_000_000_000, "price": 600}]},
            {"products": [{"productId": "PRD-SHIRT", "quantity": 1, "price": 10**12}]},
            {"products": [{"productId": "P" * 65, "quantity": 1, "price": 600}]},
            {"products": [{"productId": "PRD-SHIRT", "quantity": 1, "price": 600, "size": "M" * 33}]},
            {"products": [{"productId": "PRD-SHIRT", "quantity": 1, "price": 600}] * 101},
        ],
    )
    def test_values_outside_column_bounds_rejected(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            _request(**overrides)


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_creates_order_with_totals(self, db, order_repo, product_repo):
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        resp = await svc.create_order(db, _request())

        assert resp.success == "Order created"
        assert resp.item_count == 2
        assert resp.subtotal == 1200
        assert resp.delivery_fee == 60
        assert resp.total == 1260
        assert resp.invoice_id.startswith("INV-")
        saved: SellerOrder = order_repo.save.call_args.args[0]
        assert saved.items[0].product_name == "Shirt"
        assert saved.total == 1260
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_below_floor_rejected(self, db, order_repo, product_repo):
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        with pytest.raises(PriceBelowFloorError, match="should not be less than 500"):
            await svc.create_order(db, _request(price=400))
        order_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_size_rejected(self, db, order_repo, product_repo):
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        with pytest.raises(VariantRequiredError, match="Size is required"):
            await svc.create_order(db, _request(size=None))

    @pytest.mark.asyncio
    async def test_unknown_product(self, db, order_repo, product_repo):
        product_repo.get_by_ids = AsyncMock(return_value=[])
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        with pytest.raises(ProductNotFoundError):
            await svc.create_order(db, _request())

    @pytest.mark.asyncio
    async def test_save_failure_rolls_back(self, db, order_repo, product_repo):
        order_repo.save = AsyncMock(side_effect=RuntimeError("db down"))
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        with pytest.raises(RuntimeError):
            await svc.create_order(db, _request())
        db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invoice_collision_retried_with_new_id(
        self, db, order_repo, product_repo, monkeypatch
    ):
        invoices = iter(["INV-000001", "INV-000002"])
        monkeypatch.setattr(order_service_module, "generate_invoice_id", lambda: next(invoices))
        order_repo.save = AsyncMock(side_effect=[_invoice_collision(), None])
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        resp = await svc.create_order(db, _request())

        assert resp.invoice_id == "INV-000002"
        assert order_repo.save.await_count == 2
        db.rollback.assert_awaited_once()
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invoice_collision_gives_up_after_max_attempts(
        self, db, order_repo, product_repo
    ):
        order_repo.save = AsyncMock(side_effect=_invoice_collision())
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        with pytest.raises(IntegrityError):
            await svc.create_order(db, _request())
        assert order_repo.save.await_count == order_service_module.MAX_INVOICE_ATTEMPTS
        db.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_integrity_error_not_retried(self, db, order_repo, product_repo):
        order_repo.save = AsyncMock(
            side_effect=IntegrityError(
                "INSERT", {}, Exception('null value in column "address" violates not-null constraint')
            )
        )
        svc = OrderApplicationService(repo=order_repo, product_repo=product_repo)

        with pytest.raises(IntegrityError):
            await svc.create_order(db, _request())
        order_repo.save.assert_awaited_once()
        db.rollback.assert_awaited_once()


class TestReadOrders:
    @pytest.mark.asyncio
    async def test_get_order_not_found(self, db, order_repo):
        order_repo.get_by_id = AsyncMock(return_value=None)
        svc = OrderApplicationService(repo=order_repo, product_repo=MagicMock())

        with pytest.raises(OrderNotFoundError):
            await svc.get_order(db, "missing")

    @pytest.mark.asyncio
    async def test_get_order_detail(self, db, order_repo):
        order = SellerOrder(
            id="O1", invoice_id="INV-123456", customer_name="Rahim", address="House 1",
            mobile="017", delivery_fee=60, item_count=1, subtotal=600, total=660,
            items=[OrderItem(product_id=None, product_name="Shirt", quantity=1, unit_price=600)],
            created_at=datetime.now(UTC),
        )
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(repo=order_repo, product_repo=MagicMock())

        detail = await svc.get_order(db, "O1")

        assert detail.total == 660
        assert detail.items[0].line_total == 600
        assert detail.items[0].product_id is None

    @pytest.mark.asyncio
    async def test_list_orders_by_date(self, db, order_repo):
        order_repo.count = AsyncMock(return_value=0)
        order_repo.find_slice = AsyncMock(return_value=[])
        svc = OrderApplicationService(repo=order_repo, product_repo=MagicMock())

        resp = await svc.list_orders(db, {"date": "2024-05-01"}, "/api/v1/orders")

        predicate = order_repo.count.call_args.args[1]
        assert predicate.created_from == datetime(2024, 5, 1, tzinfo=UTC)
        assert resp.meta.total_pages == 0
        assert resp.items == []
