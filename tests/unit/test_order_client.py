"""Unit tests for OrderApiClient using httpx.MockTransport."""
import json

import httpx
import pytest

from src.shop_common.errors import SubmissionFailedError
from src.shop_order.domain.draft import OrderDraft
from src.shop_order.infrastructure.client import OrderApiClient


def _draft() -> OrderDraft:
    draft = OrderDraft(delivery_fee=60)
    draft.line_items[0].catalog_entry_id = "PRD-SHIRT"
    draft.update_line_item(0, quantity=2, unit_price=600, size="M")
    draft.set_shipping("Rahim", "House 1", "01700000000")
    return draft


def _client(handler) -> OrderApiClient:
    return OrderApiClient(base_url="http://orders.test/api/v1/", transport=httpx.MockTransport(handler))


class TestSubmitOrder:
    @pytest.mark.asyncio
    async def test_posts_camel_case_payload(self):
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"code": 0, "data": {"success": "Order created"}})

        client = _client(handler)
        message = await client.submit_order(_draft())
        await client.close()

        assert message == "Order created"
        assert seen["url"] == "http://orders.test/api/v1/orders"
        body = seen["body"]
        assert body["customerName"] == "Rahim"
        assert body["deliveryFee"] == 60
        assert body["products"] == [
            {"productId": "PRD-SHIRT", "quantity": 2, "price": 600, "size": "M", "color": None}
        ]

    @pytest.mark.asyncio
    async def test_error_envelope_message_surfaces(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={"code": 4001, "message": "Price for product Shirt should not be less than 500"},
            )

        client = _client(handler)
        with pytest.raises(SubmissionFailedError, match="should not be less than 500"):
            await client.submit_order(_draft())
        await client.close()

    @pytest.mark.asyncio
    async def test_validation_detail_list_is_generic(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"detail": [{"loc": ["body"], "msg": "bad"}]})

        client = _client(handler)
        with pytest.raises(SubmissionFailedError, match="Invalid order"):
            await client.submit_order(_draft())
        await client.close()

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)
        with pytest.raises(SubmissionFailedError, match="connection refused"):
            await client.submit_order(_draft())
        await client.close()

    @pytest.mark.asyncio
    async def test_out_of_bounds_draft_not_sent(self):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(201, json={"code": 0, "data": {"success": "Order created"}})

        draft = _draft()
        draft.set_shipping("Rahim", "House 1", "0" * 40)
        client = _client(handler)
        with pytest.raises(SubmissionFailedError, match="Invalid order"):
            await client.submit_order(draft)
        await client.close()

        assert calls == []
