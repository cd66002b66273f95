"""HTTP client for the order mutation endpoint (POST /orders)."""
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from config.settings import settings
from src.shop_common.errors import SubmissionFailedError
from src.shop_order.application.schemas import CreateOrderRequest
from src.shop_order.domain.draft import OrderDraft

logger = logging.getLogger(__name__)


class OrderApiClient:
    """Implements OrderSubmitter against the dashboard API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.ORDER_API_BASE_URL).rstrip("/")
        self._http_client = httpx.AsyncClient(
            timeout=timeout or settings.ORDER_API_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def close(self) -> None:
        await self._http_client.aclose()

    async def submit_order(self, draft: OrderDraft) -> str:
        try:
            payload = CreateOrderRequest.from_draft(draft).model_dump(by_alias=True)
        except ValidationError as exc:
            message = f"Invalid order: {exc.error_count()} invalid field(s)"
            raise SubmissionFailedError(message) from exc
        try:
            response = await self._http_client.post(f"{self.base_url}/orders", json=payload)
        except httpx.HTTPError as exc:
            logger.error("Order request failed: %s", exc)
            raise SubmissionFailedError(str(exc) or "Network error") from exc

        body = self._json(response)
        if response.status_code >= 400:
            message = body.get("message") or body.get("detail") or response.text
            if not isinstance(message, str):
                message = "Invalid order"
            logger.error("Order rejected: %d - %s", response.status_code, message)
            raise SubmissionFailedError(message)

        data = body.get("data") or {}
        return str(data.get("success", "Order created"))

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
