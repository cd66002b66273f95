"""Tests for shop_common.errors and shop_common.response."""

from unittest.mock import MagicMock

from src.shop_common.errors import (
    AppError,
    IllegalDraftTransitionError,
    MissingReferenceError,
    PriceBelowFloorError,
    ProductNotFoundError,
    QueryFailedError,
    SubmissionFailedError,
    WithdrawNotFoundError,
    WithdrawNotPendingError,
)
from src.shop_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="Bad reference", http_status=400)
        assert err.http_status == 400

    def test_is_exception(self) -> None:
        err = AppError(code=1001, message="test")
        assert isinstance(err, Exception)


class TestSpecificErrors:
    def test_missing_reference(self) -> None:
        err = MissingReferenceError("Product ID is missing")
        assert err.code == 1001
        assert err.http_status == 400
        assert err.message == "Product ID is missing"

    def test_product_not_found(self) -> None:
        err = ProductNotFoundError("PRD-1")
        assert err.code == 2001
        assert err.http_status == 404
        assert "PRD-1" in err.message

    def test_price_below_floor(self) -> None:
        err = PriceBelowFloorError("Price for product Shirt should not be less than 500")
        assert err.code == 4001
        assert err.http_status == 422

    def test_illegal_transition_names_state(self) -> None:
        err = IllegalDraftTransitionError("SUBMITTING", "validate")
        assert err.code == 4003
        assert err.http_status == 409
        assert "SUBMITTING" in err.message
        assert "validate" in err.message

    def test_submission_failed(self) -> None:
        err = SubmissionFailedError("boom")
        assert err.code == 4005
        assert err.http_status == 502

    def test_withdraw_errors(self) -> None:
        assert WithdrawNotFoundError("W1").http_status == 404
        err = WithdrawNotPendingError("W1", "APPROVED")
        assert err.code == 5002
        assert "APPROVED" in err.message

    def test_query_failed(self) -> None:
        err = QueryFailedError()
        assert err.code == 9003
        assert err.http_status == 503


class TestApiResponse:
    def test_success_response(self) -> None:
        resp = success_response({"key": "value"})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"key": "value"}
        assert resp.request_id.startswith("req_")

    def test_success_response_uses_request_id(self) -> None:
        request = MagicMock()
        request.state.request_id = "req_abc123"
        resp = success_response(None, request)
        assert resp.request_id == "req_abc123"

    def test_error_response(self) -> None:
        resp = error_response(2001, "Product not found")
        assert resp.code == 2001
        assert resp.message == "Product not found"
        assert resp.data is None

    def test_serializable(self) -> None:
        resp = ApiResponse(code=0, message="ok", data=[1, 2])
        dumped = resp.model_dump()
        assert dumped["data"] == [1, 2]
        assert "timestamp" in dumped
