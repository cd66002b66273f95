"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Listing / request references
  2xxx: Product
  4xxx: Order
  5xxx: Withdraw
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Listing / references ---

class MissingReferenceError(AppError):
    """An action needs an id that the query string does not carry."""

    def __init__(self, message: str) -> None:
        super().__init__(1001, message, 400)


# --- 2xxx: Product ---

class ProductNotFoundError(AppError):
    def __init__(self, product_id: str) -> None:
        super().__init__(2001, f"Product not found: {product_id}", 404)


# --- 4xxx: Order ---

class PriceBelowFloorError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(4001, message, 422)


class VariantRequiredError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(4002, message, 422)


class IllegalDraftTransitionError(AppError):
    def __init__(self, current: str, attempted: str) -> None:
        super().__init__(4003, f"Cannot {attempted} an order draft in state {current}", 409)


class OrderNotFoundError(AppError):
    def __init__(self, order_id: str) -> None:
        super().__init__(4004, f"Order not found: {order_id}", 404)


class SubmissionFailedError(AppError):
    """The order mutation endpoint rejected the draft or could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(4005, message, 502)


# --- 5xxx: Withdraw ---

class WithdrawNotFoundError(AppError):
    def __init__(self, withdraw_id: str) -> None:
        super().__init__(5001, f"Withdraw not found: {withdraw_id}", 404)


class WithdrawNotPendingError(AppError):
    def __init__(self, withdraw_id: str, status: str) -> None:
        super().__init__(
            5002, f"Withdraw {withdraw_id} in status {status} cannot be approved", 422
        )


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class QueryFailedError(AppError):
    def __init__(self, detail: str = "Query failed") -> None:
        super().__init__(9003, detail, 503)
