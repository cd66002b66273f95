"""Order draft — the in-memory order composition model.

A draft always holds at least one line item; row 0 is the anchor row and
can never be removed. Totals are never stored on the draft: callers derive
them with compute_totals() after every mutation.

State machine:

    EDITING ──begin_validation──▶ VALIDATING ──reject──▶ REJECTED
       ▲                              │                     │
       │                         begin_submit            (edit)
       │                              ▼                     │
       └──────(edit)──── FAILED ◀── SUBMITTING ──▶ SUBMITTED (terminal)

REJECTED and FAILED keep every entered value and accept edits (which move
the draft back to EDITING) or a new begin_validation(). While SUBMITTING
nothing may change, so at most one submission is in flight per draft.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from src.shop_common.enums import DEFAULT_DELIVERY_FEE, DELIVERY_FEES
from src.shop_common.errors import IllegalDraftTransitionError
from src.shop_product.domain.models import CatalogEntry

CatalogLookup = Callable[[str], CatalogEntry | None]


class DraftState(str, Enum):
    EDITING = "EDITING"
    VALIDATING = "VALIDATING"
    REJECTED = "REJECTED"
    SUBMITTING = "SUBMITTING"
    SUBMITTED = "SUBMITTED"
    FAILED = "FAILED"


_EDITABLE = frozenset({DraftState.EDITING, DraftState.REJECTED, DraftState.FAILED})


@dataclass
class OrderLineItem:
    catalog_entry_id: str = ""
    quantity: int = 1
    unit_price: int = 0
    size: str | None = None
    color: str | None = None

    @property
    def line_total(self) -> int:
        return self.quantity * self.unit_price


@dataclass
class OrderDraft:
    line_items: list[OrderLineItem] = field(default_factory=list)
    customer_name: str = ""
    address: str = ""
    mobile: str = ""
    delivery_fee: int = DEFAULT_DELIVERY_FEE
    state: DraftState = DraftState.EDITING
    last_message: str | None = None

    def __post_init__(self) -> None:
        if not self.line_items:
            self.line_items.append(OrderLineItem())
        if self.delivery_fee not in DELIVERY_FEES:
            raise ValueError(f"Unknown delivery fee {self.delivery_fee}")

    # --- Editing --------------------------------------------------------------

    def _require_editable(self, action: str) -> None:
        if self.state not in _EDITABLE:
            raise IllegalDraftTransitionError(self.state.value, action)

    def _edit(self, action: str) -> None:
        self._require_editable(action)
        self.state = DraftState.EDITING

    def add_line_item(self) -> OrderLineItem:
        self._edit("add a line item to")
        item = OrderLineItem()
        self.line_items.append(item)
        return item

    def remove_line_item(self, index: int) -> bool:
        """Remove the item at ``index``. The anchor row and a lone row stay (returns False)."""
        self._require_editable("remove a line item from")
        if index < 0 or index >= len(self.line_items):
            raise IndexError(f"No line item at index {index}")
        if index == 0 or len(self.line_items) == 1:
            return False
        self._edit("remove a line item from")
        del self.line_items[index]
        return True

    def select_catalog_entry(self, index: int, entry: CatalogEntry) -> None:
        """Bind a row to ``entry``; a size or color the entry does not offer is cleared."""
        self._require_editable("change a line item of")
        item = self.line_items[index]
        self._edit("change a line item of")
        item.catalog_entry_id = entry.id
        if item.size not in entry.available_sizes:
            item.size = None
        if item.color not in entry.available_colors:
            item.color = None

    def update_line_item(
        self,
        index: int,
        *,
        quantity: int | None = None,
        unit_price: int | None = None,
        size: str | None = None,
        color: str | None = None,
    ) -> None:
        self._require_editable("change a line item of")
        item = self.line_items[index]
        if quantity is not None and quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")
        if unit_price is not None and unit_price < 0:
            raise ValueError(f"Price cannot be negative, got {unit_price}")
        self._edit("change a line item of")
        if quantity is not None:
            item.quantity = quantity
        if unit_price is not None:
            item.unit_price = unit_price
        if size is not None:
            item.size = size or None
        if color is not None:
            item.color = color or None

    def set_delivery_fee(self, fee: int) -> None:
        self._require_editable("change the delivery fee of")
        if fee not in DELIVERY_FEES:
            raise ValueError(f"Unknown delivery fee {fee}")
        self._edit("change the delivery fee of")
        self.delivery_fee = fee

    def set_shipping(self, customer_name: str, address: str, mobile: str) -> None:
        self._edit("change the shipping details of")
        self.customer_name = customer_name
        self.address = address
        self.mobile = mobile

    # --- State transitions ----------------------------------------------------

    def _move(self, allowed: frozenset[DraftState], target: DraftState, action: str) -> None:
        if self.state not in allowed:
            raise IllegalDraftTransitionError(self.state.value, action)
        self.state = target

    def begin_validation(self) -> None:
        self._move(_EDITABLE, DraftState.VALIDATING, "validate")
        self.last_message = None

    def reject(self, message: str) -> None:
        self._move(frozenset({DraftState.VALIDATING}), DraftState.REJECTED, "reject")
        self.last_message = message

    def begin_submit(self) -> None:
        self._move(frozenset({DraftState.VALIDATING}), DraftState.SUBMITTING, "submit")

    def mark_submitted(self, message: str) -> None:
        self._move(frozenset({DraftState.SUBMITTING}), DraftState.SUBMITTED, "complete")
        self.last_message = message

    def mark_failed(self, message: str) -> None:
        self._move(frozenset({DraftState.SUBMITTING}), DraftState.FAILED, "fail")
        self.last_message = message

    @property
    def is_editable(self) -> bool:
        return self.state in _EDITABLE


# ---------------------------------------------------------------------------
# Derived values and validation (pure functions)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OrderTotals:
    item_count: int
    subtotal: int
    delivery_fee: int
    total: int


def compute_totals(draft: OrderDraft) -> OrderTotals:
    item_count = sum(item.quantity for item in draft.line_items)
    subtotal = sum(item.line_total for item in draft.line_items)
    return OrderTotals(
        item_count=item_count,
        subtotal=subtotal,
        delivery_fee=draft.delivery_fee,
        total=subtotal + draft.delivery_fee,
    )


class Issue(str, Enum):
    MISSING_SHIPPING = "MISSING_SHIPPING"
    MISSING_PRODUCT = "MISSING_PRODUCT"
    UNKNOWN_PRODUCT = "UNKNOWN_PRODUCT"
    MISSING_SIZE = "MISSING_SIZE"
    UNKNOWN_SIZE = "UNKNOWN_SIZE"
    MISSING_COLOR = "MISSING_COLOR"
    UNKNOWN_COLOR = "UNKNOWN_COLOR"
    PRICE_BELOW_FLOOR = "PRICE_BELOW_FLOOR"


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str | None = None
    issue: Issue | None = None
    line_index: int | None = None

    @classmethod
    def accepted(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def rejected(
        cls, issue: Issue, message: str, line_index: int | None = None
    ) -> "ValidationResult":
        return cls(ok=False, message=message, issue=issue, line_index=line_index)


def check_shipping(draft: OrderDraft) -> ValidationResult:
    for label, value in (
        ("Customer name", draft.customer_name),
        ("Address", draft.address),
        ("Mobile", draft.mobile),
    ):
        if not value or not value.strip():
            return ValidationResult.rejected(Issue.MISSING_SHIPPING, f"{label} is required")
    return ValidationResult.accepted()


def check_variants(draft: OrderDraft, lookup: CatalogLookup) -> ValidationResult:
    """Every row references a known entry and picks a size/color when the entry has them."""
    for index, item in enumerate(draft.line_items):
        if not item.catalog_entry_id:
            return ValidationResult.rejected(Issue.MISSING_PRODUCT, "Product is required", index)
        entry = lookup(item.catalog_entry_id)
        if entry is None:
            return ValidationResult.rejected(
                Issue.UNKNOWN_PRODUCT, f"Product not found: {item.catalog_entry_id}", index
            )
        if entry.has_sizes and not item.size:
            return ValidationResult.rejected(
                Issue.MISSING_SIZE, f"Size is required for product {entry.name}", index
            )
        if item.size and item.size not in entry.available_sizes:
            return ValidationResult.rejected(
                Issue.UNKNOWN_SIZE, f"Size {item.size} is not available for product {entry.name}", index
            )
        if entry.has_colors and not item.color:
            return ValidationResult.rejected(
                Issue.MISSING_COLOR, f"Color is required for product {entry.name}", index
            )
        if item.color and item.color not in entry.available_colors:
            return ValidationResult.rejected(
                Issue.UNKNOWN_COLOR,
                f"Color {item.color} is not available for product {entry.name}",
                index,
            )
    return ValidationResult.accepted()


def validate(draft: OrderDraft, lookup: CatalogLookup) -> ValidationResult:
    """Floor-price gate. The first row priced under its entry's floor rejects the draft."""
    for index, item in enumerate(draft.line_items):
        entry = lookup(item.catalog_entry_id)
        if entry is None or entry.floor_price is None:
            continue
        if item.unit_price < entry.floor_price:
            return ValidationResult.rejected(
                Issue.PRICE_BELOW_FLOOR,
                f"Price for product {entry.name} should not be less than {entry.floor_price}",
                index,
            )
    return ValidationResult.accepted()
