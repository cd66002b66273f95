# src/shop_order/application/schemas.py
"""Request/response schemas for seller orders.

Request field names follow the dashboard form (camelCase aliases); Python
code uses the snake_case names.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.shop_common.enums import DEFAULT_DELIVERY_FEE, DELIVERY_FEES
from src.shop_listing.application.schemas import PageMeta
from src.shop_order.domain.draft import OrderDraft, OrderLineItem, OrderTotals
from src.shop_order.domain.models import OrderItem, SellerOrder


# Upper bounds keep every value inside its seller_orders / order_items column.
MAX_LINE_ITEMS = 100
MAX_QUANTITY = 10_000
MAX_UNIT_PRICE = 10_000_000


class OrderLineIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId", min_length=1, max_length=64)
    quantity: int = Field(ge=1, le=MAX_QUANTITY)
    price: int = Field(ge=0, le=MAX_UNIT_PRICE)
    size: str | None = Field(None, max_length=32)
    color: str | None = Field(None, max_length=64)

    @field_validator("size", "color")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    products: list[OrderLineIn] = Field(min_length=1, max_length=MAX_LINE_ITEMS)
    customer_name: str = Field(alias="customerName", max_length=255)
    address: str = Field(max_length=1000)
    mobile: str = Field(max_length=32)
    delivery_fee: int = Field(DEFAULT_DELIVERY_FEE, alias="deliveryFee")

    @field_validator("customer_name", "address", "mobile")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("delivery_fee")
    @classmethod
    def known_zone(cls, v: int) -> int:
        if v not in DELIVERY_FEES:
            raise ValueError(f"delivery fee must be one of {sorted(DELIVERY_FEES)}")
        return v

    def to_draft(self) -> OrderDraft:
        return OrderDraft(
            line_items=[
                OrderLineItem(
                    catalog_entry_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.price,
                    size=line.size,
                    color=line.color,
                )
                for line in self.products
            ],
            customer_name=self.customer_name,
            address=self.address,
            mobile=self.mobile,
            delivery_fee=self.delivery_fee,
        )

    @classmethod
    def from_draft(cls, draft: OrderDraft) -> "CreateOrderRequest":
        return cls(
            products=[
                OrderLineIn(
                    product_id=item.catalog_entry_id,
                    quantity=item.quantity,
                    price=item.unit_price,
                    size=item.size,
                    color=item.color,
                )
                for item in draft.line_items
            ],
            customer_name=draft.customer_name,
            address=draft.address,
            mobile=draft.mobile,
            delivery_fee=draft.delivery_fee,
        )


class CreateOrderResponse(BaseModel):
    success: str
    order_id: str
    invoice_id: str
    item_count: int
    subtotal: int
    delivery_fee: int
    total: int

    @classmethod
    def from_order(cls, order: SellerOrder, totals: OrderTotals) -> "CreateOrderResponse":
        return cls(
            success="Order created",
            order_id=order.id,
            invoice_id=order.invoice_id,
            item_count=totals.item_count,
            subtotal=totals.subtotal,
            delivery_fee=totals.delivery_fee,
            total=totals.total,
        )


class OrderItemOut(BaseModel):
    product_id: str | None
    product_name: str
    quantity: int
    unit_price: int
    size: str | None
    color: str | None
    line_total: int

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemOut":
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            size=item.size,
            color=item.color,
            line_total=item.line_total,
        )


class OrderListItem(BaseModel):
    id: str
    invoice_id: str
    customer_name: str
    mobile: str
    item_count: int
    total: int
    status: str
    created_at: str | None

    @classmethod
    def from_domain(cls, o: SellerOrder) -> "OrderListItem":
        return cls(
            id=o.id,
            invoice_id=o.invoice_id,
            customer_name=o.customer_name,
            mobile=o.mobile,
            item_count=o.item_count,
            total=o.total,
            status=o.status,
            created_at=o.created_at.isoformat() if o.created_at else None,
        )


class OrderDetail(OrderListItem):
    address: str
    delivery_fee: int
    subtotal: int
    items: list[OrderItemOut]

    @classmethod
    def from_domain(cls, o: SellerOrder) -> "OrderDetail":
        base = OrderListItem.from_domain(o).model_dump()
        return cls(
            **base,
            address=o.address,
            delivery_fee=o.delivery_fee,
            subtotal=o.subtotal,
            items=[OrderItemOut.from_domain(i) for i in o.items],
        )


class OrderListResponse(BaseModel):
    items: list[OrderListItem]
    meta: PageMeta
