"""Pydantic schemas for shop_product API responses."""

from pydantic import BaseModel

from src.shop_common.money import amount_to_display, calculate_discount_percentage
from src.shop_listing.application.schemas import PageMeta
from src.shop_product.domain.models import CatalogEntry, Product


class ProductListItem(BaseModel):
    id: str
    name: str
    price: int
    discount_price: int | None
    seller_price: int | None
    total_stock: int
    status: str
    feature_image_url: str | None
    created_at: str | None

    @classmethod
    def from_domain(cls, p: Product) -> "ProductListItem":
        return cls(
            id=p.id,
            name=p.name,
            price=p.price,
            discount_price=p.discount_price,
            seller_price=p.seller_price,
            total_stock=p.total_stock,
            status=p.status,
            feature_image_url=p.feature_image_url,
            created_at=p.created_at.isoformat() if p.created_at else None,
        )


class ProductListResponse(BaseModel):
    items: list[ProductListItem]
    meta: PageMeta
    selected_id: str | None  # productId: delete confirmation is open for this row


class DeleteProductResponse(BaseModel):
    success: str
    product_id: str


class CatalogEntryOut(BaseModel):
    id: str
    name: str
    price: int
    seller_price: int | None
    sizes: list[str]
    colors: list[str]
    feature_image_url: str | None

    @classmethod
    def from_entry(cls, e: CatalogEntry) -> "CatalogEntryOut":
        return cls(
            id=e.id,
            name=e.name,
            price=e.base_price,
            seller_price=e.floor_price,
            sizes=sorted(e.available_sizes),
            colors=sorted(e.available_colors),
            feature_image_url=e.feature_image_url,
        )


# ---------------------------------------------------------------------------
# Storefront card (customer-facing)
# ---------------------------------------------------------------------------


class ProductCard(BaseModel):
    id: str
    name: str
    price: int
    price_display: str
    discount_price: int | None
    discount_percentage: int
    feature_image_url: str | None

    @classmethod
    def from_domain(cls, p: Product) -> "ProductCard":
        discount = (
            calculate_discount_percentage(p.price, p.discount_price)
            if p.discount_price is not None
            else 0
        )
        return cls(
            id=p.id,
            name=p.name,
            price=p.price,
            price_display=amount_to_display(p.discount_price if p.discount_price is not None else p.price),
            discount_price=p.discount_price,
            discount_percentage=discount,
            feature_image_url=p.feature_image_url,
        )
