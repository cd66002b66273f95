"""Domain models for shop_product — pure dataclasses, no business logic."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Product:
    id: str
    name: str
    price: int
    discount_price: int | None
    seller_price: int | None  # seller's floor price
    total_stock: int
    status: str
    feature_image_url: str | None
    colors: list[str] = field(default_factory=list)
    sizes: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CatalogEntry:
    """Read-only reference data a line item is priced against."""

    id: str
    name: str
    base_price: int
    floor_price: int | None = None
    available_sizes: frozenset[str] = frozenset()
    available_colors: frozenset[str] = frozenset()
    feature_image_url: str | None = None

    @property
    def has_sizes(self) -> bool:
        return bool(self.available_sizes)

    @property
    def has_colors(self) -> bool:
        return bool(self.available_colors)

    @classmethod
    def from_product(cls, product: Product) -> "CatalogEntry":
        return cls(
            id=product.id,
            name=product.name,
            base_price=product.price,
            floor_price=product.seller_price,
            available_sizes=frozenset(s for s in product.sizes if s and s.strip()),
            available_colors=frozenset(c for c in product.colors if c and c.strip()),
            feature_image_url=product.feature_image_url,
        )
