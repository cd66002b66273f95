"""Global enums — must match DB CHECK constraints exactly."""

from enum import Enum


class ProductStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class CouponStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    SHIPPING = "SHIPPING"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"


class WithdrawStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class DeliveryZone(int, Enum):
    """Fixed delivery charge per shipping zone. Closed set."""

    INSIDE_ZONE = 60
    DHAKA_SUB_AREA = 100
    OUTSIDE_ZONE = 120

    @property
    def label(self) -> str:
        return _ZONE_LABELS[self]


_ZONE_LABELS = {
    DeliveryZone.INSIDE_ZONE: "Inside Zone",
    DeliveryZone.DHAKA_SUB_AREA: "Dhaka Sub Area",
    DeliveryZone.OUTSIDE_ZONE: "Outside Zone",
}

DELIVERY_FEES: frozenset[int] = frozenset(zone.value for zone in DeliveryZone)
DEFAULT_DELIVERY_FEE = DeliveryZone.OUTSIDE_ZONE.value


class NotificationKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
