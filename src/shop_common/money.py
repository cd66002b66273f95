"""Integer money helpers.

All prices, fees and totals are whole currency units (int). No float.
"""

from src.shop_common.enums import DeliveryZone


def amount_to_display(amount: int) -> str:
    """Format an amount for display: 1200 -> '৳1,200', -60 -> '-৳60'."""
    if amount < 0:
        return f"-৳{-amount:,}"
    return f"৳{amount:,}"


def calculate_discount_percentage(price: int, discount_price: int) -> int:
    """Whole-percent discount, rounded down: (1000, 850) -> 15.

    Returns 0 when there is no list price to discount from.
    """
    if price <= 0:
        return 0
    return ((price - discount_price) * 100) // price


def delivery_fee_for_district(district: str) -> int:
    """Storefront checkout fee: Dhaka ships inside the zone, everything else outside."""
    if district == "Dhaka":
        return DeliveryZone.INSIDE_ZONE.value
    return DeliveryZone.OUTSIDE_ZONE.value
