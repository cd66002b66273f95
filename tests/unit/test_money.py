"""Tests for shop_common.money — integer money helpers."""

from src.shop_common.money import (
    amount_to_display,
    calculate_discount_percentage,
    delivery_fee_for_district,
)


class TestAmountToDisplay:
    def test_thousands_separator(self) -> None:
        assert amount_to_display(1200) == "৳1,200"

    def test_small_amount(self) -> None:
        assert amount_to_display(60) == "৳60"

    def test_zero(self) -> None:
        assert amount_to_display(0) == "৳0"

    def test_negative(self) -> None:
        assert amount_to_display(-60) == "-৳60"


class TestDiscountPercentage:
    def test_rounds_down(self) -> None:
        assert calculate_discount_percentage(1000, 850) == 15
        assert calculate_discount_percentage(1200, 1000) == 16

    def test_no_discount(self) -> None:
        assert calculate_discount_percentage(500, 500) == 0

    def test_zero_price(self) -> None:
        assert calculate_discount_percentage(0, 0) == 0


class TestDeliveryFeeForDistrict:
    def test_dhaka_inside_zone(self) -> None:
        assert delivery_fee_for_district("Dhaka") == 60

    def test_other_district_outside_zone(self) -> None:
        assert delivery_fee_for_district("Chattogram") == 120
