from decimal import Decimal

import pytest

from hamshark.domain.errors import ValidationError
from hamshark.services import pricing
from hamshark.services.pricing import PricingPolicy


def gift_names(summary):
    return [g.name for g in summary.gifts]


def test_scenario_300_pays_delivery(cart, make_item):
    cart.add_item(make_item("a", price="150"), 2)
    summary = pricing.summarize_lines(cart.items)

    assert summary.subtotal == Decimal("300")
    assert summary.tax == Decimal("15.00")
    assert summary.delivery_fee == Decimal("25")
    assert summary.total == Decimal("340.00")
    assert summary.loyalty_points_earned == 34
    assert gift_names(summary) == ["Free Healthy Drink"]


def test_scenario_400_unlocks_legacy_gift(cart, make_item):
    cart.add_item(make_item("a", price="200"), 2)
    summary = pricing.summarize_lines(cart.items)

    assert summary.tax == Decimal("20.00")
    assert summary.delivery_fee == Decimal("0")
    assert summary.total == Decimal("420.00")
    assert summary.loyalty_points_earned == 42

    legacy = [g for g in summary.gifts if g.scheme == "legacy"]
    assert [(g.name, g.value) for g in legacy] == [("Free Lemon Detox", Decimal("30"))]


@pytest.mark.parametrize(
    "subtotal, tax",
    [("0", "0.00"), ("10.10", "0.51"), ("10.30", "0.52"), ("99.99", "5.00"), ("1234.56", "61.73")],
)
def test_tax_is_five_percent_rounded_half_up(subtotal, tax):
    assert pricing.compute_tax(Decimal(subtotal)) == Decimal(tax)


@pytest.mark.parametrize(
    "subtotal, fee",
    [("299.99", "25"), ("300", "25"), ("300.00", "25"), ("300.01", "0"), ("1000", "0")],
)
def test_delivery_fee_threshold_is_strict(subtotal, fee):
    assert pricing.compute_delivery_fee(Decimal(subtotal)) == Decimal(fee)


@pytest.mark.parametrize("total, points", [("0", 0), ("9.99", 0), ("10", 1), ("340.00", 34), ("1049.99", 104)])
def test_points_are_floored(total, points):
    assert pricing.loyalty_points(Decimal(total)) == points


def test_gifts_never_change_total():
    summary = pricing.summarize(Decimal("1000"))
    assert gift_names(summary) == [
        "Free Healthy Drink",
        "Free Dessert",
        "Free Meal Coupon",
        "Free Lemon Detox",
    ]
    assert summary.total == Decimal("1000") + summary.tax + summary.delivery_fee


def test_gift_scheme_selection():
    assert gift_names(pricing.summarize(Decimal("450"), PricingPolicy(gift_scheme="tiered"))) == [
        "Free Healthy Drink"
    ]
    assert gift_names(pricing.summarize(Decimal("450"), PricingPolicy(gift_scheme="legacy"))) == [
        "Free Lemon Detox"
    ]
    assert pricing.summarize(Decimal("150"), PricingPolicy(gift_scheme="legacy")).gifts == []
    with pytest.raises(ValueError):
        pricing.summarize(Decimal("150"), PricingPolicy(gift_scheme="weekly"))


def test_custom_policy():
    policy = PricingPolicy(tax_rate=Decimal("0.18"), free_delivery_threshold=Decimal("500"), delivery_fee=Decimal("40"))
    summary = pricing.summarize(Decimal("400"), policy)
    assert summary.tax == Decimal("72.00")
    assert summary.delivery_fee == Decimal("40")
    assert summary.total == Decimal("512.00")


def test_finalize_builds_request(cart, menu_by_id):
    cart.add_item(menu_by_id["ni1"], 2, {"spice": "extra"})
    cart.add_item(menu_by_id["bd2"], 1)

    request = pricing.finalize(cart.items, truck_location="University Campus", user_id="u1")

    assert [(i.menu_item_id, i.quantity, i.price) for i in request.items] == [
        ("ni1", 2, Decimal("180.00")),
        ("bd2", 1, Decimal("30.00")),
    ]
    assert request.items[0].customizations == {"spice": "extra"}
    assert request.subtotal == Decimal("390.00")
    assert request.tax == Decimal("19.50")
    assert request.total == Decimal("409.50")
    assert request.status == "confirmed"
    assert request.truck_location == "University Campus"
    assert request.user_id == "u1"
    assert request.surprise_gifts == ["Free Healthy Drink", "Free Lemon Detox"]


def test_finalize_is_idempotent(cart, make_item):
    cart.add_item(make_item("a", price="123.45"), 3)
    first = pricing.finalize(cart.items)
    second = pricing.finalize(cart.items)

    assert (first.subtotal, first.tax, first.total) == (second.subtotal, second.tax, second.total)
    assert pricing.summarize_lines(cart.items).loyalty_points_earned == pricing.loyalty_points(first.total)
    assert cart.item_count() == 3


def test_finalize_rejects_empty_cart():
    with pytest.raises(ValidationError):
        pricing.finalize([])
