# hamshark/services/pricing.py
"""
Checkout pricing.

    tax          = round_half_up(subtotal * tax_rate, 2)
    delivery fee = 0 when subtotal > free_delivery_threshold, else delivery_fee
    total        = subtotal + tax + delivery fee
    points       = floor(total / points_divisor)

Surprise gifts come from two threshold tables that both exist in the
storefront: TIERED (200 / 500 / 1000, cumulative) and LEGACY (a single free
item at 400). GIFT_SCHEME picks "tiered", "legacy" or "both". Gifts are
add-ons and never change the total.
"""
from dataclasses import dataclass, field
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence, Tuple

from hamshark.domain.errors import ValidationError
from hamshark.domain.models import CartLineItem, CheckoutSummary, OrderItem, OrderRequest, SurpriseGift
from hamshark.utils import settings

CENT = Decimal("0.01")

# (threshold, gift name, value)
GiftTable = Sequence[Tuple[Decimal, str, Optional[Decimal]]]

TIERED_GIFTS: GiftTable = (
    (Decimal("200"), "Free Healthy Drink", None),
    (Decimal("500"), "Free Dessert", None),
    (Decimal("1000"), "Free Meal Coupon", None),
)

LEGACY_GIFTS: GiftTable = (
    (Decimal("400"), "Free Lemon Detox", Decimal("30")),
)

GIFT_SCHEMES = {
    "tiered": {"tiered": TIERED_GIFTS},
    "legacy": {"legacy": LEGACY_GIFTS},
    "both": {"tiered": TIERED_GIFTS, "legacy": LEGACY_GIFTS},
}


@dataclass(frozen=True)
class PricingPolicy:
    tax_rate: Decimal = settings.TAX_RATE
    free_delivery_threshold: Decimal = settings.FREE_DELIVERY_THRESHOLD
    delivery_fee: Decimal = settings.DELIVERY_FEE
    points_divisor: Decimal = settings.LOYALTY_POINT_DIVISOR
    gift_scheme: str = settings.GIFT_SCHEME
    gift_tables: dict = field(default_factory=dict)

    def tables(self) -> dict:
        if self.gift_tables:
            return self.gift_tables
        try:
            return GIFT_SCHEMES[self.gift_scheme]
        except KeyError:
            raise ValueError(f"Unknown gift scheme: {self.gift_scheme}") from None


DEFAULT_POLICY = PricingPolicy()


def round_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_tax(subtotal: Decimal, policy: PricingPolicy = DEFAULT_POLICY) -> Decimal:
    return round_money(subtotal * policy.tax_rate)


def compute_delivery_fee(subtotal: Decimal, policy: PricingPolicy = DEFAULT_POLICY) -> Decimal:
    # strict: exactly at the threshold still pays the fee
    if subtotal > policy.free_delivery_threshold:
        return Decimal("0")
    return policy.delivery_fee


def loyalty_points(total: Decimal, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    return int((Decimal(total) / policy.points_divisor).to_integral_value(rounding=ROUND_FLOOR))


def surprise_gifts(total: Decimal, policy: PricingPolicy = DEFAULT_POLICY) -> List[SurpriseGift]:
    gifts = []
    for scheme, table in policy.tables().items():
        for threshold, name, value in table:
            if total >= threshold:
                gifts.append(SurpriseGift(name=name, threshold=threshold, value=value, scheme=scheme))
    return gifts


def summarize(subtotal: Decimal, policy: PricingPolicy = DEFAULT_POLICY) -> CheckoutSummary:
    subtotal = Decimal(subtotal)
    tax = compute_tax(subtotal, policy)
    fee = compute_delivery_fee(subtotal, policy)
    total = round_money(subtotal + tax + fee)
    return CheckoutSummary(
        subtotal=subtotal,
        tax=tax,
        delivery_fee=fee,
        total=total,
        loyalty_points_earned=loyalty_points(total, policy),
        gifts=surprise_gifts(total, policy),
    )


def summarize_lines(lines: Iterable[CartLineItem], policy: PricingPolicy = DEFAULT_POLICY) -> CheckoutSummary:
    return summarize(sum((i.price * i.quantity for i in lines), Decimal("0.00")), policy)


def finalize(
    lines: Sequence[CartLineItem],
    truck_location: str | None = settings.DEFAULT_TRUCK_LOCATION,
    user_id: str | None = None,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> OrderRequest:
    """
    Reduce a cart to the order request sent to the ledger.

    Pure: the same lines always give the same request; the cart is not touched.
    """
    if not lines:
        raise ValidationError("Cannot check out an empty cart")

    summary = summarize_lines(lines, policy)
    return OrderRequest(
        items=[
            OrderItem(
                menu_item_id=i.menu_item.id,
                quantity=i.quantity,
                customizations=dict(i.customizations),
                price=i.price,
            )
            for i in lines
        ],
        subtotal=summary.subtotal,
        tax=summary.tax,
        total=summary.total,
        status="confirmed",
        truck_location=truck_location,
        user_id=user_id,
        surprise_gifts=[g.name for g in summary.gifts],
    )
