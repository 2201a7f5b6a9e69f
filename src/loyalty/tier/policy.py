"""Loyalty tier policy — order-count thresholds and discount rates per tier.

    REGULAR  (0 - 9 orders)    0% discount
    GOLD     (10 - 19 orders) 10% discount
    PLATINUM (20+ orders)     20% discount

Thresholds and rates are fixed.
"""

from decimal import Decimal
from enum import Enum


class CustomerTier(Enum):
    """Enumeration of customer loyalty tiers, lowest first."""

    REGULAR = "REGULAR"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"


# Tier ordering for comparisons
_TIER_ORDER = [CustomerTier.REGULAR, CustomerTier.GOLD, CustomerTier.PLATINUM]

_DISCOUNT_RATES = {
    CustomerTier.REGULAR: Decimal("0.00"),
    CustomerTier.GOLD: Decimal("0.10"),
    CustomerTier.PLATINUM: Decimal("0.20"),
}

# Minimum order count at which each tier is reached
_THRESHOLDS = {
    CustomerTier.REGULAR: 0,
    CustomerTier.GOLD: 10,
    CustomerTier.PLATINUM: 20,
}

GOLD_THRESHOLD = _THRESHOLDS[CustomerTier.GOLD]
PLATINUM_THRESHOLD = _THRESHOLDS[CustomerTier.PLATINUM]


def as_tier(tier) -> CustomerTier:
    """Accept a CustomerTier or its stored string value."""
    if isinstance(tier, CustomerTier):
        return tier
    return CustomerTier(tier)


def tier_rank(tier) -> int:
    return _TIER_ORDER.index(as_tier(tier))


def higher_tier(first, second) -> CustomerTier:
    first, second = as_tier(first), as_tier(second)
    return first if tier_rank(first) >= tier_rank(second) else second


def discount_rate(tier) -> Decimal:
    return _DISCOUNT_RATES[as_tier(tier)]


def discount_percentage(tier) -> int:
    """Discount as a whole percentage, e.g. 10 for GOLD."""
    return int(discount_rate(tier) * 100)


def tier_for_order_count(order_count: int) -> CustomerTier:
    if order_count >= PLATINUM_THRESHOLD:
        return CustomerTier.PLATINUM
    if order_count >= GOLD_THRESHOLD:
        return CustomerTier.GOLD
    return CustomerTier.REGULAR


def next_tier(tier) -> CustomerTier:
    """The tier above ``tier``; PLATINUM is its own successor."""
    index = tier_rank(tier)
    return _TIER_ORDER[min(index + 1, len(_TIER_ORDER) - 1)]


def orders_until_next_tier(order_count: int) -> int:
    """Orders still needed before the count-derived tier advances (0 at the ceiling)."""
    current = tier_for_order_count(order_count)
    if current == CustomerTier.PLATINUM:
        return 0
    return _THRESHOLDS[next_tier(current)] - order_count
