"""Which notification, if any, a tier transition calls for."""

from dataclasses import dataclass

from loyalty.tier.policy import GOLD_THRESHOLD, PLATINUM_THRESHOLD, CustomerTier, orders_until_next_tier

# Order counts one short of the next tier, keyed by the tier held at that count
PROGRESSION_THRESHOLDS = {
    CustomerTier.REGULAR: GOLD_THRESHOLD - 1,
    CustomerTier.GOLD: PLATINUM_THRESHOLD - 1,
}


@dataclass(frozen=True)
class UpgradeNotice:
    """The customer's tier changed with this order."""


@dataclass(frozen=True)
class ProgressionAlert:
    """The customer is ``orders_remaining`` orders away from the next tier."""

    orders_remaining: int = 1


def is_one_order_short(tier: CustomerTier, order_count: int) -> bool:
    return PROGRESSION_THRESHOLDS.get(tier) == order_count


def decide(transition) -> UpgradeNotice | ProgressionAlert | None:
    """An upgrade always wins over a progression alert on the same order."""
    if transition.upgraded:
        return UpgradeNotice()
    if is_one_order_short(transition.previous_tier, transition.new_order_count):
        return ProgressionAlert(orders_remaining=orders_until_next_tier(transition.new_order_count))
    return None
