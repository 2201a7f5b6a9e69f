"""Customer aggregate root — identity, contact details and loyalty standing."""

from dataclasses import dataclass
from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from loyalty.domain import loyalty
from loyalty.shared.email import EmailAddress
from loyalty.tier.policy import (
    CustomerTier,
    as_tier,
    higher_tier,
    tier_for_order_count,
    tier_rank,
)

_TIER_VALUES = {tier.value for tier in CustomerTier}


class DuplicateEmailError(ValidationError):
    """The email address already belongs to another customer."""

    def __init__(self, email):
        super().__init__({"email": [f"Email {email!r} is already registered"]})
        self.email = email


@dataclass(frozen=True)
class TierTransition:
    """Outcome of recording one completed order against a customer."""

    previous_tier: CustomerTier
    new_tier: CustomerTier
    new_order_count: int

    @property
    def upgraded(self) -> bool:
        return self.previous_tier != self.new_tier


def _require_text(field, value):
    if value is None or not str(value).strip():
        raise ValidationError({field: ["is required"]})
    return value


def _validated_email(email):
    _require_text("email", email)
    return EmailAddress(address=email).address


def _validated_tier(tier):
    if not tier:
        return CustomerTier.REGULAR.value
    value = tier.value if isinstance(tier, CustomerTier) else tier
    if value not in _TIER_VALUES:
        raise ValidationError({"tier": [f"Unknown tier {tier!r}"]})
    return value


@loyalty.aggregate
class Customer:
    """A member of the loyalty programme.

    ``tier`` is a cached projection of ``total_orders``: it is recomputed every
    time an order is recorded and never falls below the tier the order count
    earns. It can sit above that tier only when it was seeded at registration.
    """

    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254, unique=True)
    tier: String(choices=CustomerTier, default=CustomerTier.REGULAR.value)
    total_orders: Integer(default=0, min_value=0)
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def tier_is_at_least_earned_tier(self):
        if self.tier not in _TIER_VALUES:
            return
        earned = tier_for_order_count(self.total_orders or 0)
        if tier_rank(self.tier) < tier_rank(earned):
            raise ValidationError(
                {"tier": [f"Tier {self.tier} is below {earned.value} earned by {self.total_orders} orders"]}
            )

    @classmethod
    def register(cls, name, email, tier=None):
        from loyalty.customer.events import CustomerRegistered

        _require_text("name", name)
        email = _validated_email(email)
        tier = _validated_tier(tier)
        now = datetime.now()

        customer = cls(
            name=name,
            email=email,
            tier=tier,
            total_orders=0,
            registered_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=name,
                email=email,
                tier=tier,
                registered_at=now,
            )
        )
        return customer

    def update_details(self, name, email):
        """Replace name and email. Tier and order count are left untouched."""
        from loyalty.customer.events import CustomerDetailsUpdated

        _require_text("name", name)
        email = _validated_email(email)

        previous_email = self.email
        with atomic_change(self):
            self.name = name
            self.email = email

        self.raise_(
            CustomerDetailsUpdated(
                customer_id=self.id,
                name=name,
                email=email,
                previous_email=previous_email,
            )
        )

    def record_order_completed(self) -> TierTransition:
        """Count one more completed order and recompute the tier.

        Raises TierUpgraded when the tier changes, or NextTierApproaching when
        the customer is left one order short of the next tier.
        """
        from loyalty.customer.events import NextTierApproaching, TierUpgraded
        from loyalty.notification.decision import ProgressionAlert, UpgradeNotice, decide

        previous_tier = as_tier(self.tier)
        new_count = (self.total_orders or 0) + 1
        new_tier = higher_tier(previous_tier, tier_for_order_count(new_count))

        with atomic_change(self):
            self.total_orders = new_count
            self.tier = new_tier.value

        transition = TierTransition(
            previous_tier=previous_tier,
            new_tier=new_tier,
            new_order_count=new_count,
        )

        notice = decide(transition)
        if isinstance(notice, UpgradeNotice):
            self.raise_(
                TierUpgraded(
                    customer_id=self.id,
                    name=self.name,
                    email=self.email,
                    previous_tier=previous_tier.value,
                    new_tier=new_tier.value,
                    total_orders=new_count,
                    upgraded_at=datetime.now(),
                )
            )
        elif isinstance(notice, ProgressionAlert):
            self.raise_(
                NextTierApproaching(
                    customer_id=self.id,
                    name=self.name,
                    email=self.email,
                    tier=new_tier.value,
                    total_orders=new_count,
                    orders_remaining=notice.orders_remaining,
                )
            )

        return transition
