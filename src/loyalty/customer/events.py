"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from loyalty.domain import loyalty


@loyalty.event(part_of="Customer")
class CustomerRegistered:
    """A new customer was enrolled in the loyalty programme."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    tier: String(required=True)
    registered_at: DateTime(required=True)


@loyalty.event(part_of="Customer")
class CustomerDetailsUpdated:
    """A customer's name or email was changed."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    previous_email: String(required=True)


@loyalty.event(part_of="Customer")
class TierUpgraded:
    """A customer reached a higher loyalty tier by placing orders."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    previous_tier: String(required=True)
    new_tier: String(required=True)
    total_orders: Integer(required=True)
    upgraded_at: DateTime(required=True)


@loyalty.event(part_of="Customer")
class NextTierApproaching:
    """A customer is a few orders away from the next loyalty tier."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    tier: String(required=True)
    total_orders: Integer(required=True)
    orders_remaining: Integer(required=True)
