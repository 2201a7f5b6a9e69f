"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, String

from loyalty.domain import loyalty


@loyalty.event(part_of="Order")
class OrderPlaced:
    """An order was priced with the customer's tier discount and recorded."""

    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    amount: String(required=True)
    discount_amount: String(required=True)
    final_amount: String(required=True)
    tier: String(required=True)
    order_date: DateTime(required=True)
