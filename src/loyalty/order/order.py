"""Order aggregate — a single purchase priced at the customer's tier.

Money is stored as canonical decimal strings ("90.00") so that amounts never
pass through binary floating point; read them back with ``Decimal(...)``.
"""

from datetime import datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from loyalty.domain import loyalty
from loyalty.order.events import OrderPlaced
from loyalty.tier.discount import Pricing
from loyalty.tier.policy import as_tier


@loyalty.aggregate
class Order:
    """An order owned by exactly one customer.

    Discount and final amount are fixed when the order is placed and are
    never recalculated, even if the customer's tier changes later.
    """

    customer_id: Identifier(required=True)
    amount: String(required=True, max_length=32)
    discount_amount: String(required=True, max_length=32)
    final_amount: String(required=True, max_length=32)
    order_date: DateTime(default=datetime.now)

    @invariant.post
    def amount_must_be_positive(self):
        if self.amount is None:
            return
        if Decimal(self.amount) <= 0:
            raise ValidationError({"amount": ["must be positive"]})

    @invariant.post
    def discount_stays_within_amount(self):
        if self.amount is None or self.discount_amount is None:
            return
        discount = Decimal(self.discount_amount)
        if discount < 0 or discount > Decimal(self.amount):
            raise ValidationError({"discount_amount": ["must be between zero and the order amount"]})

    @invariant.post
    def final_amount_is_amount_less_discount(self):
        if None in (self.amount, self.discount_amount, self.final_amount):
            return
        if Decimal(self.final_amount) != Decimal(self.amount) - Decimal(self.discount_amount):
            raise ValidationError({"final_amount": ["must equal amount minus discount"]})

    @classmethod
    def place(cls, customer_id, amount: Decimal, pricing: Pricing, tier, order_date=None):
        order_date = order_date or datetime.now()
        order = cls(
            customer_id=customer_id,
            amount=str(amount),
            discount_amount=str(pricing.discount),
            final_amount=str(pricing.final),
            order_date=order_date,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                amount=order.amount,
                discount_amount=order.discount_amount,
                final_amount=order.final_amount,
                tier=as_tier(tier).value,
                order_date=order_date,
            )
        )
        return order
