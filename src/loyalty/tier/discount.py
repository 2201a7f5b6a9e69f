"""Discount calculator — prices an order amount for a loyalty tier."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import NamedTuple

from protean.exceptions import ValidationError

from loyalty.tier.policy import discount_rate

CENTS = Decimal("0.01")


class Pricing(NamedTuple):
    discount: Decimal
    final: Decimal


def compute_discount(amount: Decimal, tier) -> Pricing:
    """Apply the tier's discount rate to a positive amount.

    The discount is rounded half-up to cents; the final amount is whatever
    remains, so ``discount + final == amount`` always holds.
    """
    discount = (amount * discount_rate(tier)).quantize(CENTS, rounding=ROUND_HALF_UP)
    return Pricing(discount=discount, final=amount - discount)


def parse_amount(value, field: str = "amount") -> Decimal:
    """Parse a money value into a Decimal.

    Floats are converted through their shortest repr, so 19.99 becomes
    Decimal("19.99") rather than its binary expansion. Raises
    ValidationError for missing, non-numeric or non-finite values.
    Positivity is checked by the caller.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError({field: ["is required"]})
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError({field: [f"'{value}' is not a valid amount"]}) from None
    if not amount.is_finite():
        raise ValidationError({field: [f"'{value}' is not a valid amount"]})

    # Whole-cent amounts are written with two places: "100" -> "100.00"
    try:
        cents = amount.quantize(CENTS)
    except InvalidOperation:
        raise ValidationError({field: [f"'{value}' is out of range"]}) from None
    return cents if cents == amount else amount
