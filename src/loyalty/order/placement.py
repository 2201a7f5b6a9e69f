"""Order placement — command, handler and the serialized entry point.

The handler validates the amount, resolves the customer, prices the order at
the customer's current tier, stores it and then records the order against the
customer, all in one unit of work. Tier notifications follow from the events
the customer raises (see ``loyalty.notification.notifier``).
"""

from dataclasses import dataclass

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from loyalty.customer.customer import Customer, TierTransition
from loyalty.domain import loyalty, logger
from loyalty.order.order import Order
from loyalty.tier.discount import compute_discount, parse_amount
from loyalty.utils.locks import serialized


@loyalty.command(part_of="Order")
class PlaceOrder:
    customer_id: Identifier(required=True)
    amount: String(required=True, max_length=32)  # decimal string, e.g. "100.00"


@dataclass(frozen=True)
class OrderPlacement:
    order: Order
    customer: Customer
    transition: TierTransition


@loyalty.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        amount = parse_amount(command.amount)
        if amount <= 0:
            raise ValidationError({"amount": ["must be positive"]})

        customer_repo = current_domain.repository_for(Customer)
        customer = customer_repo.get(command.customer_id)

        # Priced at the tier held before this order is counted
        pricing = compute_discount(amount, customer.tier)
        order = Order.place(
            customer_id=str(customer.id),
            amount=amount,
            pricing=pricing,
            tier=customer.tier,
        )
        current_domain.repository_for(Order).add(order)

        transition = customer.record_order_completed()
        customer_repo.add(customer)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(customer.id),
            amount=order.amount,
            discount_amount=order.discount_amount,
            previous_tier=transition.previous_tier.value,
            new_tier=transition.new_tier.value,
            total_orders=transition.new_order_count,
        )
        return OrderPlacement(order=order, customer=customer, transition=transition)


def place_order(customer_id, amount) -> Order:
    """Place an order for a customer.

    Orders for the same customer are placed one at a time so each one is
    priced at the tier left behind by the previous one.
    """
    command = PlaceOrder(
        customer_id=customer_id,
        amount=None if amount is None else str(amount),
    )
    with serialized(f"customer:{command.customer_id}"):
        placement = current_domain.process(command, asynchronous=False)
    return placement.order
