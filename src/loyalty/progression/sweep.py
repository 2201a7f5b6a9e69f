"""Tier progression sweep — daily reminder for customers one order short of a tier.

Triggered once a day by the scheduler runner (``src/scheduler.py``) or on
demand through the maintenance API endpoint. The sweep only reads customers
and sends alerts, so it can run while orders are being placed. It does not
remember earlier alerts: a customer who stays one order short is alerted on
every run, in addition to the alert sent when the order that brought them
there was placed.
"""

from datetime import UTC, datetime

from protean import handle
from protean.fields import DateTime
from protean.utils.globals import current_domain

from loyalty.customer.customer import Customer
from loyalty.customer.repository import CustomerRepository
from loyalty.domain import loyalty
from loyalty.notification.channel import get_channel
from loyalty.notification.decision import PROGRESSION_THRESHOLDS
from loyalty.notification.notifier import Notifier
from loyalty.tier.policy import orders_until_next_tier
from loyalty.utils.logging import get_logger

logger = get_logger(__name__)


class TierProgressionSweep:
    def __init__(self, customers: CustomerRepository, notifier: Notifier):
        self.customers = customers
        self.notifier = notifier

    def run(self, as_of=None) -> int:
        """Alert every customer one order short of the next tier; return how many."""
        alerted = 0
        for tier, order_count in PROGRESSION_THRESHOLDS.items():
            for customer in self.customers.find_by_tier_and_order_count(tier, order_count):
                self.notifier.send_progression_alert(
                    customer_id=customer.id,
                    name=customer.name,
                    email=customer.email,
                    tier=customer.tier,
                    total_orders=customer.total_orders,
                    orders_remaining=orders_until_next_tier(customer.total_orders),
                )
                alerted += 1

        logger.info(
            "Tier progression sweep complete",
            alerted_count=alerted,
            as_of=str(as_of or datetime.now(UTC)),
        )
        return alerted


@loyalty.command(part_of="Customer")
class SweepTierProgressions:
    """Send progression alerts to every customer one order short of a tier."""

    as_of: DateTime()  # Optional: defaults to now


@loyalty.command_handler(part_of=Customer)
class SweepTierProgressionsHandler:
    @handle(SweepTierProgressions)
    def sweep_tier_progressions(self, command):
        sweep = TierProgressionSweep(
            customers=current_domain.repository_for(Customer),
            notifier=Notifier(get_channel()),
        )
        return sweep.run(as_of=command.as_of)
