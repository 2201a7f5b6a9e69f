"""Tier notification dispatch: reacts to Customer tier events.

With ``event_processing = "sync"`` the handler runs when the unit of work
that placed the order commits. Setting it to ``"async"`` hands the events to
a Protean Engine instead. A failed delivery is logged and never reaches the
caller: by the time a customer is notified the order and their new standing
are stored.
"""

from protean.utils.mixins import handle

from loyalty.customer.customer import Customer
from loyalty.customer.events import NextTierApproaching, TierUpgraded
from loyalty.domain import loyalty
from loyalty.notification.channel import get_channel
from loyalty.notification.channel.email_port import EmailPort
from loyalty.notification.templates import TierProgressionTemplate, TierUpgradeTemplate
from loyalty.utils.logging import get_logger

logger = get_logger(__name__)


class Notifier:
    """Renders tier notifications and sends them through an email channel."""

    def __init__(self, channel: EmailPort):
        self.channel = channel

    def send_upgrade(self, customer_id, name: str, email: str, tier: str) -> None:
        message = TierUpgradeTemplate.render({"name": name, "tier": tier})
        self._deliver(str(customer_id), email, message, notification="TierUpgrade")

    def send_progression_alert(
        self,
        customer_id,
        name: str,
        email: str,
        tier: str,
        total_orders: int,
        orders_remaining: int,
    ) -> None:
        message = TierProgressionTemplate.render(
            {
                "name": name,
                "tier": tier,
                "total_orders": total_orders,
                "orders_remaining": orders_remaining,
            }
        )
        self._deliver(str(customer_id), email, message, notification="TierProgression")

    def _deliver(self, customer_id: str, to: str, message: dict, notification: str) -> None:
        try:
            result = self.channel.send(to=to, subject=message["subject"], body=message["body"])
        except Exception as e:
            logger.error(
                "Notification dispatch failed",
                notification=notification,
                customer_id=customer_id,
                error=str(e),
            )
            return

        if result.get("status") == "sent":
            logger.info(
                "Notification sent",
                notification=notification,
                customer_id=customer_id,
                message_id=result.get("message_id"),
            )
        else:
            logger.error(
                "Notification dispatch failed",
                notification=notification,
                customer_id=customer_id,
                error=result.get("error", "Unknown dispatch error"),
            )


@loyalty.event_handler(part_of=Customer)
class TierNotificationHandler:
    """Emails customers when they reach, or come close to, a new tier."""

    @handle(TierUpgraded)
    def on_tier_upgraded(self, event: TierUpgraded) -> None:
        try:
            Notifier(get_channel()).send_upgrade(
                customer_id=event.customer_id,
                name=event.name,
                email=event.email,
                tier=event.new_tier,
            )
        except Exception as e:
            logger.error(
                "Tier upgrade notification skipped",
                customer_id=str(event.customer_id),
                error=str(e),
            )

    @handle(NextTierApproaching)
    def on_next_tier_approaching(self, event: NextTierApproaching) -> None:
        try:
            Notifier(get_channel()).send_progression_alert(
                customer_id=event.customer_id,
                name=event.name,
                email=event.email,
                tier=event.tier,
                total_orders=event.total_orders,
                orders_remaining=event.orders_remaining,
            )
        except Exception as e:
            logger.error(
                "Tier progression notification skipped",
                customer_id=str(event.customer_id),
                error=str(e),
            )
