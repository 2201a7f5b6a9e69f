"""Tier progression template — sent when a customer is close to the next tier."""

from loyalty.tier.policy import discount_percentage, next_tier


class TierProgressionTemplate:
    subject = "Almost there! You're close to a tier upgrade!"

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name", "there")
        total_orders = context["total_orders"]
        remaining = context["orders_remaining"]
        upcoming = next_tier(context["tier"])
        plural = "" if remaining == 1 else "s"
        return {
            "subject": TierProgressionTemplate.subject,
            "body": (
                f"Dear {name}, you have placed {total_orders} orders with us. "
                f"Place {remaining} more order{plural} to be promoted to {upcoming.value} tier "
                f"and enjoy {discount_percentage(upcoming)}% discount!"
            ),
        }
