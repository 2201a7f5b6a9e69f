"""Tier upgrade template — sent the moment a customer's tier changes."""

from loyalty.tier.policy import discount_percentage


class TierUpgradeTemplate:
    subject = "Congratulations on Your Tier Upgrade!"

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name", "there")
        tier = context["tier"]
        return {
            "subject": TierUpgradeTemplate.subject,
            "body": (
                f"Congratulations {name}! You have been upgraded to {tier} tier. "
                f"You now enjoy a {discount_percentage(tier)}% discount on all your orders!"
            ),
        }
