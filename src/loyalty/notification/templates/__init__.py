"""Notification templates — each renders a subject and body from a context dict."""

from loyalty.notification.templates.tier_progression import TierProgressionTemplate
from loyalty.notification.templates.tier_upgrade import TierUpgradeTemplate

__all__ = ["TierProgressionTemplate", "TierUpgradeTemplate"]
