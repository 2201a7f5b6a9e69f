"""Loyalty bounded context — customers, orders and tier-based discounts.

Customers progress through loyalty tiers as they place orders. Every order is
priced with the discount of the tier the customer holds when the order is
placed, and customers are notified when they reach or approach a new tier.
"""

from protean.domain import Domain

from loyalty.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
loyalty = Domain(name="loyalty")
