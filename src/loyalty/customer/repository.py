"""Repository for the Customer aggregate."""

from protean.exceptions import ObjectNotFoundError

from loyalty.customer.customer import Customer
from loyalty.domain import loyalty
from loyalty.tier.policy import as_tier


@loyalty.repository(part_of=Customer)
class CustomerRepository:
    """Customer store with the lookups the loyalty rules need.

    ``get``/``add`` come from the base repository; ``get`` raises
    ObjectNotFoundError for an unknown id.
    """

    def find_by_email(self, email: str) -> Customer | None:
        results = self._dao.query.filter(email=email).all().items
        return results[0] if results else None

    def get_by_email(self, email: str) -> Customer:
        customer = self.find_by_email(email)
        if customer is None:
            raise ObjectNotFoundError(f"`Customer` object with email {email!r} does not exist.")
        return customer

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def find_by_tier_and_order_count(self, tier, total_orders: int) -> list[Customer]:
        return self._dao.query.filter(tier=as_tier(tier).value, total_orders=total_orders).all().items

    def find_all(self) -> list[Customer]:
        return self._dao.query.all().items

    def delete_by_id(self, customer_id) -> Customer:
        customer = self.get(customer_id)
        self._dao.delete(customer)
        return customer
