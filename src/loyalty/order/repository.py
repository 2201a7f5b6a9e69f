"""Repository for the Order aggregate."""

from loyalty.domain import loyalty
from loyalty.order.order import Order


@loyalty.repository(part_of=Order)
class OrderRepository:
    def find_by_customer_id(self, customer_id) -> list[Order]:
        orders = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return sorted(orders, key=lambda order: order.order_date)

    def find_all(self) -> list[Order]:
        return self._dao.query.all().items
