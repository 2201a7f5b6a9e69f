"""Customer removal — command and handler.

Orders already placed by the customer are kept as they are.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from loyalty.customer.customer import Customer
from loyalty.domain import loyalty, logger
from loyalty.utils.locks import serialized


@loyalty.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


@loyalty.command_handler(part_of=Customer)
class DeleteCustomerHandler:
    @handle(DeleteCustomer)
    def delete_customer(self, command):
        customer = current_domain.repository_for(Customer).delete_by_id(command.customer_id)
        logger.info("Customer deleted", customer_id=str(customer.id))


def delete_customer(customer_id) -> None:
    command = DeleteCustomer(customer_id=customer_id)
    with serialized(f"customer:{command.customer_id}"):
        current_domain.process(command, asynchronous=False)
