"""Customer details management — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from loyalty.customer.customer import Customer, DuplicateEmailError
from loyalty.domain import loyalty
from loyalty.utils.locks import serialized


@loyalty.command(part_of="Customer")
class UpdateCustomerDetails:
    customer_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254)


@loyalty.command_handler(part_of=Customer)
class ManageCustomerDetailsHandler:
    @handle(UpdateCustomerDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        owner = repo.find_by_email(command.email)
        if owner is not None and str(owner.id) != str(customer.id):
            raise DuplicateEmailError(command.email)

        customer.update_details(name=command.name, email=command.email)
        repo.add(customer)


def update_customer_details(customer_id, name, email) -> None:
    """Update details while holding both the customer and the target email locks."""
    command = UpdateCustomerDetails(customer_id=customer_id, name=name, email=email)
    with serialized(f"customer:{command.customer_id}", f"email:{command.email}"):
        current_domain.process(command, asynchronous=False)
