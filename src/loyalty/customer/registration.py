"""Customer registration — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from loyalty.customer.customer import Customer, DuplicateEmailError
from loyalty.domain import loyalty, logger
from loyalty.tier.policy import CustomerTier
from loyalty.utils.locks import serialized


@loyalty.command(part_of="Customer")
class RegisterCustomer:
    """Enroll a new customer. ``tier`` seeds the starting tier (default REGULAR)."""

    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    tier: String(choices=CustomerTier, default=CustomerTier.REGULAR.value)


@loyalty.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        repo = current_domain.repository_for(Customer)
        if repo.exists_by_email(command.email):
            raise DuplicateEmailError(command.email)

        customer = Customer.register(
            name=command.name,
            email=command.email,
            tier=command.tier,
        )
        repo.add(customer)

        logger.info(
            "Customer registered",
            customer_id=str(customer.id),
            tier=customer.tier,
        )
        return str(customer.id)


def register_customer(name, email, tier=None) -> str:
    """Register a customer with the email uniqueness check serialized per address."""
    command = RegisterCustomer(
        name=name,
        email=email,
        tier=tier or CustomerTier.REGULAR.value,
    )
    with serialized(f"email:{command.email}"):
        return current_domain.process(command, asynchronous=False)
