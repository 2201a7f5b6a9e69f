"""FastAPI routes for the Loyalty bounded context.

Each route translates between Pydantic schemas (external contract) and
Protean commands or repository lookups (internal domain concepts).
"""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from loyalty.api.schemas import (
    CreateCustomerRequest,
    CreateOrderRequest,
    CustomerResponse,
    OrderResponse,
    SweepRequest,
    SweepResponse,
    UpdateCustomerRequest,
)
from loyalty.customer.customer import Customer
from loyalty.customer.profile import update_customer_details
from loyalty.customer.registration import register_customer
from loyalty.customer.removal import delete_customer
from loyalty.order.order import Order
from loyalty.order.placement import place_order
from loyalty.progression.sweep import SweepTierProgressions

customer_router = APIRouter(prefix="/customers", tags=["customers"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
maintenance_router = APIRouter(prefix="/maintenance", tags=["maintenance"])


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------
@customer_router.post("", status_code=201, response_model=CustomerResponse)
async def create_customer(body: CreateCustomerRequest) -> CustomerResponse:
    """Register a customer. Email must be unique."""
    customer_id = register_customer(name=body.name, email=body.email, tier=body.tier)
    customer = current_domain.repository_for(Customer).get(customer_id)
    return CustomerResponse.from_customer(customer)


@customer_router.get("", response_model=list[CustomerResponse])
async def list_customers() -> list[CustomerResponse]:
    customers = current_domain.repository_for(Customer).find_all()
    return [CustomerResponse.from_customer(c) for c in customers]


@customer_router.get("/email/{email}", response_model=CustomerResponse)
async def get_customer_by_email(email: str) -> CustomerResponse:
    customer = current_domain.repository_for(Customer).get_by_email(email)
    return CustomerResponse.from_customer(customer)


@customer_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str) -> CustomerResponse:
    customer = current_domain.repository_for(Customer).get(customer_id)
    return CustomerResponse.from_customer(customer)


@customer_router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(customer_id: str, body: UpdateCustomerRequest) -> CustomerResponse:
    """Change a customer's name and email. Tier and order count are unaffected."""
    update_customer_details(customer_id=customer_id, name=body.name, email=body.email)
    customer = current_domain.repository_for(Customer).get(customer_id)
    return CustomerResponse.from_customer(customer)


@customer_router.delete("/{customer_id}", status_code=204)
async def remove_customer(customer_id: str) -> Response:
    delete_customer(customer_id)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    """Place an order, discounted at the customer's current tier."""
    order = place_order(customer_id=body.customer_id, amount=body.amount)
    return OrderResponse.from_order(order)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).find_all()
    return [OrderResponse.from_order(o) for o in orders]


@order_router.get("/customer/{customer_id}", response_model=list[OrderResponse])
async def list_customer_orders(customer_id: str) -> list[OrderResponse]:
    # Unknown customers are a 404, not an empty list
    current_domain.repository_for(Customer).get(customer_id)
    orders = current_domain.repository_for(Order).find_by_customer_id(customer_id)
    return [OrderResponse.from_order(o) for o in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse.from_order(order)


# ---------------------------------------------------------------------------
# Maintenance
# ---------------------------------------------------------------------------
@maintenance_router.post("/tier-progressions", response_model=SweepResponse)
async def sweep_tier_progressions(body: SweepRequest | None = None) -> SweepResponse:
    """Alert customers one order short of the next tier.

    Normally run daily by the scheduler; every call alerts again.
    """
    command = SweepTierProgressions(as_of=body.as_of if body else None)
    alerted_count = current_domain.process(command, asynchronous=False)
    return SweepResponse(alerted_count=alerted_count)
