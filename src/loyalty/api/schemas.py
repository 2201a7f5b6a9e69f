"""Pydantic request/response schemas for the Loyalty API.

Money travels as decimals (serialized as JSON strings), never as floats.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Test User",
                    "email": "test@example.com",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=254)
    tier: str | None = Field(None, max_length=20, description="Starting tier for migrated customers")


class UpdateCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Test User",
                    "email": "test.user@example.com",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=254)


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "amount": "100.00",
                }
            ]
        }
    }

    customer_id: str
    amount: Decimal


class SweepRequest(BaseModel):
    as_of: datetime | None = None


# --- Response Schemas ---


class CustomerResponse(BaseModel):
    id: str
    name: str
    email: str
    tier: str
    total_orders: int

    @classmethod
    def from_customer(cls, customer) -> CustomerResponse:
        return cls(
            id=str(customer.id),
            name=customer.name,
            email=customer.email,
            tier=customer.tier,
            total_orders=customer.total_orders,
        )


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    amount: Decimal
    discount_amount: Decimal
    final_amount: Decimal
    order_date: datetime

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            amount=Decimal(order.amount),
            discount_amount=Decimal(order.discount_amount),
            final_amount=Decimal(order.final_amount),
            order_date=order.order_date,
        )


class SweepResponse(BaseModel):
    status: str = "ok"
    alerted_count: int
