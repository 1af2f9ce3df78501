# pixshop/models/order.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import field_validator
from .base import TimeStampedModel
from .product import to_price

class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"

class Order(TimeStampedModel):
    """Single-product purchase with a snapshot of the product at buy time"""
    id: str
    product_id: str
    product_name: str
    price: Decimal
    buyer_id: str
    channel_id: str
    status: OrderStatus = OrderStatus.PENDING
    paid_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def _quantize_price(cls, value):
        return to_price(value)

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID
