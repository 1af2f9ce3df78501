# pixshop/models/ticket.py
from enum import Enum
from typing import Optional
from pydantic import BaseModel
from .cart import CartSummary

class TicketStatus(str, Enum):
    AWAITING_PAYMENT = "awaiting_payment"
    PAID_SIGNALED = "paid_signaled"
    CLOSING = "closing"
    CLOSED = "closed"

class Ticket(BaseModel):
    """Private channel opened for one purchase"""
    channel_id: int
    owner_id: int
    scope_id: Optional[int] = None
    summary: Optional[CartSummary] = None
    order_id: Optional[str] = None
    status: TicketStatus = TicketStatus.AWAITING_PAYMENT
