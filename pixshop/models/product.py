# pixshop/models/product.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional
from pydantic import field_validator
from .base import DocumentModel

CENTS = Decimal("0.01")

def to_price(value) -> Decimal:
    """Coerce a user or stored amount into a non-negative two-place Decimal"""
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"not a number: {value!r}") from None
    if not amount.is_finite() or amount < 0:
        raise ValueError("price must be a non-negative number")
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)

class Product(DocumentModel):
    """Product sold in a single channel's catalog"""
    id: str
    channel_id: Optional[str] = None
    name: str
    price: Decimal
    description: str = ""
    image_url: str = ""
    active: bool = True

    # Handed to the buyer when an admin confirms a ledger order
    delivery: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def _quantize_price(cls, value):
        return to_price(value)

    def in_scope(self, scope_id) -> bool:
        return scope_id is None or self.channel_id == str(scope_id)
