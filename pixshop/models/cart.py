# pixshop/models/cart.py
from decimal import Decimal
from typing import List
from pydantic import BaseModel
from ..utils.formatters import format_price

class CartLine(BaseModel):
    """One resolved cart entry"""
    product_id: str
    name: str
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity} — {format_price(self.subtotal)}"

class CartSummary(BaseModel):
    items: List[CartLine] = []

    @property
    def lines(self) -> List[str]:
        return [str(item) for item in self.items]

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0.00"))

    @property
    def is_empty(self) -> bool:
        """Nothing to pay for; gates checkout, not rendering"""
        return self.total <= 0
