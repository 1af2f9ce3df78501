# pixshop/services/cart_service.py
import logging
from typing import Dict, Iterable, MutableMapping, Optional, Tuple
from ..models.cart import CartLine, CartSummary
from ..models.product import Product

CartKey = Tuple[int, int]

class CartService:
    """In-memory carts keyed by (customer, channel).

    Carts are UI state: nothing here is persisted and a restart empties them.
    The storage mapping is injected so tests (or another backend) can supply
    their own.
    """

    def __init__(self, storage: Optional[MutableMapping[CartKey, Dict[str, int]]] = None):
        self.storage = storage if storage is not None else {}
        self.logger = logging.getLogger(__name__)

    def add(self, customer_id: int, scope_id: int, product_id: str) -> int:
        """Add one unit and return the new quantity"""
        cart = self.storage.setdefault((customer_id, scope_id), {})
        cart[product_id] = cart.get(product_id, 0) + 1
        return cart[product_id]

    def remove(self, customer_id: int, scope_id: int, product_id: str) -> int:
        """Take one unit away; entries and carts never linger at zero"""
        key = (customer_id, scope_id)
        cart = self.storage.get(key)
        if not cart or product_id not in cart:
            return 0

        quantity = cart[product_id] - 1
        if quantity > 0:
            cart[product_id] = quantity
        else:
            del cart[product_id]
            if not cart:
                del self.storage[key]
        return max(quantity, 0)

    def clear(self, customer_id: int, scope_id: int):
        self.storage.pop((customer_id, scope_id), None)

    def quantities(self, customer_id: int, scope_id: int) -> Dict[str, int]:
        return dict(self.storage.get((customer_id, scope_id), {}))

    def summarize(self, customer_id: int, scope_id: int,
                  catalog: Iterable[Product]) -> CartSummary:
        """Price the cart against the active catalog of its channel.

        Entries whose product is gone or inactive are skipped, not removed.
        """
        active = {p.id: p for p in catalog if p.active}
        items = []
        for product_id, quantity in self.quantities(customer_id, scope_id).items():
            product = active.get(product_id)
            if product is None:
                continue
            items.append(CartLine(
                product_id=product.id,
                name=product.name,
                quantity=quantity,
                unit_price=product.price,
            ))
        return CartSummary(items=items)
