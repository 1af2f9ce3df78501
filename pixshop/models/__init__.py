from .cart import CartLine, CartSummary
from .document import StoreDocument
from .order import Order, OrderStatus
from .payment import PixSettings
from .product import Product
from .ticket import Ticket, TicketStatus

__all__ = [
    'CartLine',
    'CartSummary',
    'StoreDocument',
    'Order',
    'OrderStatus',
    'PixSettings',
    'Product',
    'Ticket',
    'TicketStatus',
]
