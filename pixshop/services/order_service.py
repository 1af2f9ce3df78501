# pixshop/services/order_service.py
import logging
import secrets
import time
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from ..models.order import Order, OrderStatus
from ..models.ticket import Ticket
from ..utils.errors import (
    OrderAlreadyPaidError,
    OrderNotFoundError,
    PixNotConfiguredError,
    ProductNotFoundError,
    TicketCategoryMissingError,
)
from .product_service import ProductService
from .settings_service import SettingsService
from .ticket_service import TicketChannels, open_ticket_channel

def new_order_id() -> str:
    return f"o_{int(time.time() * 1000)}_{secrets.token_hex(2)}"

class OrderService:
    """Single-product purchases recorded in the order ledger"""

    def __init__(self, db, products: ProductService, settings: SettingsService):
        self.db = db
        self.products = products
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    async def purchase(self, buyer_id: int, buyer_name: str, product_name: str,
                       scope_id: int, channels: TicketChannels) -> Tuple[Order, Ticket]:
        """Open a ticket and record a PENDING order for one product"""
        product = await self.products.find_active_by_name(product_name, scope_id)
        if product is None:
            raise ProductNotFoundError()

        pix = await self.settings.get_pix_settings()
        if not pix.is_configured:
            raise PixNotConfiguredError()

        if not await channels.category_exists():
            raise TicketCategoryMissingError()

        # The channel must exist before any order points at it
        channel_id = await open_ticket_channel(channels, buyer_id, buyer_name)

        order = Order(
            id=new_order_id(),
            product_id=product.id,
            product_name=product.name,
            price=product.price,
            buyer_id=str(buyer_id),
            channel_id=str(channel_id),
            status=OrderStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        async with self.db.transaction() as doc:
            doc.orders.append(order)
        self.logger.info(f"Order {order.id} created for {buyer_id}: {product.name} ({product.price})")

        await channels.post_order_instructions(channel_id, order, pix)
        ticket = Ticket(channel_id=channel_id, owner_id=buyer_id, scope_id=scope_id, order_id=order.id)
        return order, ticket

    async def get_order(self, order_id: str) -> Optional[Order]:
        doc = await self.db.load()
        return next((o for o in doc.orders if o.id == order_id), None)

    async def list_orders(self, status: Optional[OrderStatus] = None) -> List[Order]:
        doc = await self.db.load()
        return [o for o in doc.orders if status is None or o.status == status]

    async def mark_paid(self, order_id: str) -> Order:
        """PENDING → PAID, exactly once"""
        async with self.db.transaction() as doc:
            order = next((o for o in doc.orders if o.id == order_id), None)
            if order is None:
                raise OrderNotFoundError()
            if order.is_paid:
                raise OrderAlreadyPaidError()
            now = datetime.now(timezone.utc)
            order.status = OrderStatus.PAID
            order.paid_at = now
            order.updated_at = now

        self.logger.info(f"Order {order_id} marked as paid")
        return order

    async def confirm(self, order_id: str, channels: TicketChannels) -> Tuple[Order, bool]:
        """Mark the order paid and hand the delivery over in its ticket.

        Returns the order and whether the delivery message was posted.
        """
        order = await self.mark_paid(order_id)

        product = await self.products.get_product(order.product_id)
        payload = product.delivery if product else ""
        try:
            await channels.post_delivery(int(order.channel_id), order, payload)
        except Exception as e:
            self.logger.warning(f"Order {order_id} is paid but delivery could not be posted: {e}")
            return order, False
        return order, True
