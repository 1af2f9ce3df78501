# pixshop/services/ticket_service.py
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
from ..models.cart import CartSummary
from ..models.order import Order
from ..models.payment import PixSettings
from ..models.product import Product
from ..models.ticket import Ticket, TicketStatus
from ..utils.errors import (
    EmptyCartError,
    NotForYouError,
    PixNotConfiguredError,
    ProductNotFoundError,
    TicketCategoryMissingError,
    TicketChannelError,
)
from ..utils.tokens import ActionToken
from .cart_service import CartService
from .product_service import ProductService
from .settings_service import SettingsService


class TicketChannels(ABC):
    """What the workflow needs from the chat platform"""

    @abstractmethod
    async def category_exists(self) -> bool:
        ...

    @abstractmethod
    async def create_ticket(self, owner_id: int, owner_name: str) -> int:
        """Create a channel visible to the owner and the admin role, return its id"""

    @abstractmethod
    async def post_payment_instructions(self, channel_id: int, owner_id: int,
                                        summary: CartSummary, pix: PixSettings):
        ...

    @abstractmethod
    async def post_order_instructions(self, channel_id: int, order: Order, pix: PixSettings):
        ...

    @abstractmethod
    async def post_delivery(self, channel_id: int, order: Order, payload: str):
        ...

    @abstractmethod
    async def delete(self, channel_id: int):
        ...


async def open_ticket_channel(channels: TicketChannels, owner_id: int, owner_name: str) -> int:
    """Create the ticket channel or raise TicketChannelError"""
    try:
        return await channels.create_ticket(owner_id, owner_name)
    except Exception as e:
        logging.getLogger(__name__).error(
            f"Could not create ticket channel for {owner_id}: {e}", exc_info=True
        )
        raise TicketChannelError() from e


class TicketService:
    """Cart → review → ticket → paid/closed flow for one channel's store"""

    def __init__(self, carts: CartService, products: ProductService,
                 settings: SettingsService, close_delay: float = 5):
        self.carts = carts
        self.products = products
        self.settings = settings
        self.close_delay = close_delay
        self.tickets: Dict[int, Ticket] = {}
        self._closing: Dict[int, asyncio.Task] = {}
        # Status each closing ticket returns to if the close is cancelled
        self._status_before_close: Dict[int, TicketStatus] = {}
        self.logger = logging.getLogger(__name__)

    async def open_picker(self, scope_id: int) -> List[Product]:
        return await self.products.list_active(scope_id)

    async def view_cart(self, customer_id: int, scope_id: int) -> CartSummary:
        catalog = await self.products.list_active(scope_id)
        return self.carts.summarize(customer_id, scope_id, catalog)

    async def add_to_cart(self, customer_id: int, scope_id: int,
                          product_id: str) -> Tuple[Product, CartSummary]:
        product = await self.products.find_active(product_id, scope_id)
        if product is None:
            raise ProductNotFoundError("❌ Invalid product.")
        self.carts.add(customer_id, scope_id, product.id)
        return product, await self.view_cart(customer_id, scope_id)

    def clear_cart(self, customer_id: int, scope_id: int):
        self.carts.clear(customer_id, scope_id)

    async def review(self, customer_id: int, scope_id: int) -> CartSummary:
        summary = await self.view_cart(customer_id, scope_id)
        if summary.is_empty:
            raise EmptyCartError()
        return summary

    async def confirm(self, customer_id: int, customer_name: str, scope_id: int,
                      channels: TicketChannels) -> Ticket:
        """Turn the cart into a private ticket with payment instructions"""
        pix = await self.settings.get_pix_settings()
        if not pix.is_configured:
            raise PixNotConfiguredError()

        summary = await self.view_cart(customer_id, scope_id)
        if summary.is_empty:
            raise EmptyCartError()

        if not await channels.category_exists():
            raise TicketCategoryMissingError()

        channel_id = await open_ticket_channel(channels, customer_id, customer_name)
        try:
            await channels.post_payment_instructions(channel_id, customer_id, summary, pix)
        except Exception as e:
            self.logger.error(
                f"Could not post payment instructions in ticket {channel_id}: {e}", exc_info=True
            )
            await self._discard_channel(channel_id, channels)
            raise TicketChannelError() from e
        self.carts.clear(customer_id, scope_id)

        ticket = Ticket(
            channel_id=channel_id,
            owner_id=customer_id,
            scope_id=scope_id,
            summary=summary,
        )
        self.tickets[channel_id] = ticket
        self.logger.info(
            f"Ticket {channel_id} opened for {customer_id} ({summary.total} in channel {scope_id})"
        )
        return ticket

    def track(self, ticket: Ticket):
        self.tickets[ticket.channel_id] = ticket

    def signal_paid(self, token: ActionToken, actor_id: int, channel_id: int) -> Optional[Ticket]:
        """Buyer says the transfer is done; staff still has to check it"""
        if token.owner_id != actor_id:
            raise NotForYouError("❌ Only the ticket owner can use this.")

        ticket = self.tickets.get(channel_id)
        if ticket is not None and ticket.status == TicketStatus.AWAITING_PAYMENT:
            ticket.status = TicketStatus.PAID_SIGNALED
        self.logger.info(f"Payment signaled by {actor_id} in ticket {channel_id}")
        return ticket

    def close(self, token: ActionToken, actor_id: int, actor_is_admin: bool,
              channel_id: int, channels: TicketChannels,
              delay: Optional[float] = None) -> asyncio.Task:
        """Schedule the ticket channel for deletion"""
        if token.owner_id != actor_id and not actor_is_admin:
            raise NotForYouError("❌ You cannot close this ticket.")

        pending = self._closing.get(channel_id)
        if pending is not None and not pending.done():
            return pending

        ticket = self.tickets.get(channel_id)
        if ticket is not None:
            self._status_before_close[channel_id] = ticket.status
            ticket.status = TicketStatus.CLOSING

        delay = self.close_delay if delay is None else delay
        task = asyncio.create_task(self._delete_later(channel_id, channels, delay))
        self._closing[channel_id] = task
        self.logger.info(f"Ticket {channel_id} closing in {delay}s (requested by {actor_id})")
        return task

    def cancel_close(self, channel_id: int) -> bool:
        task = self._closing.pop(channel_id, None)
        if task is None or task.done():
            return False
        task.cancel()

        previous = self._status_before_close.pop(channel_id, TicketStatus.AWAITING_PAYMENT)
        ticket = self.tickets.get(channel_id)
        if ticket is not None:
            ticket.status = previous
        self.logger.info(f"Closing of ticket {channel_id} cancelled")
        return True

    async def _discard_channel(self, channel_id: int, channels: TicketChannels):
        try:
            await channels.delete(channel_id)
        except Exception as e:
            # the channel may already be gone
            self.logger.warning(f"Could not delete ticket channel {channel_id}: {e}")

    async def _delete_later(self, channel_id: int, channels: TicketChannels, delay: float):
        await asyncio.sleep(delay)
        try:
            await self._discard_channel(channel_id, channels)
        finally:
            self._closing.pop(channel_id, None)
            self._status_before_close.pop(channel_id, None)

        ticket = self.tickets.pop(channel_id, None)
        if ticket is not None:
            ticket.status = TicketStatus.CLOSED
