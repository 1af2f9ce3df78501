# pixshop/handlers/ticket_channels.py
import logging
import discord
from ..models.cart import CartSummary
from ..models.order import Order
from ..models.payment import PixSettings
from ..services.ticket_service import TicketChannels
from ..utils.formatters import ticket_channel_name
from ..utils.keyboards import Keyboards
from ..utils.messages import Messages

class DiscordTicketChannels(TicketChannels):
    """Ticket channels under the sales category of one guild"""

    def __init__(self, guild: discord.Guild, category_id: int, admin_role_id: int):
        self.guild = guild
        self.category_id = category_id
        self.admin_role_id = admin_role_id
        self.logger = logging.getLogger(__name__)

    def _category(self):
        category = self.guild.get_channel(self.category_id)
        return category if isinstance(category, discord.CategoryChannel) else None

    async def category_exists(self) -> bool:
        return self._category() is not None

    async def create_ticket(self, owner_id: int, owner_name: str) -> int:
        member_access = discord.PermissionOverwrite(
            view_channel=True,
            send_messages=True,
            read_message_history=True
        )
        overwrites = {
            self.guild.default_role: discord.PermissionOverwrite(view_channel=False),
            discord.Object(id=owner_id, type=discord.Member): member_access,
            discord.Object(id=self.admin_role_id, type=discord.Role): member_access,
        }
        if self.guild.me is not None:
            overwrites[self.guild.me] = member_access

        channel = await self.guild.create_text_channel(
            ticket_channel_name(owner_name),
            category=self._category(),
            overwrites=overwrites,
            reason=f"Store ticket for {owner_id}"
        )
        self.logger.info(f"Created ticket channel {channel.id} for {owner_id}")
        return channel.id

    async def _channel(self, channel_id: int) -> discord.abc.Messageable:
        channel = self.guild.get_channel(channel_id)
        if channel is None:
            channel = await self.guild.fetch_channel(channel_id)
        return channel

    async def post_payment_instructions(self, channel_id: int, owner_id: int,
                                        summary: CartSummary, pix: PixSettings):
        channel = await self._channel(channel_id)
        await channel.send(
            content=Messages.new_ticket_ping(self.admin_role_id, owner_id),
            embed=Messages.payment_instructions(owner_id, summary, pix),
            view=Keyboards.ticket(owner_id)
        )

    async def post_order_instructions(self, channel_id: int, order: Order, pix: PixSettings):
        channel = await self._channel(channel_id)
        await channel.send(
            content=Messages.new_ticket_ping(self.admin_role_id, int(order.buyer_id)),
            embed=Messages.order_instructions(order, pix),
            view=Keyboards.ticket(int(order.buyer_id))
        )

    async def post_delivery(self, channel_id: int, order: Order, payload: str):
        channel = await self._channel(channel_id)
        await channel.send(Messages.delivery(order, payload))

    async def delete(self, channel_id: int):
        channel = await self._channel(channel_id)
        await channel.delete(reason="Store ticket closed")
