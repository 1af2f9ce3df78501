# pixshop/handlers/user_handlers.py
import discord
from .base_handler import BaseHandler

class UserHandler(BaseHandler):
    """Slash commands open to every member"""

    async def help(self, interaction: discord.Interaction):
        await self.reply(interaction, embed=self.messages.help())

    async def list_products(self, interaction: discord.Interaction):
        """Active products of the current channel"""
        products = await self.product_service.list_active(interaction.channel_id)
        if not products:
            await self.reply(interaction, "📦 No products registered in this channel.")
            return

        channel_name = getattr(interaction.channel, "name", None) or "channel"
        await self.reply(interaction, embed=self.messages.product_list(products, channel_name))

    async def buy(self, interaction: discord.Interaction, name: str):
        """Buy one product directly: opens a ticket with a PENDING order"""
        await interaction.response.defer(ephemeral=True)
        order, ticket = await self.order_service.purchase(
            buyer_id=interaction.user.id,
            buyer_name=interaction.user.name,
            product_name=name,
            scope_id=interaction.channel_id,
            channels=self.ticket_channels(interaction)
        )
        self.ticket_service.track(ticket)
        await self.reply(
            interaction,
            f"✅ Order `{order.id}` created. Pay in your ticket: <#{ticket.channel_id}>"
        )
