# pixshop/handlers/admin_handlers.py
from typing import Optional
import discord
from .base_handler import BaseHandler
from ..models.order import OrderStatus

DEFAULT_PANEL_TITLE = "🛍 Store"
DEFAULT_PANEL_DESCRIPTION = "Press **Buy** to pick a product, or **View cart** to check your cart."

class AdminHandler(BaseHandler):
    """Slash commands for store administrators"""

    async def post_panel(self, interaction: discord.Interaction, title: Optional[str] = None,
                         description: Optional[str] = None, footer: Optional[str] = None,
                         image: Optional[discord.Attachment] = None):
        """Post the storefront panel in the current channel"""
        self.require_admin(interaction)
        await interaction.response.send_message(
            embed=self.messages.panel(
                title or DEFAULT_PANEL_TITLE,
                description or DEFAULT_PANEL_DESCRIPTION,
                footer or "",
                image.url if image else ""
            ),
            view=self.keyboards.panel()
        )
        self.logger.info(f"Panel posted in channel {interaction.channel_id} by {interaction.user.id}")

    async def set_pix(self, interaction: discord.Interaction, key: str, name: str, city: str,
                      qr: Optional[discord.Attachment] = None):
        self.require_admin(interaction)
        pix = await self.settings_service.update_pix_settings(
            key, name, city, qr.url if qr else None
        )
        await self.reply(interaction, "✅ PIX configured!\n" + self.messages.pix_settings(pix))

    async def show_pix(self, interaction: discord.Interaction):
        self.require_admin(interaction)
        pix = await self.settings_service.get_pix_settings()
        status = "✅ Ready for checkout" if pix.is_configured else "⚠️ Incomplete, checkout is blocked"
        await self.reply(interaction, f"{status}\n{self.messages.pix_settings(pix)}")

    async def add_product(self, interaction: discord.Interaction, name: str, price: float,
                          description: Optional[str] = None,
                          image: Optional[discord.Attachment] = None,
                          delivery: Optional[str] = None):
        """Add a product to this channel's catalog"""
        self.require_admin(interaction)
        product = await self.product_service.add_product(
            name=name,
            price=price,
            channel_id=interaction.channel_id,
            description=description or "",
            image_url=image.url if image else "",
            delivery=delivery or ""
        )
        await self.reply(interaction, self.messages.product_added(product))

    async def remove_product(self, interaction: discord.Interaction, product_id: str):
        self.require_admin(interaction)
        product = await self.product_service.deactivate(product_id.strip(), interaction.channel_id)
        await self.reply(interaction, f"🗑️ Product deactivated: **{product.name}**")

    async def confirm_order(self, interaction: discord.Interaction, order_id: str):
        """Mark a ledger order as paid and deliver it in its ticket"""
        self.require_admin(interaction)
        await interaction.response.defer(ephemeral=True)
        order, delivered = await self.order_service.confirm(
            order_id.strip(), self.ticket_channels(interaction)
        )
        if delivered:
            message = f"✅ Order `{order.id}` confirmed and delivered in <#{order.channel_id}>."
        else:
            message = (
                f"⚠️ Order `{order.id}` is marked as paid, but the delivery could not be "
                f"posted in <#{order.channel_id}>. Please deliver it manually."
            )
        await self.reply(interaction, message)

    async def list_orders(self, interaction: discord.Interaction, status: Optional[str] = None):
        self.require_admin(interaction)
        orders = await self.order_service.list_orders(OrderStatus(status) if status else None)
        await self.reply(interaction, self.messages.order_list(orders))
