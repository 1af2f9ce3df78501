# pixshop/handlers/callback_handler.py
import discord
from .base_handler import BaseHandler
from ..config import Config
from ..utils.keyboards import NO_PRODUCTS
from ..utils.tokens import Action, ActionToken

class CallbackHandler(BaseHandler):
    """Buttons and menus of the panel, cart and ticket messages"""

    async def handle_callback(self, interaction: discord.Interaction):
        """Route a component interaction by its action token"""
        data = interaction.data or {}
        routes = {
            Action.OPEN_MENU: self.open_menu,
            Action.VIEW_CART: self.view_cart,
            Action.ADD_TO_CART: self.add_to_cart,
            Action.ADD_MORE: self.add_more,
            Action.CLEAR_CART: self.clear_cart,
            Action.CHECKOUT: self.checkout,
            Action.CONFIRM_ORDER: self.confirm_order,
            Action.CANCEL_ORDER: self.cancel_order,
            Action.PAID: self.mark_paid,
            Action.CLOSE: self.close_ticket,
        }
        try:
            token = ActionToken.decode(data.get("custom_id", ""))
            # Cart tokens are bound to their customer and channel
            if token.scope_id is not None:
                token.authorize(interaction.user.id, interaction.channel_id)
            await routes[token.action](interaction, token)
        except Exception as e:
            await self.handle_error(interaction, e)

    async def open_menu(self, interaction: discord.Interaction, token: ActionToken,
                        prompt: str = "Select a product (this channel only):"):
        products = await self.ticket_service.open_picker(interaction.channel_id)
        await interaction.response.send_message(
            prompt,
            view=self.keyboards.product_picker(products, interaction.user.id, interaction.channel_id),
            ephemeral=True
        )

    async def add_more(self, interaction: discord.Interaction, token: ActionToken):
        await self.open_menu(interaction, token, prompt="Choose another product from this channel:")

    async def view_cart(self, interaction: discord.Interaction, token: ActionToken):
        summary = await self.ticket_service.view_cart(interaction.user.id, interaction.channel_id)
        await interaction.response.send_message(
            self.messages.cart(summary),
            view=self.keyboards.cart(interaction.user.id, interaction.channel_id, not summary.is_empty),
            ephemeral=True
        )

    async def add_to_cart(self, interaction: discord.Interaction, token: ActionToken):
        values = (interaction.data or {}).get("values") or []
        if not values or values[0] == NO_PRODUCTS:
            await self.reply(interaction, "No products in this channel.")
            return

        product, summary = await self.ticket_service.add_to_cart(
            interaction.user.id, interaction.channel_id, values[0]
        )
        await interaction.response.send_message(
            embed=self.messages.cart_updated(summary, product),
            view=self.keyboards.cart(interaction.user.id, interaction.channel_id, not summary.is_empty),
            ephemeral=True
        )

    async def clear_cart(self, interaction: discord.Interaction, token: ActionToken):
        self.ticket_service.clear_cart(interaction.user.id, interaction.channel_id)
        await interaction.response.edit_message(
            content="🗑️ Cart emptied.",
            embed=None,
            view=self.keyboards.cart(interaction.user.id, interaction.channel_id, False)
        )

    async def checkout(self, interaction: discord.Interaction, token: ActionToken):
        summary = await self.ticket_service.review(interaction.user.id, interaction.channel_id)
        await interaction.response.send_message(
            embed=self.messages.review(summary),
            view=self.keyboards.confirm_order(interaction.user.id, interaction.channel_id),
            ephemeral=True
        )

    async def cancel_order(self, interaction: discord.Interaction, token: ActionToken):
        # The cart is left as it is
        await interaction.response.edit_message(content="Purchase cancelled.", embed=None, view=None)

    async def confirm_order(self, interaction: discord.Interaction, token: ActionToken):
        await interaction.response.defer()
        ticket = await self.ticket_service.confirm(
            interaction.user.id,
            interaction.user.name,
            interaction.channel_id,
            self.ticket_channels(interaction)
        )
        await interaction.edit_original_response(
            content=f"✅ Ticket created: <#{ticket.channel_id}>",
            embed=None,
            view=None
        )

    async def mark_paid(self, interaction: discord.Interaction, token: ActionToken):
        self.ticket_service.signal_paid(token, interaction.user.id, interaction.channel_id)
        await interaction.response.send_message(self.messages.payment_signaled(Config.ADMIN_ROLE_ID))

    async def close_ticket(self, interaction: discord.Interaction, token: ActionToken):
        self.ticket_service.close(
            token,
            interaction.user.id,
            self.is_admin(interaction.user),
            interaction.channel_id,
            self.ticket_channels(interaction)
        )
        await interaction.response.send_message(self.messages.closing(self.ticket_service.close_delay))
