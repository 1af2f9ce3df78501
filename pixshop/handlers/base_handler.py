# pixshop/handlers/base_handler.py
import logging
import discord
from ..config import Config
from ..services.order_service import OrderService
from ..services.product_service import ProductService
from ..services.settings_service import SettingsService
from ..services.ticket_service import TicketService
from ..utils.errors import AdminOnlyError, ShopError
from ..utils.keyboards import Keyboards
from ..utils.messages import Messages
from .ticket_channels import DiscordTicketChannels

GENERIC_FAILURE = "❌ Something went wrong. Please try again later."

class BaseHandler:
    """Shared services and helpers for the interaction handlers"""
    def __init__(self, db, ticket_service: TicketService):
        self.db = db
        self.product_service = ProductService(db)
        self.settings_service = SettingsService(db)
        self.order_service = OrderService(db, self.product_service, self.settings_service)
        self.ticket_service = ticket_service
        self.keyboards = Keyboards()
        self.messages = Messages()
        self.logger = logging.getLogger(self.__class__.__module__)

    @staticmethod
    def is_admin(member) -> bool:
        """Administrator permission or the configured admin role"""
        permissions = getattr(member, "guild_permissions", None)
        if permissions is not None and permissions.administrator:
            return True
        return any(role.id == Config.ADMIN_ROLE_ID for role in getattr(member, "roles", []))

    def require_admin(self, interaction: discord.Interaction):
        if not self.is_admin(interaction.user):
            raise AdminOnlyError()

    @staticmethod
    def ticket_channels(interaction: discord.Interaction) -> DiscordTicketChannels:
        return DiscordTicketChannels(
            interaction.guild,
            Config.SALES_CATEGORY_ID,
            Config.ADMIN_ROLE_ID
        )

    @staticmethod
    async def reply(interaction: discord.Interaction, content: str = None, **kwargs):
        """Answer the interaction, or follow up if it was already answered"""
        kwargs.setdefault("ephemeral", True)
        if interaction.response.is_done():
            await interaction.followup.send(content, **kwargs)
        else:
            await interaction.response.send_message(content, **kwargs)

    async def handle_error(self, interaction: discord.Interaction, error: Exception):
        """Turn any failure into a private reply; the process keeps running"""
        if isinstance(error, ShopError):
            message = str(error)
        else:
            self.logger.error(f"Error handling interaction: {error}", exc_info=error)
            message = GENERIC_FAILURE
        try:
            await self.reply(interaction, message)
        except discord.HTTPException as e:
            self.logger.warning(f"Could not report error to user: {e}")
