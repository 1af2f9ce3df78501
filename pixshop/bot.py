# pixshop/bot.py
import logging
from typing import Literal, Optional
import discord
from discord import app_commands
from .config import Config
from .database.database import Database
from .handlers import AdminHandler, CallbackHandler, UserHandler
from .services.cart_service import CartService
from .services.product_service import ProductService
from .services.settings_service import SettingsService
from .services.ticket_service import TicketService

class PixStoreBot:
    def __init__(self):
        """Set up the client, the store and the handlers"""
        Config.validate()
        self.logger = logging.getLogger(__name__)

        self.client = discord.Client(
            intents=discord.Intents.default(),
            application_id=Config.CLIENT_ID
        )
        self.tree = app_commands.CommandTree(self.client)
        self.guild = discord.Object(id=Config.GUILD_ID)

        self.db = Database(Config.DB_PATH)
        self.ticket_service = TicketService(
            CartService(),
            ProductService(self.db),
            SettingsService(self.db),
            close_delay=Config.TICKET_CLOSE_DELAY
        )
        self.admin_handler = AdminHandler(self.db, self.ticket_service)
        self.user_handler = UserHandler(self.db, self.ticket_service)
        self.callback_handler = CallbackHandler(self.db, self.ticket_service)

        self.setup_handlers()

    def setup_handlers(self):
        """Register slash commands and event listeners"""
        admin = self.admin_handler
        user = self.user_handler

        @self.tree.command(name="panel", description="Post the store panel in this channel (admin)")
        @app_commands.describe(
            title="Panel title",
            description="Panel text",
            footer="Footer (optional)",
            image="Panel image (optional)"
        )
        async def panel(interaction: discord.Interaction, title: Optional[str] = None,
                        description: Optional[str] = None, footer: Optional[str] = None,
                        image: Optional[discord.Attachment] = None):
            await admin.post_panel(interaction, title, description, footer, image)

        pix = app_commands.Group(name="pix", description="PIX payment settings (admin)")

        @pix.command(name="set", description="Configure where PIX payments go")
        @app_commands.describe(key="PIX key", name="Recipient name", city="Recipient city",
                               qr="QR code image (optional)")
        async def pix_set(interaction: discord.Interaction, key: str, name: str, city: str,
                          qr: Optional[discord.Attachment] = None):
            await admin.set_pix(interaction, key, name, city, qr)

        @pix.command(name="show", description="Show the current PIX settings")
        async def pix_show(interaction: discord.Interaction):
            await admin.show_pix(interaction)

        product = app_commands.Group(name="product", description="Manage this channel's products")

        @product.command(name="add", description="Add a product TO THIS CHANNEL (admin)")
        @app_commands.describe(
            name="Product name",
            price="Price in R$",
            description="Description (optional)",
            image="Product image (optional)",
            delivery="Text delivered after payment is confirmed (optional)"
        )
        async def product_add(interaction: discord.Interaction, name: str, price: float,
                              description: Optional[str] = None,
                              image: Optional[discord.Attachment] = None,
                              delivery: Optional[str] = None):
            await admin.add_product(interaction, name, price, description, image, delivery)

        @product.command(name="list", description="List this channel's products")
        async def product_list(interaction: discord.Interaction):
            await user.list_products(interaction)

        @product.command(name="remove", description="Deactivate a product of this channel (admin)")
        @app_commands.describe(id="Product ID")
        async def product_remove(interaction: discord.Interaction, id: str):
            await admin.remove_product(interaction, id)

        @self.tree.command(name="buy", description="Buy a product of this channel by name")
        @app_commands.describe(name="Product name")
        async def buy(interaction: discord.Interaction, name: str):
            await user.buy(interaction, name)

        @self.tree.command(name="confirm", description="Confirm an order's payment (admin)")
        @app_commands.describe(order_id="Order ID")
        async def confirm(interaction: discord.Interaction, order_id: str):
            await admin.confirm_order(interaction, order_id)

        @self.tree.command(name="orders", description="List orders (admin)")
        @app_commands.describe(status="Only orders with this status")
        async def orders(interaction: discord.Interaction,
                         status: Optional[Literal["PENDING", "PAID"]] = None):
            await admin.list_orders(interaction, status)

        @self.tree.command(name="help", description="How the store works")
        async def help_(interaction: discord.Interaction):
            await user.help(interaction)

        self.tree.add_command(pix)
        self.tree.add_command(product)

        @self.tree.error
        async def on_app_command_error(interaction: discord.Interaction,
                                       error: app_commands.AppCommandError):
            await admin.handle_error(interaction, getattr(error, "original", error))

        async def on_interaction(interaction: discord.Interaction):
            if interaction.type == discord.InteractionType.component:
                await self.callback_handler.handle_callback(interaction)

        async def on_ready():
            self.logger.info(f"Logged in as {self.client.user}")

        self.client.event(on_interaction)
        self.client.event(on_ready)

    async def sync_commands(self):
        self.tree.copy_global_to(guild=self.guild)
        commands = await self.tree.sync(guild=self.guild)
        self.logger.info(f"Registered {len(commands)} commands in guild {Config.GUILD_ID}")

    async def start(self):
        """Open the store and run until the connection is closed"""
        await self.db.connect()
        try:
            async with self.client:
                await self.client.login(Config.DISCORD_TOKEN)
                await self.sync_commands()
                await self.client.connect()
        finally:
            await self.db.close()
